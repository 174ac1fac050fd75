from collections.abc import Awaitable, Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from lending.core import container
from lending.database import DatabaseSession

T = TypeVar("T")


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession], Awaitable[T]]:
    """
    Create a FastAPI dependency for a container provider.

    Automatically handles container.db override with request-scoped database session.
    The dependency is a coroutine so the override and reset run on the event loop
    without interleaving with other requests.
    """

    async def dependency(db: DatabaseSession) -> T:
        try:
            container.db.override(db)
            return provider()
        finally:
            # Reset override once the handler graph is built
            container.db.reset_override()

    return dependency
