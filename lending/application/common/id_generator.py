from typing import Protocol


class IdGeneratorProtocol(Protocol):
    def new(self) -> str:
        """Return a new globally unique identifier."""
        ...
