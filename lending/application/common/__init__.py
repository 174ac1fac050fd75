"""
Application common module.

Contains base classes for application layer:
- Command: Base class for write operations
- Query: Base class for read operations
- CommandHandler: Handles command execution
- QueryHandler: Handles query execution
- UnitOfWork: Atomic commit of staged repository changes
- IdGeneratorProtocol: Source of new aggregate identifiers
"""

from .command import Command, CommandHandler
from .id_generator import IdGeneratorProtocol
from .query import Query, QueryHandler
from .unit_of_work import UnitOfWork

__all__ = [
    "Command",
    "CommandHandler",
    "IdGeneratorProtocol",
    "Query",
    "QueryHandler",
    "UnitOfWork",
]
