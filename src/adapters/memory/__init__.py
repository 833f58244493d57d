"""
Adapter em memória - backends 'memory' e 'ephemeral'.
"""

from .database import InMemoryDatabase
from .unit_of_work import InMemoryUnitOfWork, JsonFileUnitOfWork

__all__ = ["InMemoryDatabase", "InMemoryUnitOfWork", "JsonFileUnitOfWork"]
