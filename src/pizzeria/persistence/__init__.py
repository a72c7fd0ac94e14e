"""Persistence layer exports."""

from .errors import NotFoundError, RepositoryError
from .interfaces import Add, DataBacked, Get, Remove, Repository, Update
from .memory import (
    InMemoryCustomerRepository,
    InMemoryIngredientRepository,
    InMemoryPizzaRepository,
    InMemoryUserRepository,
)

__all__ = [
    "Add",
    "DataBacked",
    "Get",
    "InMemoryCustomerRepository",
    "InMemoryIngredientRepository",
    "InMemoryPizzaRepository",
    "InMemoryUserRepository",
    "NotFoundError",
    "Remove",
    "Repository",
    "RepositoryError",
    "Update",
]
