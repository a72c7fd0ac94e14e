"""In-memory stores backed by process-lifetime sets."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from pizzeria.domain import Customer, Ingredient, Pizza, User

from .interfaces import Get, Repository


@dataclass
class InMemoryCustomerRepository(Repository[Customer]):
    _customers: set[Customer] = field(default_factory=set)

    @property
    def data(self) -> set[Customer]:
        return self._customers

    def __len__(self) -> int:
        return len(self._customers)


@dataclass
class InMemoryUserRepository(Get[User]):
    """Read-only user store."""

    _users: set[User] = field(default_factory=set)

    @classmethod
    def from_users(cls, users: Iterable[User]) -> InMemoryUserRepository:
        return cls(set(users))

    @property
    def data(self) -> set[User]:
        return self._users

    def __len__(self) -> int:
        return len(self._users)


@dataclass
class InMemoryIngredientRepository(Repository[Ingredient]):
    _ingredients: set[Ingredient] = field(default_factory=set)

    @property
    def data(self) -> set[Ingredient]:
        return self._ingredients

    def __len__(self) -> int:
        return len(self._ingredients)


@dataclass
class InMemoryPizzaRepository(Repository[Pizza]):
    _pizzas: set[Pizza] = field(default_factory=set)

    @property
    def data(self) -> set[Pizza]:
        return self._pizzas

    def __len__(self) -> int:
        return len(self._pizzas)


__all__ = [
    "InMemoryCustomerRepository",
    "InMemoryIngredientRepository",
    "InMemoryPizzaRepository",
    "InMemoryUserRepository",
]
