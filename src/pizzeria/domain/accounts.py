"""Identity-only account entities."""

from __future__ import annotations

from .entity import Entity
from .types import Identity


class Customer(Entity):
    @classmethod
    def create(cls, identity: Identity | None = None) -> Customer:
        return cls(id=identity or Identity.new())


class User(Entity):
    @classmethod
    def create(cls, identity: Identity | None = None) -> User:
        return cls(id=identity or Identity.new())


__all__ = ["Customer", "User"]
