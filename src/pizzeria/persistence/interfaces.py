"""Capability protocols composed into repositories.

Each capability needs nothing but access to the store's backing collection,
and ships a default implementation operating on it. A store opts into the
subset of capabilities it supports by subclassing them, so holders typed
against a capability can only perform that operation.

None of the operations coordinate access to the backing collection; stores
are meant for single-threaded use.
"""

from __future__ import annotations

import logging
from collections.abc import MutableSet
from typing import Protocol, TypeVar, runtime_checkable

from pizzeria.domain import Entity, Identity

from .errors import NotFoundError

E = TypeVar("E", bound=Entity)

logger = logging.getLogger(__name__)


@runtime_checkable
class DataBacked(Protocol[E]):
    """Access to the mutable set of entities a store owns."""

    @property
    def data(self) -> MutableSet[E]: ...


@runtime_checkable
class Add(DataBacked[E], Protocol[E]):
    def add(self, entity: E) -> None:
        """Insert ``entity``; an entity with an already stored identity is ignored."""

        self.data.add(entity)
        logger.debug("%s add %s", type(self).__name__, entity.id)


@runtime_checkable
class Get(DataBacked[E], Protocol[E]):
    def get(self, identity: Identity) -> E:
        """Return a snapshot of the entity stored under ``identity``.

        Raises:
            NotFoundError: when nothing is stored under ``identity``.
        """

        for entity in self.data:
            if entity.id == identity:
                return entity.clone()
        logger.debug("%s miss %s", type(self).__name__, identity)
        msg = f"No record found for identity {identity}"
        raise NotFoundError(msg, identity=identity)


@runtime_checkable
class Remove(Get[E], Protocol[E]):
    def remove(self, entity: E) -> None:
        """Drop the stored entity equal to ``entity``; absent entities are a no-op."""

        self.data.discard(entity)
        logger.debug("%s remove %s", type(self).__name__, entity.id)


@runtime_checkable
class Update(Get[E], Protocol[E]):
    def update(self, entity: E) -> None:
        """Replace the stored entity sharing ``entity``'s identity.

        Implemented as remove followed by add, so an unknown identity is
        simply added. The pair is not atomic.
        """

        self.data.discard(entity)
        self.data.add(entity)
        logger.debug("%s update %s", type(self).__name__, entity.id)


@runtime_checkable
class Repository(Update[E], Remove[E], Add[E], Protocol[E]):
    """Full CRUD over one backing collection."""


__all__ = ["Add", "DataBacked", "Get", "Remove", "Repository", "Update"]
