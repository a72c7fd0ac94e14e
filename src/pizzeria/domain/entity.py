"""Identity-based entity base."""

from __future__ import annotations

from typing import Self

from pydantic import Field

from .base import MutableDomainModel
from .types import Identity


class Entity(MutableDomainModel):
    """Domain object whose equality is defined solely by its identity.

    Two instances carrying the same ``id`` are the same logical record even
    when their other fields differ, which lets snapshots be compared against
    the stored original.
    """

    id: Identity = Field(frozen=True)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def clone(self) -> Self:
        """Return a snapshot safe to hand across a store boundary.

        Entities without mutable state are returned as-is.
        """

        return self


__all__ = ["Entity"]
