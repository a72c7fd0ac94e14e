"""Identity value type shared by every entity."""

from __future__ import annotations

from uuid import UUID, uuid4

from .base import DomainModel


class Identity(DomainModel):
    """Opaque, globally unique token identifying one logical entity."""

    value: UUID

    @classmethod
    def new(cls) -> Identity:
        return cls(value=uuid4())

    def __str__(self) -> str:
        return str(self.value)


__all__ = ["Identity"]
