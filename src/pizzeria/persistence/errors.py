"""Custom persistence exceptions."""

from __future__ import annotations

from pizzeria.domain import Identity


class RepositoryError(RuntimeError):
    """Base class for persistence layer errors."""


class NotFoundError(RepositoryError):
    """Raised when no stored entity matches the requested identity."""

    def __init__(self, message: str, *, identity: Identity | None = None) -> None:
        super().__init__(message)
        self.identity = identity
