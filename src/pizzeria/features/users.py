"""User query handlers."""

from __future__ import annotations

import logging

from pizzeria.domain import Identity, User
from pizzeria.persistence import Get

from .base import Handler


class GetUser(Handler):
    def __init__(self, repository: Get[User], logger: logging.Logger | None = None) -> None:
        super().__init__(logger)
        self._repository = repository

    def handle(self, identity: Identity) -> User:
        user = self._repository.get(identity)
        self._logger.debug("Loaded user %s", user.id)
        return user


__all__ = ["GetUser"]
