"""Customer command handlers."""

from __future__ import annotations

import logging

from pizzeria.domain import Customer, Identity
from pizzeria.persistence import Add, Update

from .base import Handler


class CreateCustomer(Handler):
    """Register a new customer with a freshly minted identity."""

    def __init__(self, repository: Add[Customer], logger: logging.Logger | None = None) -> None:
        super().__init__(logger)
        self._repository = repository

    def handle(self) -> Customer:
        customer = Customer.create()
        self._repository.add(customer)
        self._logger.info("Created customer %s", customer.id)
        return customer.clone()


class UpdateCustomer(Handler):
    def __init__(self, repository: Update[Customer], logger: logging.Logger | None = None) -> None:
        super().__init__(logger)
        self._repository = repository

    def handle(self, identity: Identity) -> Customer:
        customer = self._repository.get(identity)
        self._repository.update(customer)
        self._logger.info("Updated customer %s", customer.id)
        return customer.clone()


__all__ = ["CreateCustomer", "UpdateCustomer"]
