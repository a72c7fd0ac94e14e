"""Ingredient and pizza command/query handlers.

Every handler reads through the repository it was given, mutates the
returned snapshot and writes it back with ``update``. Lookups of unknown
identities raise ``NotFoundError`` to the caller. Returned entities are
snapshots, never the instance held by the store.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from decimal import Decimal

from pizzeria.domain import Identity, Ingredient, Pizza
from pizzeria.persistence import Add, Get, Update

from .base import Handler


class CreateIngredient(Handler):
    def __init__(self, repository: Add[Ingredient], logger: logging.Logger | None = None) -> None:
        super().__init__(logger)
        self._repository = repository

    def handle(self, name: str, cost: Decimal | int | str) -> Ingredient:
        ingredient = Ingredient.create(name, cost)
        self._repository.add(ingredient)
        self._logger.info("Created ingredient %s (%s)", ingredient.id, ingredient.name)
        return ingredient.clone()


class UpdateIngredient(Handler):
    def __init__(
        self,
        repository: Update[Ingredient],
        logger: logging.Logger | None = None,
    ) -> None:
        super().__init__(logger)
        self._repository = repository

    def handle(self, identity: Identity, name: str, cost: Decimal | int | str) -> Ingredient:
        ingredient = self._repository.get(identity)
        ingredient.update(name, cost)
        self._repository.update(ingredient)
        self._logger.info("Updated ingredient %s", identity)
        return ingredient.clone()


class CreatePizza(Handler):
    def __init__(self, repository: Add[Pizza], logger: logging.Logger | None = None) -> None:
        super().__init__(logger)
        self._repository = repository

    def handle(
        self,
        name: str,
        description: str,
        url: str,
        ingredients: Iterable[Ingredient] = (),
    ) -> Pizza:
        pizza = Pizza.create(name, description, url, ingredients)
        self._repository.add(pizza)
        self._logger.info("Created pizza %s (%s)", pizza.id, pizza.name)
        return pizza.clone()


class UpdatePizza(Handler):
    def __init__(self, repository: Update[Pizza], logger: logging.Logger | None = None) -> None:
        super().__init__(logger)
        self._repository = repository

    def handle(self, identity: Identity, name: str, description: str, url: str) -> Pizza:
        pizza = self._repository.get(identity)
        pizza.update(name, description, url)
        self._repository.update(pizza)
        self._logger.info("Updated pizza %s", identity)
        return pizza.clone()


class AddIngredientToPizza(Handler):
    def __init__(self, repository: Update[Pizza], logger: logging.Logger | None = None) -> None:
        super().__init__(logger)
        self._repository = repository

    def handle(self, identity: Identity, ingredient: Ingredient) -> Pizza:
        pizza = self._repository.get(identity)
        pizza.add_ingredient(ingredient)
        self._repository.update(pizza)
        self._logger.info("Added ingredient %s to pizza %s", ingredient.id, identity)
        return pizza.clone()


class RemoveIngredientFromPizza(Handler):
    def __init__(self, repository: Update[Pizza], logger: logging.Logger | None = None) -> None:
        super().__init__(logger)
        self._repository = repository

    def handle(self, identity: Identity, ingredient: Ingredient) -> Pizza:
        pizza = self._repository.get(identity)
        pizza.remove_ingredient(ingredient)
        self._repository.update(pizza)
        self._logger.info("Removed ingredient %s from pizza %s", ingredient.id, identity)
        return pizza.clone()


class GetPizzaPrice(Handler):
    def __init__(self, repository: Get[Pizza], logger: logging.Logger | None = None) -> None:
        super().__init__(logger)
        self._repository = repository

    def handle(self, identity: Identity) -> Decimal:
        return self._repository.get(identity).price


__all__ = [
    "AddIngredientToPizza",
    "CreateIngredient",
    "CreatePizza",
    "GetPizzaPrice",
    "RemoveIngredientFromPizza",
    "UpdateIngredient",
    "UpdatePizza",
]
