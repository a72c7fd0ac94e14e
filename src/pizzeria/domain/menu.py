"""Menu aggregates: ingredients and the pizzas built from them."""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal
from typing import Any

from pydantic import PrivateAttr

from .entity import Entity
from .types import Identity

PROFIT = Decimal("1.2")


class Ingredient(Entity):
    name: str
    cost: Decimal

    @classmethod
    def create(
        cls,
        name: str,
        cost: Decimal | int | str,
        identity: Identity | None = None,
    ) -> Ingredient:
        return cls(id=identity or Identity.new(), name=name, cost=cost)

    def update(self, name: str, cost: Decimal | int | str) -> None:
        """Replace name and cost together."""

        validated = type(self).model_validate({"id": self.id, "name": name, "cost": cost})
        self.name = validated.name
        self.cost = validated.cost

    def clone(self) -> Ingredient:
        return type(self)(id=self.id, name=self.name, cost=self.cost)


def _clone_all(ingredients: Iterable[Ingredient]) -> set[Ingredient]:
    return {ingredient.clone() for ingredient in ingredients}


class Pizza(Entity):
    """Pizza owning a private snapshot of its ingredients.

    Ingredient instances are cloned whenever they cross the pizza boundary,
    inbound or outbound, so callers never share state with the pizza.
    """

    name: str
    description: str
    url: str
    _ingredients: set[Ingredient] = PrivateAttr(default_factory=set)

    @classmethod
    def create(
        cls,
        name: str,
        description: str,
        url: str,
        ingredients: Iterable[Ingredient] = (),
        identity: Identity | None = None,
    ) -> Pizza:
        pizza = cls(id=identity or Identity.new(), name=name, description=description, url=url)
        pizza._ingredients = _clone_all(ingredients)
        return pizza

    @property
    def ingredients(self) -> set[Ingredient]:
        return _clone_all(self._ingredients)

    @property
    def price(self) -> Decimal:
        total = sum((ingredient.cost for ingredient in self._ingredients), Decimal("0"))
        return total * PROFIT

    def add_ingredient(self, ingredient: Ingredient) -> None:
        self._ingredients.add(ingredient.clone())

    def remove_ingredient(self, ingredient: Ingredient) -> None:
        self._ingredients.discard(ingredient)

    def update(self, name: str, description: str, url: str) -> None:
        """Replace name, description and url together."""

        validated = type(self).model_validate(
            {"id": self.id, "name": name, "description": description, "url": url}
        )
        self.name = validated.name
        self.description = validated.description
        self.url = validated.url

    def clone(self) -> Pizza:
        return type(self).create(
            self.name,
            self.description,
            self.url,
            self._ingredients,
            identity=self.id,
        )

    # model_copy() goes through these; the default copies private state shallowly.
    def __copy__(self) -> Pizza:
        return self.clone()

    def __deepcopy__(self, memo: dict[int, Any] | None = None) -> Pizza:
        return self.clone()


__all__ = ["PROFIT", "Ingredient", "Pizza"]
