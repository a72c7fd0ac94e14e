"""Command and query handlers exports."""

from .customers import CreateCustomer, UpdateCustomer
from .menu import (
    AddIngredientToPizza,
    CreateIngredient,
    CreatePizza,
    GetPizzaPrice,
    RemoveIngredientFromPizza,
    UpdateIngredient,
    UpdatePizza,
)
from .users import GetUser

__all__ = [
    "AddIngredientToPizza",
    "CreateCustomer",
    "CreateIngredient",
    "CreatePizza",
    "GetPizzaPrice",
    "GetUser",
    "RemoveIngredientFromPizza",
    "UpdateCustomer",
    "UpdateIngredient",
    "UpdatePizza",
]
