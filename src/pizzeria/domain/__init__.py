"""Domain model exports."""

from .accounts import Customer, User
from .base import DomainModel, MutableDomainModel
from .entity import Entity
from .menu import PROFIT, Ingredient, Pizza
from .types import Identity

__all__ = [
    "PROFIT",
    "Customer",
    "DomainModel",
    "Entity",
    "Identity",
    "Ingredient",
    "MutableDomainModel",
    "Pizza",
    "User",
]
