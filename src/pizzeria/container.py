"""Service container wiring stores and feature handlers."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pizzeria.config import AppSettings
from pizzeria.features import (
    AddIngredientToPizza,
    CreateCustomer,
    CreateIngredient,
    CreatePizza,
    GetPizzaPrice,
    GetUser,
    RemoveIngredientFromPizza,
    UpdateCustomer,
    UpdateIngredient,
    UpdatePizza,
)
from pizzeria.persistence import (
    InMemoryCustomerRepository,
    InMemoryIngredientRepository,
    InMemoryPizzaRepository,
    InMemoryUserRepository,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ServiceContainer:
    """Owns one set of stores and the handlers bound to them."""

    settings: AppSettings
    customer_repository: InMemoryCustomerRepository
    user_repository: InMemoryUserRepository
    ingredient_repository: InMemoryIngredientRepository
    pizza_repository: InMemoryPizzaRepository
    create_customer: CreateCustomer
    update_customer: UpdateCustomer
    get_user: GetUser
    create_ingredient: CreateIngredient
    update_ingredient: UpdateIngredient
    create_pizza: CreatePizza
    update_pizza: UpdatePizza
    add_ingredient_to_pizza: AddIngredientToPizza
    remove_ingredient_from_pizza: RemoveIngredientFromPizza
    get_pizza_price: GetPizzaPrice


def build_container(settings: AppSettings | None = None) -> ServiceContainer:
    """Construct a container with fresh, empty stores."""

    resolved_settings = settings or AppSettings.from_env()

    customers = InMemoryCustomerRepository()
    users = InMemoryUserRepository()
    ingredients = InMemoryIngredientRepository()
    pizzas = InMemoryPizzaRepository()
    logger.debug("Built in-memory stores for %s", resolved_settings.environment)

    return ServiceContainer(
        settings=resolved_settings,
        customer_repository=customers,
        user_repository=users,
        ingredient_repository=ingredients,
        pizza_repository=pizzas,
        create_customer=CreateCustomer(customers),
        update_customer=UpdateCustomer(customers),
        get_user=GetUser(users),
        create_ingredient=CreateIngredient(ingredients),
        update_ingredient=UpdateIngredient(ingredients),
        create_pizza=CreatePizza(pizzas),
        update_pizza=UpdatePizza(pizzas),
        add_ingredient_to_pizza=AddIngredientToPizza(pizzas),
        remove_ingredient_from_pizza=RemoveIngredientFromPizza(pizzas),
        get_pizza_price=GetPizzaPrice(pizzas),
    )


__all__ = ["ServiceContainer", "build_container"]
