"""Typer CLI wiring pizzeria services."""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from uuid import UUID

import typer

from pizzeria.domain import Identity, Ingredient, Pizza
from pizzeria.persistence import NotFoundError

from .deps import get_container

app = typer.Typer(help="Pizzeria command-line interface")


def _parse_identity(value: str) -> Identity:
    try:
        return Identity(value=UUID(value))
    except ValueError as exc:
        raise typer.BadParameter("user-id must be a valid UUID") from exc


def _parse_ingredient(value: str) -> Ingredient:
    name, sep, raw_cost = value.partition("=")
    if not sep or not name.strip():
        raise typer.BadParameter(f"Expected NAME=COST, got '{value}'")
    try:
        cost = Decimal(raw_cost.strip())
    except InvalidOperation as exc:
        raise typer.BadParameter(f"Invalid cost for '{name.strip()}': {raw_cost}") from exc
    return Ingredient.create(name.strip(), cost)


@app.callback()
def main() -> None:
    """Configure logging from the resolved settings."""

    try:
        settings = get_container().settings
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    logging.basicConfig(level=settings.log_level)


@app.command("show-settings")
def show_settings() -> None:
    """Print the resolved application settings."""

    settings = get_container().settings
    typer.echo("Environment:\t" + settings.environment)
    typer.echo("Log level:\t" + settings.log_level)


@app.command("quote")
def quote(
    ingredient: list[str] = typer.Option(..., "--ingredient", "-i", help="NAME=COST pair"),
) -> None:
    """Price a pizza made of the given ingredients."""

    ingredients = [_parse_ingredient(value) for value in ingredient]
    pizza = Pizza.create("Quote", "Ad-hoc quote", "", ingredients)
    typer.echo(f"Price: {pizza.price:.2f}")


@app.command("lookup-user")
def lookup_user(user_id: str) -> None:
    """Look up a user by identity."""

    identity = _parse_identity(user_id)
    container = get_container()
    try:
        user = container.get_user.handle(identity)
    except NotFoundError as exc:
        typer.echo(f"User {identity} not found")
        raise typer.Exit(code=1) from exc
    typer.echo(f"User {user.id}")


@app.command("demo")
def demo() -> None:
    """Walk through the menu and customer handlers against the in-memory stores."""

    container = get_container()
    tomato = container.create_ingredient.handle("tomato", Decimal("1.50"))
    mozzarella = container.create_ingredient.handle("mozzarella", Decimal("2.50"))
    basil = container.create_ingredient.handle("basil", Decimal("0.50"))

    pizza = container.create_pizza.handle(
        "Margherita",
        "Tomato and mozzarella",
        "https://example.com/margherita.png",
        [tomato, mozzarella],
    )
    typer.echo(f"Created pizza {pizza.id} ({pizza.name})")
    typer.echo(f"Price: {container.get_pizza_price.handle(pizza.id):.2f}")

    container.add_ingredient_to_pizza.handle(pizza.id, basil)
    typer.echo(f"With basil: {container.get_pizza_price.handle(pizza.id):.2f}")

    container.remove_ingredient_from_pizza.handle(pizza.id, basil)
    typer.echo(f"Without basil: {container.get_pizza_price.handle(pizza.id):.2f}")

    customer = container.create_customer.handle()
    container.update_customer.handle(customer.id)
    typer.echo(f"Customer {customer.id} registered")
