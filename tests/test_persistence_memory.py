from __future__ import annotations

from decimal import Decimal

import pytest

from pizzeria.domain import Customer, Identity, Ingredient, Pizza, User
from pizzeria.persistence import (
    Add,
    Get,
    InMemoryCustomerRepository,
    InMemoryIngredientRepository,
    InMemoryPizzaRepository,
    InMemoryUserRepository,
    NotFoundError,
    Remove,
    Repository,
    RepositoryError,
    Update,
)


def test_add_then_get_round_trip() -> None:
    repository = InMemoryCustomerRepository()
    customer = Customer.create()
    repository.add(customer)
    assert repository.get(customer.id) == customer


def test_get_unknown_identity_raises_not_found() -> None:
    repository = InMemoryCustomerRepository()
    repository.add(Customer.create())
    missing = Identity.new()
    with pytest.raises(NotFoundError) as excinfo:
        repository.get(missing)
    assert excinfo.value.identity == missing
    assert str(missing) in str(excinfo.value)
    assert isinstance(excinfo.value, RepositoryError)


def test_remove_then_get_raises_not_found() -> None:
    repository = InMemoryCustomerRepository()
    customer = Customer.create()
    repository.add(customer)
    repository.remove(Customer.create(customer.id))
    with pytest.raises(NotFoundError):
        repository.get(customer.id)
    assert len(repository) == 0


def test_remove_absent_entity_is_noop() -> None:
    repository = InMemoryCustomerRepository()
    repository.add(Customer.create())
    repository.remove(Customer.create())
    assert len(repository) == 1


def test_duplicate_add_is_absorbed() -> None:
    repository = InMemoryIngredientRepository()
    original = Ingredient.create("tomato", 1)
    repository.add(original)
    repository.add(Ingredient.create("basil", 9, identity=original.id))
    assert len(repository) == 1
    assert repository.get(original.id).name == "tomato"


def test_update_replaces_stored_fields() -> None:
    repository = InMemoryIngredientRepository()
    original = Ingredient.create("tomato", 1)
    repository.add(original)

    changed = repository.get(original.id)
    changed.update("san marzano", 2)
    repository.update(changed)

    stored = repository.get(original.id)
    assert stored.name == "san marzano"
    assert stored.cost == Decimal("2")
    assert len(repository) == 1


def test_update_unknown_identity_adds() -> None:
    repository = InMemoryIngredientRepository()
    ingredient = Ingredient.create("tomato", 1)
    repository.update(ingredient)
    assert repository.get(ingredient.id) == ingredient


def test_get_returns_snapshot_of_aggregates() -> None:
    repository = InMemoryPizzaRepository()
    pizza = Pizza.create("Margherita", "Classic", "", [Ingredient.create("tomato", 1)])
    repository.add(pizza)

    loaded = repository.get(pizza.id)
    loaded.add_ingredient(Ingredient.create("ham", 4))
    loaded.update("Changed", "Changed", "")

    fresh = repository.get(pizza.id)
    assert fresh.name == "Margherita"
    assert fresh.price == Decimal("1.2")


def test_get_returns_raw_reference_for_identity_only_entities() -> None:
    repository = InMemoryCustomerRepository()
    customer = Customer.create()
    repository.add(customer)
    assert repository.get(customer.id) is customer


def test_stores_do_not_share_collections() -> None:
    first = InMemoryCustomerRepository()
    second = InMemoryCustomerRepository()
    first.add(Customer.create())
    assert len(first) == 1
    assert len(second) == 0
    assert first.data is not second.data


def test_user_store_exposes_only_get() -> None:
    user = User.create()
    repository = InMemoryUserRepository.from_users([user])

    assert repository.get(user.id) == user
    assert isinstance(repository, Get)
    assert not isinstance(repository, Add)
    assert not isinstance(repository, Remove)
    assert not isinstance(repository, Update)
    assert not isinstance(repository, Repository)
    for name in ("add", "remove", "update"):
        assert not hasattr(repository, name)


def test_full_repositories_expose_every_capability() -> None:
    for repository in (
        InMemoryCustomerRepository(),
        InMemoryIngredientRepository(),
        InMemoryPizzaRepository(),
    ):
        assert isinstance(repository, Repository)
        assert isinstance(repository, Add)
        assert isinstance(repository, Remove)
        assert isinstance(repository, Update)
