from __future__ import annotations

from uuid import uuid4

import pytest
from pydantic import ValidationError

from pizzeria.domain import Customer, DomainModel, Identity, Ingredient, User


def test_identity_structural_equality() -> None:
    raw = uuid4()
    assert Identity(value=raw) == Identity(value=raw)
    assert hash(Identity(value=raw)) == hash(Identity(value=raw))
    assert str(Identity(value=raw)) == str(raw)


def test_new_identities_are_distinct() -> None:
    assert Identity.new() != Identity.new()


def test_factories_mint_fresh_identities() -> None:
    assert Customer.create().id != Customer.create().id
    identity = Identity.new()
    assert User.create(identity).id == identity


def test_equality_ignores_non_identity_fields() -> None:
    identity = Identity.new()
    first = Ingredient.create("tomato", 1, identity=identity)
    second = Ingredient.create("basil", 3, identity=identity)
    assert first == second
    assert hash(first) == hash(second)
    assert first is not second


def test_entities_with_different_identities_differ() -> None:
    assert Ingredient.create("tomato", 1) != Ingredient.create("tomato", 1)
    assert Customer.create() != "not an entity"


def test_identity_cannot_be_reassigned() -> None:
    customer = Customer.create()
    with pytest.raises(ValidationError):
        customer.id = Identity.new()


def test_identity_is_frozen_domain_model() -> None:
    identity = Identity.new()
    assert isinstance(identity, DomainModel)
    with pytest.raises(ValidationError):
        identity.value = uuid4()
