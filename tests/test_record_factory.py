"""Tests for the rule-based record factory."""

import pytest

from utilities.models import Category, Client
from data_seeder.factories import make_faker
from data_seeder.record_factory import RecordFactory


def test_generate_count(fake):
    factory = RecordFactory(Category, fake).rule_for("name", lambda f, c: f.word())

    categories = factory.generate(7)

    assert len(categories) == 7
    assert all(isinstance(category, Category) for category in categories)
    assert all(category.name for category in categories)


def test_generate_zero_records(fake):
    factory = RecordFactory(Category, fake).rule_for("name", lambda f, c: f.word())
    assert factory.generate(0) == []


def test_rules_run_in_registration_order(fake):
    seen = []

    def record(field):
        def rule(f, values):
            seen.append((field, sorted(values)))
            return field

        return rule

    factory = (
        RecordFactory(Category, fake)
        .rule_for("id", record("id"))
        .rule_for("name", record("name"))
    )
    factory.generate_one()

    assert seen == [("id", []), ("name", ["id"])]


def test_derived_field_sees_sibling(fake):
    factory = (
        RecordFactory(Client, fake)
        .rule_for("email", lambda f, c: f.email())
        .rule_for("user_name", lambda f, c: c["email"])
    )

    client = factory.generate_one()

    assert client.user_name == client.email


def test_same_seed_gives_same_records():
    def names(seed):
        factory = RecordFactory(Category, make_faker(seed)).rule_for(
            "name", lambda f, c: f.department()
        )
        return [category.name for category in factory.generate(20)]

    assert names(42) == names(42)


def test_unknown_field_is_a_programming_error(fake):
    factory = RecordFactory(Category, fake).rule_for("colour", lambda f, c: "red")

    with pytest.raises(TypeError):
        factory.generate_one()
