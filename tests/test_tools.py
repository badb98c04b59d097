"""Tests for the database utilities."""

from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine, inspect
from sqlalchemy.exc import OperationalError

from utilities import tools
from utilities.tools import (
    bulk_insert_mode,
    describe_error,
    setup_database,
    wait_for_database,
)


def test_bulk_insert_mode_restores_autoflush(session):
    assert session.autoflush is True

    with bulk_insert_mode(session):
        assert session.autoflush is False

    assert session.autoflush is True


def test_bulk_insert_mode_restores_on_error(session):
    with pytest.raises(RuntimeError):
        with bulk_insert_mode(session):
            raise RuntimeError("boom")

    assert session.autoflush is True


def test_bulk_insert_mode_keeps_previous_setting(session):
    session.autoflush = False

    with bulk_insert_mode(session):
        pass

    assert session.autoflush is False


def test_describe_error_with_cause():
    try:
        try:
            raise KeyError("missing")
        except KeyError as inner:
            raise RuntimeError("outer") from inner
    except RuntimeError as e:
        message, details = describe_error(e)

    assert message == "outer"
    assert details == "'missing'"


def test_describe_error_without_cause():
    assert describe_error(ValueError("plain")) == ("plain", None)


def test_describe_error_uses_driver_error():
    error = OperationalError("INSERT INTO products", {}, Exception("database is locked"))

    message, details = describe_error(error)

    assert "database is locked" in message
    assert "INSERT INTO" not in message
    assert details == "database is locked"


def test_wait_for_database_connects(engine):
    assert wait_for_database(engine, max_retries=1, delay=0) is True


def test_wait_for_database_gives_up(monkeypatch):
    sleeps = []
    monkeypatch.setattr(tools.time, "sleep", sleeps.append)
    engine = MagicMock()
    engine.connect.side_effect = OperationalError("SELECT 1", {}, Exception("refused"))

    assert wait_for_database(engine, max_retries=3, delay=2) is False
    assert sleeps == [2, 2, 2]


def test_setup_database_creates_tables(db_url):
    engine = create_engine(db_url)
    setup_database(engine)

    assert set(inspect(engine).get_table_names()) == {
        "clients",
        "categories",
        "products",
        "reviews",
        "orders",
        "product_order_relations",
        "reports",
    }
    engine.dispose()
