"""
Pytest configuration and fixtures for the seeder tests.

Every test gets its own SQLite database file with the shop schema created.
"""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from utilities.models import Base
from data_seeder.batch_persister import save_in_batches
from data_seeder.factories import (
    category_factory,
    client_factory,
    make_faker,
    order_factory,
    product_factory,
)


@pytest.fixture
def fake():
    """Seeded Faker instance with the commerce provider."""
    return make_faker(seed=1234)


@pytest.fixture
def db_url(tmp_path) -> str:
    return f"sqlite:///{tmp_path / 'techstore.db'}"


@pytest.fixture
def engine(db_url):
    engine = create_engine(db_url)
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture
def catalogue(session, fake):
    """Clients, categories, products and orders already flushed to the database."""
    clients = save_in_batches(session, client_factory(fake), 5)
    categories = save_in_batches(session, category_factory(fake), 3)
    products = save_in_batches(
        session, product_factory(fake, [c.id for c in categories]), 8
    )
    orders = save_in_batches(session, order_factory(fake, [c.id for c in clients]), 12)
    return {
        "clients": clients,
        "categories": categories,
        "products": products,
        "orders": orders,
    }


@pytest.fixture
def count_rows(db_url):
    """Count committed rows of a model through a separate connection."""

    def _count(model) -> int:
        engine = create_engine(db_url)
        try:
            with Session(engine) as session:
                return session.query(model).count()
        finally:
            engine.dispose()

    return _count
