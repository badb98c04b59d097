"""Record factories for every seeded entity of the shop schema."""

import uuid
from decimal import Decimal
from typing import Sequence

from faker import Faker

from utilities.commerce_provider import CENT, CommerceProvider
from utilities.models import (
    ORDER_STATUSES,
    Address,
    Category,
    Client,
    Order,
    Product,
    Report,
    Review,
    ShippingAddress,
)
from data_seeder.record_factory import RecordFactory

SALE_DISCOUNT = Decimal("0.9")


def make_faker(seed=None) -> Faker:
    """Create a Faker instance with the commerce provider, optionally seeded."""
    fake = Faker()
    fake.add_provider(CommerceProvider)
    if seed is not None:
        fake.seed_instance(seed)
    return fake


def sale_price_for(price: Decimal, is_on_sale: bool):
    """Discounted price of a product on sale, None otherwise."""
    if not is_on_sale:
        return None
    return (price * SALE_DISCOUNT).quantize(CENT)


def client_factory(fake: Faker) -> RecordFactory:
    """Clients with an email based login and a home address."""
    return (
        RecordFactory(Client, fake)
        .rule_for("id", lambda f, c: str(uuid.uuid4()))
        .rule_for("first_name", lambda f, c: f.first_name())
        .rule_for("last_name", lambda f, c: f.last_name())
        .rule_for("email", lambda f, c: f.unique.email())
        .rule_for("password_hash", lambda f, c: f.sha256())
        .rule_for("user_name", lambda f, c: c["email"])
        .rule_for("normalized_email", lambda f, c: c["email"].upper())
        .rule_for("normalized_user_name", lambda f, c: c["email"].upper())
        .rule_for("email_confirmed", lambda f, c: True)
        .rule_for(
            "address",
            lambda f, c: Address(
                street=f.street_name(),
                building_number=f.building_number(),
                apartment_number=f.secondary_address(),
                postal_code=f.postcode(),
                locality=f.city(),
            ),
        )
    )


def category_factory(fake: Faker) -> RecordFactory:
    """Categories named after shop departments."""
    return RecordFactory(Category, fake).rule_for("name", lambda f, c: f.department())


def product_factory(fake: Faker, category_ids: Sequence[int]) -> RecordFactory:
    """Products priced between 10 and 1000, one in two on a 10% sale."""
    return (
        RecordFactory(Product, fake)
        .rule_for("name", lambda f, p: f.product_name())
        .rule_for("price", lambda f, p: f.price(10, 1000))
        .rule_for("description", lambda f, p: f.paragraph())
        .rule_for("quantity", lambda f, p: f.random_int(1, 100))
        .rule_for("image", lambda f, p: f.image_url())
        .rule_for("company", lambda f, p: f.company())
        .rule_for("is_on_sale", lambda f, p: f.pybool())
        .rule_for("sale_price", lambda f, p: sale_price_for(p["price"], p["is_on_sale"]))
        .rule_for("url", lambda f, p: f.url())
        .rule_for("category_id", lambda f, p: f.random_element(category_ids))
    )


def review_factory(
    fake: Faker, product_ids: Sequence[int], client_ids: Sequence[str]
) -> RecordFactory:
    """Reviews rating existing products on a 1 to 5 scale."""
    return (
        RecordFactory(Review, fake)
        .rule_for("comment", lambda f, r: f.sentence())
        .rule_for("rating", lambda f, r: f.random_int(1, 5))
        .rule_for("product_id", lambda f, r: f.random_element(product_ids))
        .rule_for("client_id", lambda f, r: f.random_element(client_ids))
    )


def order_factory(fake: Faker, client_ids: Sequence[str]) -> RecordFactory:
    """Orders placed within the last five years, shipped to a random address."""
    return (
        RecordFactory(Order, fake)
        .rule_for("order_status", lambda f, o: f.random_element(ORDER_STATUSES))
        .rule_for("order_value", lambda f, o: float(f.price(100, 100000)))
        .rule_for(
            "order_date",
            lambda f, o: f.date_time_between(start_date="-5y", end_date="now"),
        )
        .rule_for("order_confirmation", lambda f, o: f.pybool())
        .rule_for("completion_confirmation", lambda f, o: f.pybool())
        .rule_for("client_id", lambda f, o: f.random_element(client_ids))
        .rule_for(
            "shipping_address",
            lambda f, o: ShippingAddress(
                locality=f.city(),
                street=f.street_name(),
                building_number=f.building_number(),
                apartment_number=f.secondary_address(),
                postal_code=f.postcode(),
            ),
        )
    )


def report_factory(
    fake: Faker, product_names: Sequence[str], client_ids: Sequence[str]
) -> RecordFactory:
    """Reports titled after existing products."""
    return (
        RecordFactory(Report, fake)
        .rule_for("title", lambda f, r: f.random_element(product_names))
        .rule_for("description", lambda f, r: f.sentence())
        .rule_for("answered", lambda f, r: f.pybool())
        .rule_for("client_id", lambda f, r: f.random_element(client_ids))
    )
