"""Tests for the per-entity record factories."""

from datetime import datetime, timedelta
from decimal import Decimal

from utilities.commerce_provider import DEPARTMENTS
from utilities.models import ORDER_STATUSES, Address, ShippingAddress
from data_seeder.factories import (
    category_factory,
    client_factory,
    order_factory,
    product_factory,
    report_factory,
    review_factory,
    sale_price_for,
)


def test_clients_log_in_with_their_email(fake):
    clients = client_factory(fake).generate(50)

    for client in clients:
        assert client.user_name == client.email
        assert client.normalized_email == client.email.upper()
        assert client.normalized_user_name == client.email.upper()
        assert client.email_confirmed is True
        assert isinstance(client.address, Address)
        assert client.address.locality

    assert len({client.id for client in clients}) == 50
    assert len({client.email for client in clients}) == 50


def test_category_names_are_departments(fake):
    for category in category_factory(fake).generate(30):
        assert category.name in DEPARTMENTS


def test_sale_price_only_for_products_on_sale(fake):
    products = product_factory(fake, [1, 2, 3]).generate(200)

    for product in products:
        assert Decimal("10") <= product.price <= Decimal("1000")
        assert 1 <= product.quantity <= 100
        assert product.category_id in (1, 2, 3)
        if product.is_on_sale:
            assert product.sale_price is not None
            assert abs(product.sale_price - product.price * Decimal("0.9")) <= Decimal(
                "0.01"
            )
        else:
            assert product.sale_price is None

    # Both branches are exercised
    assert {product.is_on_sale for product in products} == {True, False}


def test_sale_price_for():
    assert sale_price_for(Decimal("100.00"), True) == Decimal("90.00")
    assert sale_price_for(Decimal("19.99"), True) == Decimal("17.99")
    assert sale_price_for(Decimal("100.00"), False) is None


def test_reviews_reference_pools(fake):
    reviews = review_factory(fake, [10, 20], ["a", "b", "c"]).generate(40)

    for review in reviews:
        assert 1 <= review.rating <= 5
        assert review.product_id in (10, 20)
        assert review.client_id in ("a", "b", "c")


def test_orders_have_known_status_and_recent_date(fake):
    orders = order_factory(fake, ["client-1"]).generate(100)
    now = datetime.now()

    for order in orders:
        assert order.order_status in ORDER_STATUSES
        assert 100 <= order.order_value <= 100000
        assert now - timedelta(days=5 * 366) <= order.order_date <= now
        assert order.client_id == "client-1"
        assert isinstance(order.shipping_address, ShippingAddress)


def test_report_titles_come_from_product_names(fake):
    names = ["Sleek Wooden Chair", "Small Steel Bike"]
    reports = report_factory(fake, names, ["client-1"]).generate(20)

    for report in reports:
        assert report.title in names
        assert report.client_id == "client-1"
        assert report.answered in (True, False)
