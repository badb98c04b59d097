"""SQLAlchemy ORM models for the TechStore shop schema."""

from dataclasses import dataclass
from typing import Optional

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
)
from sqlalchemy.orm import composite, declarative_base, relationship

Base = declarative_base()

ORDER_STATUSES = ("Pending", "Completed", "Shipped", "Cancelled")


@dataclass
class Address:
    """
    Postal address embedded in the clients table.
    """

    street: Optional[str] = None
    building_number: Optional[str] = None
    apartment_number: Optional[str] = None
    postal_code: Optional[str] = None
    locality: Optional[str] = None


@dataclass
class ShippingAddress:
    """
    Delivery address embedded in the orders table.
    """

    locality: Optional[str] = None
    street: Optional[str] = None
    building_number: Optional[str] = None
    apartment_number: Optional[str] = None
    postal_code: Optional[str] = None


class Client(Base):
    """
    Client model representing a registered shop account.
    """

    __tablename__ = "clients"

    id = Column(String(36), primary_key=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(256), nullable=False)
    password_hash = Column(String(256), nullable=False)
    user_name = Column(String(256), nullable=False)
    normalized_email = Column(String(256), nullable=False)
    normalized_user_name = Column(String(256), nullable=False)
    email_confirmed = Column(Boolean, nullable=False, default=False)

    address = composite(
        Address,
        Column("address_street", String(200)),
        Column("address_building_number", String(20)),
        Column("address_apartment_number", String(50)),
        Column("address_postal_code", String(20)),
        Column("address_locality", String(100)),
    )

    # Relationships with client activity
    orders = relationship("Order", back_populates="client")
    reviews = relationship("Review", back_populates="client")
    reports = relationship("Report", back_populates="client")

    def __repr__(self):
        return f"<Client(id='{self.id}', email='{self.email}')>"


class Category(Base):
    """
    Category model grouping products.
    """

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)

    products = relationship("Product", back_populates="category")

    def __repr__(self):
        return f"<Category(id={self.id}, name='{self.name}')>"


class Product(Base):
    """
    Product model representing items available for purchase.
    """

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    description = Column(Text)
    quantity = Column(Integer, nullable=False)
    image = Column(String(500))
    company = Column(String(200))
    is_on_sale = Column(Boolean, nullable=False, default=False)
    sale_price = Column(Numeric(10, 2), nullable=True)
    url = Column(String(500))
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False)

    # Relationship with category and reviews
    category = relationship("Category", back_populates="products")
    reviews = relationship("Review", back_populates="product")

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', price='{self.price}')>"


class Review(Base):
    """
    Review model holding a client's rating of a product.
    """

    __tablename__ = "reviews"

    id = Column(Integer, primary_key=True, autoincrement=True)
    comment = Column(Text)
    rating = Column(Integer, nullable=False)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)
    client_id = Column(String(36), ForeignKey("clients.id"), nullable=False)

    product = relationship("Product", back_populates="reviews")
    client = relationship("Client", back_populates="reviews")

    def __repr__(self):
        return f"<Review(id={self.id}, product_id={self.product_id}, rating={self.rating})>"


class Order(Base):
    """
    Order model representing client purchases.
    """

    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_status = Column(String(20), nullable=False)
    order_value = Column(Float, nullable=False)
    order_date = Column(DateTime, nullable=False)
    order_confirmation = Column(Boolean, nullable=False, default=False)
    completion_confirmation = Column(Boolean, nullable=False, default=False)
    client_id = Column(String(36), ForeignKey("clients.id"), nullable=False)

    shipping_address = composite(
        ShippingAddress,
        Column("shipping_locality", String(100)),
        Column("shipping_street", String(200)),
        Column("shipping_building_number", String(20)),
        Column("shipping_apartment_number", String(50)),
        Column("shipping_postal_code", String(20)),
    )

    # Relationship with client and ordered products
    client = relationship("Client", back_populates="orders")
    product_relations = relationship("ProductOrderRelation", back_populates="order")

    def __repr__(self):
        return f"<Order(id={self.id}, client_id='{self.client_id}', status='{self.order_status}')>"


class ProductOrderRelation(Base):
    """
    Junction model linking orders with the products they contain.
    """

    __tablename__ = "product_order_relations"

    order_id = Column(Integer, ForeignKey("orders.id"), primary_key=True)
    product_id = Column(Integer, ForeignKey("products.id"), primary_key=True)

    order = relationship("Order", back_populates="product_relations")

    def __repr__(self):
        return f"<ProductOrderRelation(order_id={self.order_id}, product_id={self.product_id})>"


class Report(Base):
    """
    Report model representing a client's product complaint or question.
    """

    __tablename__ = "reports"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(200), nullable=False)
    description = Column(Text)
    answered = Column(Boolean, nullable=False, default=False)
    client_id = Column(String(36), ForeignKey("clients.id"), nullable=False)

    client = relationship("Client", back_populates="reports")

    def __repr__(self):
        return f"<Report(id={self.id}, title='{self.title}', answered={self.answered})>"
