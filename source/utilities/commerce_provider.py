"""Custom Faker provider for shop catalogue values."""

from decimal import Decimal

from faker.providers import BaseProvider

CENT = Decimal("0.01")

DEPARTMENTS = (
    "Books", "Movies", "Music", "Games", "Electronics", "Computers", "Home",
    "Garden", "Tools", "Grocery", "Health", "Beauty", "Toys", "Kids", "Baby",
    "Clothing", "Shoes", "Jewelery", "Sports", "Outdoors", "Automotive",
    "Industrial",
)

PRODUCT_ADJECTIVES = (
    "Small", "Ergonomic", "Rustic", "Intelligent", "Gorgeous", "Incredible",
    "Fantastic", "Practical", "Sleek", "Awesome", "Generic", "Handcrafted",
    "Handmade", "Licensed", "Refined", "Unbranded", "Tasty",
)

PRODUCT_MATERIALS = (
    "Steel", "Wooden", "Concrete", "Plastic", "Cotton", "Granite", "Rubber",
    "Metal", "Soft", "Fresh", "Frozen",
)

PRODUCTS = (
    "Chair", "Car", "Computer", "Keyboard", "Mouse", "Bike", "Ball", "Gloves",
    "Pants", "Shirt", "Table", "Shoes", "Hat", "Towels", "Soap", "Tuna",
    "Chicken", "Fish", "Cheese", "Bacon", "Pizza", "Salad", "Sausages",
    "Chips",
)


class CommerceProvider(BaseProvider):
    """Faker provider for commerce departments, product names and prices."""

    def department(self) -> str:
        """Generate a shop department name."""
        return self.random_element(DEPARTMENTS)

    def product_name(self) -> str:
        """Generate a product name such as 'Sleek Wooden Chair'."""
        return " ".join(
            (
                self.random_element(PRODUCT_ADJECTIVES),
                self.random_element(PRODUCT_MATERIALS),
                self.random_element(PRODUCTS),
            )
        )

    def price(self, min_value: int = 1, max_value: int = 1000) -> Decimal:
        """Generate a price with two decimal places in [min_value, max_value]."""
        cents = self.random_int(min_value * 100, max_value * 100)
        return (Decimal(cents) / 100).quantize(CENT)
