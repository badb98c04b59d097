"""Script to seed the TechStore database with fake clients, products, orders and reports."""

import os
import random
import sys
from typing import Callable, Dict, List, Optional, Tuple

from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from utilities.exceptions import InvalidInputError, MissingDependencyError
from utilities.logger import Logger
from utilities.models import Category, Client, Product
from utilities.tools import (
    bulk_insert_mode,
    describe_error,
    setup_database,
    wait_for_database,
)
from data_seeder.batch_persister import DEFAULT_CHUNK_SIZE, save_in_batches
from data_seeder.factories import (
    category_factory,
    client_factory,
    make_faker,
    order_factory,
    product_factory,
    report_factory,
    review_factory,
)
from data_seeder.relation_builder import DEFAULT_BATCH_SIZE, RelationBuilder

# Load environment
load_dotenv(".env")

# Database connection parameters
DB_USER = os.getenv("POSTGRES_USER", "postgres")
DB_PASSWORD = os.getenv("POSTGRES_PASSWORD", "postgres")
DB_HOST = os.getenv("POSTGRES_HOST", "localhost")
DB_PORT = os.getenv("POSTGRES_PORT", "5432")
DB_NAME = os.getenv("POSTGRES_DB", "techstore")

# Database connection URL
DB_URL = os.getenv(
    "DATABASE_URL",
    f"postgresql://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}",
)
DB_MAX_RETRIES = int(os.getenv("DB_MAX_RETRIES", "20"))
DB_RETRY_DELAY = int(os.getenv("DB_RETRY_DELAY", "2"))
CREATE_TABLES = os.getenv("CREATE_TABLES", "true").lower() in ("1", "true", "yes")

# Generation parameters
CHUNK_SIZE = int(os.getenv("CHUNK_SIZE", str(DEFAULT_CHUNK_SIZE)))
RELATION_BATCH_SIZE = int(os.getenv("RELATION_BATCH_SIZE", str(DEFAULT_BATCH_SIZE)))
RELATION_WORKERS = int(os.getenv("RELATION_WORKERS", "0")) or None
SEED = int(os.environ["SEED"]) if os.getenv("SEED") else None

MENU = (
    ("1", "Clients"),
    ("2", "Categories"),
    ("3", "Products"),
    ("4", "Reviews"),
    ("5", "Orders"),
    ("6", "Reports"),
    ("7", "All"),
)
ALL_CHOICE = "7"

EXIT_OK = 0
EXIT_ROLLED_BACK = 1
EXIT_INVALID_INPUT = 2

# Set up logger
logger = Logger.get_logger(__name__)


def parse_input(choice: str, record_count: str) -> Tuple[str, int]:
    """Validate the menu choice and record count typed by the user."""
    choice = choice.strip()
    if choice not in dict(MENU):
        raise InvalidInputError("Unknown menu option", choice)

    try:
        count = int(record_count.strip())
    except ValueError:
        raise InvalidInputError("Record count must be an integer", record_count) from None
    if count < 0:
        raise InvalidInputError("Record count cannot be negative", count)

    return choice, count


def load_column(session: Session, column) -> List:
    """Return all values of a column already stored in the database."""
    return [value for (value,) in session.query(column)]


class DataSeeder:
    """
    Class to fill the shop database with fake data inside a single transaction.
    """

    def __init__(
        self,
        db_url: str,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        relation_batch_size: int = DEFAULT_BATCH_SIZE,
        relation_workers: Optional[int] = None,
        seed: Optional[int] = None,
        create_tables: bool = True,
    ):
        self.db_url = db_url
        self.chunk_size = chunk_size
        self.relation_batch_size = relation_batch_size
        self.relation_workers = relation_workers
        self.create_tables = create_tables

        self.faker = make_faker(seed)
        self.rng = random.Random(seed)

    def generate_clients(self, session: Session, record_count: int) -> List:
        """Generate clients"""
        clients = save_in_batches(
            session, client_factory(self.faker), record_count, self.chunk_size
        )
        logger.info("Clients generated.")
        return clients

    def generate_categories(self, session: Session, record_count: int) -> List:
        """Generate categories"""
        categories = save_in_batches(
            session, category_factory(self.faker), record_count, self.chunk_size
        )
        logger.info("Categories generated.")
        return categories

    def generate_products(self, session: Session, record_count: int) -> List:
        """Generate products in existing categories"""
        category_ids = load_column(session, Category.id)
        if record_count and not category_ids:
            raise MissingDependencyError("products", "categories")

        products = save_in_batches(
            session,
            product_factory(self.faker, category_ids),
            record_count,
            self.chunk_size,
        )
        logger.info("Products generated.")
        return products

    def generate_reviews(self, session: Session, record_count: int) -> List:
        """Generate reviews of existing products by existing clients"""
        client_ids = load_column(session, Client.id)
        product_ids = load_column(session, Product.id)
        if record_count and not client_ids:
            raise MissingDependencyError("reviews", "clients")
        if record_count and not product_ids:
            raise MissingDependencyError("reviews", "products")

        reviews = save_in_batches(
            session,
            review_factory(self.faker, product_ids, client_ids),
            record_count,
            self.chunk_size,
        )
        logger.info("Reviews generated.")
        return reviews

    def generate_orders(self, session: Session, record_count: int) -> List:
        """Generate orders and link each of them with a few products"""
        client_ids = load_column(session, Client.id)
        product_ids = load_column(session, Product.id)
        if record_count and not client_ids:
            raise MissingDependencyError("orders", "clients")
        if record_count and not product_ids:
            raise MissingDependencyError("orders", "products")

        orders = save_in_batches(
            session, order_factory(self.faker, client_ids), record_count, self.chunk_size
        )

        logger.info("Generating product relations for orders...")
        builder = RelationBuilder(
            session,
            batch_size=self.relation_batch_size,
            max_workers=self.relation_workers,
            rng=self.rng,
        )
        builder.build(orders, product_ids)
        logger.info("Orders and product relations generated.")
        return orders

    def generate_reports(self, session: Session, record_count: int) -> List:
        """Generate reports about existing products"""
        client_ids = load_column(session, Client.id)
        product_names = load_column(session, Product.name)
        if record_count and not client_ids:
            raise MissingDependencyError("reports", "clients")
        if record_count and not product_names:
            raise MissingDependencyError("reports", "products")

        reports = save_in_batches(
            session,
            report_factory(self.faker, product_names, client_ids),
            record_count,
            self.chunk_size,
        )
        logger.info("Reports generated.")
        return reports

    def steps_for(self, choice: str) -> List[Callable[[Session, int], List]]:
        """Generators to run for a menu choice, in dependency order."""
        steps: Dict[str, Callable[[Session, int], List]] = {
            "1": self.generate_clients,
            "2": self.generate_categories,
            "3": self.generate_products,
            "4": self.generate_reviews,
            "5": self.generate_orders,
            "6": self.generate_reports,
        }
        if choice == ALL_CHOICE:
            return list(steps.values())
        return [steps[choice]]

    def __call__(self, choice: str, record_count: int) -> bool:
        """Main function to seed, returns whether the transaction was committed"""
        steps = self.steps_for(choice)
        engine = create_engine(self.db_url)

        try:
            # Wait for the database to be available
            if not wait_for_database(
                engine, max_retries=DB_MAX_RETRIES, delay=DB_RETRY_DELAY
            ):
                logger.error("Database is not available, nothing was generated")
                return False

            # Set up database
            if self.create_tables:
                setup_database(engine=engine)

            with Session(engine, expire_on_commit=False) as session:
                with bulk_insert_mode(session):
                    try:
                        for step in steps:
                            step(session, record_count)

                        session.commit()
                        logger.info("All data has been generated.")
                        return True

                    except SQLAlchemyError as e:
                        session.rollback()
                        self.report_error(e, prefix="Database error")
                    except Exception as e:
                        session.rollback()
                        self.report_error(e, prefix="Error")
                    return False
        finally:
            engine.dispose()

    @staticmethod
    def report_error(error: BaseException, prefix: str) -> None:
        """Log the error and the message of its inner cause"""
        message, details = describe_error(error)
        logger.error(f"{prefix}: {message}")
        logger.error(f"Details: {details or '-'}")
        logger.info("Transaction rolled back, no data was saved.")


def print_menu() -> None:
    """Print the numbered list of entities to generate."""
    print("What do you want to generate?")
    for key, label in MENU:
        print(f"{key}. {label}")


def main(stdin=None) -> int:
    """Run the interactive seeder and return the process exit code."""
    stdin = stdin or sys.stdin

    print_menu()
    choice = stdin.readline()
    print("How many records do you want to generate?")
    record_count = stdin.readline()

    try:
        choice, count = parse_input(choice, record_count)
    except InvalidInputError as e:
        logger.error(f"Invalid input: {e}")
        return EXIT_INVALID_INPUT

    data_seeder = DataSeeder(
        db_url=DB_URL,
        chunk_size=CHUNK_SIZE,
        relation_batch_size=RELATION_BATCH_SIZE,
        relation_workers=RELATION_WORKERS,
        seed=SEED,
        create_tables=CREATE_TABLES,
    )
    return EXIT_OK if data_seeder(choice, count) else EXIT_ROLLED_BACK


if __name__ == "__main__":
    sys.exit(main())
