"""Concurrent generation of the order/product junction rows."""

import random
from concurrent.futures import ThreadPoolExecutor, wait
from typing import List, Optional, Sequence

from sqlalchemy.orm import Session

from utilities.exceptions import MissingDependencyError
from utilities.logger import Logger
from utilities.models import ProductOrderRelation

DEFAULT_BATCH_SIZE = 100
MAX_PRODUCTS_PER_ORDER = 5

logger = Logger.get_logger(__name__)


def pick_products(
    order_id: int, product_ids: Sequence[int], seed: int
) -> List[ProductOrderRelation]:
    """Relations between one order and 1..5 distinct products from the pool."""
    rng = random.Random(seed)
    count = rng.randint(1, min(MAX_PRODUCTS_PER_ORDER, len(product_ids)))
    return [
        ProductOrderRelation(order_id=order_id, product_id=product_id)
        for product_id in rng.sample(product_ids, count)
    ]


class RelationBuilder:
    """
    Links orders with products using a pool of worker threads.

    Orders are handled in batches of batch_size: one worker per order is
    submitted, the builder waits for the whole batch, then flushes the
    collected relations in one go before starting the next batch. Workers
    hand their relations back through futures, the session is only used from
    the calling thread.
    """

    def __init__(
        self,
        session: Session,
        batch_size: int = DEFAULT_BATCH_SIZE,
        max_workers: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ):
        if batch_size < 1:
            raise ValueError(f"batch_size must be positive, got {batch_size}")

        self.session = session
        self.batch_size = batch_size
        self.max_workers = max_workers
        self.rng = rng or random.Random()

    def build(self, orders: Sequence, product_ids: Sequence[int]) -> int:
        """Generate and flush relations for every order, return how many were written."""
        if not orders:
            return 0
        if not product_ids:
            raise MissingDependencyError("product relations", "products")

        pool = list(product_ids)
        total_orders = len(orders)
        processed_orders = 0
        written = 0

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            for start in range(0, total_orders, self.batch_size):
                futures = [
                    executor.submit(
                        pick_products, order.id, pool, self.rng.getrandbits(64)
                    )
                    for order in orders[start : start + self.batch_size]
                ]
                wait(futures)

                relations = []
                for future in futures:
                    # Re-raises the worker's exception, if any
                    relations.extend(future.result())
                    processed_orders += 1
                    if (
                        processed_orders % self.batch_size == 0
                        or processed_orders == total_orders
                    ):
                        logger.info(
                            f"Processed {processed_orders}/{total_orders} orders..."
                        )

                self.session.add_all(relations)
                self.session.flush()
                for relation in relations:
                    self.session.expunge(relation)
                written += len(relations)
                logger.info(f"Flushed {len(relations)} product order relations")

        return written
