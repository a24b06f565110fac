"""Inventory aggregate: products indexed by name prefix and ranked by stock."""
import logging
from typing import Dict, List, Optional

from sme.domain.Outcome import Failure, Outcome
from sme.domain.Product import Product
from sme.events.Event_Bus import EventBus, GLOBAL_EVENT_BUS
from sme.events.event_helpers import publish_low_stock
from sme.logic.inventory.prefix_index import PrefixIndex
from sme.logic.inventory.stock_ranking import StockRanking

logger = logging.getLogger(__name__)


class InventoryStore:
    def __init__(self, event_bus: Optional[EventBus] = None):
        self._next_id = 1
        self._products: Dict[int, Product] = {}
        self._index = PrefixIndex()
        self._ranking = StockRanking()
        self._event_bus = event_bus or GLOBAL_EVENT_BUS

    # --- Observer helpers -------------------------------------------------
    def set_event_bus(self, bus: EventBus):
        self._event_bus = bus
        return self

    def _evaluate(self, product: Product):
        if product.is_low_stock():
            publish_low_stock(product, product.stock, product.reorder_level, bus=self._event_bus)

    # --- Mutations ---------------------------------------------------------
    def add_product(self, name: str, category: str, price: float, stock: int, reorder_level: int) -> Product:
        '''
        Adds a product under the next id. Never fails.
        '''
        product = Product(self._next_id, name, category, price, stock, reorder_level)
        self._next_id += 1
        self._products[product.id] = product
        self._index.insert(product.name.lower(), product.id)
        self._ranking.push(product.id, product.stock)
        self._evaluate(product)
        return product

    def update_stock(self, product_id: int, delta: int) -> Outcome:
        '''
        Adds delta to the stock of a product. A negative delta adjusts down
        with no floor; sell_product is the guarded path.
        '''
        product = self._products.get(product_id)
        if product is None:
            logger.info(f"Stock update rejected: product {product_id} not found")
            return Outcome.rejected(Failure.NOT_FOUND)
        product._adjust_stock(delta)
        self._ranking.update(product.id, product.stock)
        self._evaluate(product)
        return Outcome.success()

    def sell_product(self, product_id: int, qty: int) -> Outcome:
        '''
        Records a sale. Rejected without any change if the product is unknown,
        qty is not positive or exceeds the current stock.
        '''
        product = self._products.get(product_id)
        if product is None:
            logger.info(f"Sale rejected: product {product_id} not found")
            return Outcome.rejected(Failure.NOT_FOUND)
        if qty <= 0 or qty > product.stock:
            logger.info(f"Sale rejected: qty {qty} for product {product_id} with stock {product.stock}")
            return Outcome.rejected(Failure.INVALID_QUANTITY)
        product._adjust_stock(-qty)
        self._ranking.update(product.id, product.stock)
        self._evaluate(product)
        return Outcome.success()

    # --- Queries -------------------------------------------------------------
    def get(self, product_id: int) -> Optional[Product]:
        return self._products.get(product_id)

    def search_by_prefix(self, prefix: str) -> List[Product]:
        '''
        Case-insensitive prefix search; "" matches every product.
        '''
        ids = self._index.search_prefix((prefix or "").lower())
        found = [self._products[i] for i in ids if i in self._products]
        found.sort(key=lambda p: p.sort_key)
        return found

    def low_stock_alerts(self, limit: int) -> List[Product]:
        '''
        Up to limit products at or below their reorder level, lowest stock first.
        '''
        result: List[Product] = []
        if limit <= 0:
            return result
        for _stock, product_id in self._ranking.ascending():
            product = self._products[product_id]
            if product.is_low_stock():
                result.append(product)
                if len(result) >= limit:
                    break
        return result

    def list_all(self) -> List[Product]:
        return sorted(self._products.values(), key=lambda p: p.sort_key)

    def count(self) -> int:
        return len(self._products)

    __len__ = count

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(p) for p in self.list_all())
        return f"Products:\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()
