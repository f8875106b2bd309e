"""
Cart Store
──────────
Line items keyed by product id. One line per product; quantities never go
below 1 (use remove_item to drop a line).
"""
from lumina.models.cart_line import CartLine
from lumina.models.product import Product
from lumina.utils.logger import get_logger

logger = get_logger(__name__)


class CartStore:
    def __init__(self):
        self._lines: list[CartLine] = []

    def _find(self, product_id: int) -> CartLine | None:
        return next((line for line in self._lines if line.id == product_id), None)

    def lines(self) -> list[CartLine]:
        return [line.model_copy(deep=True) for line in self._lines]

    def get(self, product_id: int) -> CartLine | None:
        line = self._find(product_id)
        return line.model_copy(deep=True) if line else None

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def add_to_cart(self, product: Product) -> CartLine:
        """Merge into the existing line (+1) or append a new line with quantity 1."""
        line = self._find(product.id)
        if line is not None:
            line.quantity += 1
            logger.info("add_to_cart — product id=%s quantity=%d", product.id, line.quantity)
        else:
            line = CartLine(**product.model_dump(), quantity=1)
            self._lines.append(line)
            logger.info("add_to_cart — new line product id=%s lines=%d", product.id, len(self._lines))
        return line.model_copy(deep=True)

    def update_quantity(self, product_id: int, delta: int) -> CartLine | None:
        """Shift the quantity by ``delta``, clamped at 1. Absent id is a no-op."""
        line = self._find(product_id)
        if line is None:
            logger.debug("update_quantity — no line for product id=%s, ignoring", product_id)
            return None
        line.quantity = max(1, line.quantity + delta)
        logger.debug("update_quantity — product id=%s delta=%+d quantity=%d", product_id, delta, line.quantity)
        return line.model_copy(deep=True)

    def remove_item(self, product_id: int) -> bool:
        before = len(self._lines)
        self._lines = [line for line in self._lines if line.id != product_id]
        removed = len(self._lines) != before
        if removed:
            logger.info("remove_item — product id=%s lines=%d", product_id, len(self._lines))
        return removed

    def clear(self) -> None:
        self._lines = []

    def total(self) -> int:
        return sum(line.price * line.quantity for line in self._lines)

    def line_count(self) -> int:
        return len(self._lines)

    def item_count(self) -> int:
        return sum(line.quantity for line in self._lines)
