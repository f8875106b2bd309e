"""
Catalog Store
─────────────
In-memory product list owned by the storefront.

  • add      – prepend a new product (id must be unused)
  • update   – replace the product with the same id, silent no-op when absent
  • remove   – delete by id, silent no-op when absent
  • filter   – category (or Category.ALL) AND free-text over name + tags

Text matching is case-insensitive for both names and tags.
Every read returns copies; the only way to change the catalog is through
the operations below.
"""
from typing import Iterable

from lumina.errors import InvalidArgument
from lumina.models.product import Category, Product
from lumina.utils.logger import get_logger

logger = get_logger(__name__)


class CatalogStore:
    def __init__(self, products: Iterable[Product] = ()):
        self._products: list[Product] = []
        for product in products:
            if self.exists(product.id):
                raise InvalidArgument(f"Duplicate product id in seed data: {product.id}")
            self._products.append(product.model_copy(deep=True))

    def __len__(self) -> int:
        return len(self._products)

    def _index_of(self, product_id: int) -> int | None:
        for i, p in enumerate(self._products):
            if p.id == product_id:
                return i
        return None

    def exists(self, product_id: int) -> bool:
        return self._index_of(product_id) is not None

    def get(self, product_id: int) -> Product | None:
        idx = self._index_of(product_id)
        if idx is None:
            return None
        return self._products[idx].model_copy(deep=True)

    def products(self) -> list[Product]:
        return [p.model_copy(deep=True) for p in self._products]

    def add(self, product: Product) -> Product:
        if self.exists(product.id):
            logger.warning("add — rejected duplicate product id=%s", product.id)
            raise InvalidArgument(f"Product id {product.id} already exists.")
        stored = product.model_copy(deep=True)
        self._products.insert(0, stored)
        logger.info("add — product id=%s name=%r catalog_size=%d", stored.id, stored.name, len(self))
        return stored.model_copy(deep=True)

    def update(self, product: Product) -> Product | None:
        idx = self._index_of(product.id)
        if idx is None:
            logger.debug("update — no product with id=%s, ignoring", product.id)
            return None
        self._products[idx] = product.model_copy(deep=True)
        logger.info("update — product id=%s name=%r", product.id, product.name)
        return product.model_copy(deep=True)

    def remove(self, product_id: int) -> bool:
        idx = self._index_of(product_id)
        if idx is None:
            logger.debug("remove — no product with id=%s, ignoring", product_id)
            return False
        removed = self._products.pop(idx)
        logger.info("remove — product id=%s name=%r catalog_size=%d", removed.id, removed.name, len(self))
        return True

    def filter(self, category: Category | str = Category.ALL, query: str = "") -> list[Product]:
        """Products in ``category`` whose name or any tag contains ``query``, catalog order kept."""
        category = Category(category)
        needle = (query or "").casefold()

        def _matches(p: Product) -> bool:
            if category is not Category.ALL and p.category is not category:
                return False
            if not needle:
                return True
            if needle in p.name.casefold():
                return True
            return any(needle in tag.casefold() for tag in p.tags)

        results = [p.model_copy(deep=True) for p in self._products if _matches(p)]
        logger.debug(
            "filter — category=%s query=%r hits=%d/%d", category.value, query, len(results), len(self)
        )
        return results

    def categories(self) -> list[Category]:
        """Filter tabs in display order, sentinel first."""
        return [Category.ALL, *Category.concrete()]
