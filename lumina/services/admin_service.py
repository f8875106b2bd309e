"""
Admin product management
────────────────────────
Form-driven wrapper over the catalog store for the admin dashboard.

  • new_draft()   – blank template with a fresh synthetic id
  • edit_draft()  – copy of an existing product
  • submit()      – create or update, decided only by whether the id exists
  • delete()      – removes a product once the admin confirmed
"""
import time

from lumina.config.settings import settings
from lumina.errors import ValidationError
from lumina.models.product import Category, Product, ProductDraft
from lumina.stores.catalog_store import CatalogStore
from lumina.utils.logger import get_logger

logger = get_logger(__name__)

MSG_NAME_AND_PRICE_REQUIRED = "상품명과 가격을 입력해주세요."
MSG_CATEGORY_REQUIRED = "카테고리를 선택해주세요."


class AdminService:
    def __init__(self, catalog: CatalogStore):
        self.catalog = catalog

    def _synthetic_id(self) -> int:
        # Epoch milliseconds, bumped past any id already in the catalog
        candidate = int(time.time() * 1000)
        while self.catalog.exists(candidate):
            candidate += 1
        return candidate

    def new_draft(self) -> ProductDraft:
        return ProductDraft(
            id=self._synthetic_id(),
            category=Category.CLOTHING,
            tags=[],
            image=settings.placeholder_image_url,
        )

    def edit_draft(self, product_id: int) -> ProductDraft | None:
        product = self.catalog.get(product_id)
        if product is None:
            return None
        return ProductDraft(**product.model_dump())

    def submit(self, draft: ProductDraft) -> Product:
        # A price of 0 counts as "not entered", same as an empty name
        if not draft.name or not draft.price:
            raise ValidationError(MSG_NAME_AND_PRICE_REQUIRED)
        if draft.category is Category.ALL:
            raise ValidationError(MSG_CATEGORY_REQUIRED)

        product = Product(**draft.model_dump())
        if self.catalog.exists(product.id):
            logger.info("submit — updating product id=%s", product.id)
            self.catalog.update(product)
        else:
            logger.info("submit — creating product id=%s", product.id)
            self.catalog.add(product)
        return product

    def delete(self, product_id: int, confirmed: bool) -> bool:
        if not confirmed:
            logger.debug("delete — product id=%s not confirmed", product_id)
            return False
        return self.catalog.remove(product_id)
