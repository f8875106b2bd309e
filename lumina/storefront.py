"""
Storefront
──────────
Owns the three stores, the chat session and the page-level UI state for one
client. Routes and templates only talk to the storefront; they never reach
into store internals.
"""
from enum import Enum

from lumina.data.seed_products import seed_products
from lumina.errors import PermissionDenied
from lumina.models.cart_line import CartLine
from lumina.models.identity import AuthMode, Credentials, Identity
from lumina.models.product import Category, Product
from lumina.services.admin_service import AdminService
from lumina.services.chat_provider import ChatProvider
from lumina.services.chat_session import ChatSession
from lumina.stores.cart_store import CartStore
from lumina.stores.catalog_store import CatalogStore
from lumina.stores.session_store import SessionStore
from lumina.utils.logger import get_logger

logger = get_logger(__name__)


class ViewMode(str, Enum):
    STORE = "store"
    ADMIN = "admin"


class Storefront:
    def __init__(
        self,
        catalog: CatalogStore | None = None,
        cart: CartStore | None = None,
        session: SessionStore | None = None,
        chat: ChatSession | None = None,
        chat_provider: ChatProvider | None = None,
    ):
        self.catalog = catalog if catalog is not None else CatalogStore(seed_products())
        self.cart = cart if cart is not None else CartStore()
        self.session = session if session is not None else SessionStore()
        self.chat = chat if chat is not None else ChatSession(provider=chat_provider)
        self.admin = AdminService(self.catalog)

        self.view_mode = ViewMode.STORE
        self.selected_category = Category.ALL
        self.search_query = ""
        self.selected_product_id: int | None = None
        self.cart_open = False
        self.auth_modal_open = False
        self.chat_open = False

    # ── Catalog browsing ──────────────────────────────────────────────────────

    def visible_products(self) -> list[Product]:
        return self.catalog.filter(self.selected_category, self.search_query)

    def set_filter(self, category: Category | str | None = None, query: str | None = None) -> None:
        if category is not None:
            self.selected_category = Category(category)
        if query is not None:
            self.search_query = query

    def select_product(self, product_id: int | None) -> Product | None:
        """Open (or close, with None) the product detail modal."""
        if product_id is None:
            self.selected_product_id = None
            return None
        product = self.catalog.get(product_id)
        self.selected_product_id = product.id if product else None
        return product

    # ── Cart ──────────────────────────────────────────────────────────────────

    def add_to_cart(self, product_id: int) -> CartLine | None:
        product = self.catalog.get(product_id)
        if product is None:
            return None
        line = self.cart.add_to_cart(product)
        self.cart_open = True
        return line

    def toggle_cart(self, open_: bool | None = None) -> bool:
        self.cart_open = (not self.cart_open) if open_ is None else open_
        return self.cart_open

    # ── Session ───────────────────────────────────────────────────────────────

    def toggle_auth_modal(self, open_: bool | None = None) -> bool:
        self.auth_modal_open = (not self.auth_modal_open) if open_ is None else open_
        return self.auth_modal_open

    async def login(self, credentials: Credentials, mode: AuthMode) -> Identity:
        identity = await self.session.login(credentials, mode)
        self.auth_modal_open = False
        if identity.is_admin:
            self.view_mode = ViewMode.ADMIN
        return identity

    def logout(self, confirmed: bool) -> bool:
        cleared = self.session.logout(confirmed)
        if cleared:
            self.view_mode = ViewMode.STORE
        return cleared

    def set_view_mode(self, mode: ViewMode | str) -> ViewMode:
        mode = ViewMode(mode)
        if mode is ViewMode.ADMIN and not self.session.is_admin:
            logger.warning("set_view_mode — admin view requested without admin session")
            raise PermissionDenied("관리자만 접근할 수 있습니다.")
        self.view_mode = mode
        return self.view_mode

    def require_admin(self) -> None:
        if not self.session.is_admin:
            raise PermissionDenied("관리자만 접근할 수 있습니다.")

    # ── Chat widget ───────────────────────────────────────────────────────────

    def toggle_chat(self, open_: bool | None = None) -> bool:
        # Hiding the widget never cancels a reply that is still streaming
        self.chat_open = (not self.chat_open) if open_ is None else open_
        return self.chat_open
