from html import escape

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from lumina.config.settings import settings
from lumina.models.product import Category
from lumina.routes.dependencies import get_storefront
from lumina.storefront import Storefront, ViewMode
from lumina.templates import (
    ADMIN_HTML,
    STOREFRONT_HTML,
    format_price,
    generate_admin_row,
    generate_cart_line,
    generate_category_tab,
    generate_chat_message,
    generate_product_card,
)

router = APIRouter()


class AddToCartRequest(BaseModel):
    product_id: int


class UpdateQuantityRequest(BaseModel):
    delta: int


def _cart_payload(storefront: Storefront) -> dict:
    return {
        "lines": [line.model_dump(mode="json") for line in storefront.cart.lines()],
        "line_count": storefront.cart.line_count(),
        "item_count": storefront.cart.item_count(),
        "total": storefront.cart.total(),
        "is_open": storefront.cart_open,
    }


# ── Pages ─────────────────────────────────────────────────────────────────────

@router.get("/", response_class=HTMLResponse)
async def home(
    category: Category | None = None,
    q: str | None = None,
    storefront: Storefront = Depends(get_storefront),
):
    if storefront.view_mode is ViewMode.ADMIN and storefront.session.is_admin:
        products = storefront.catalog.products()
        return HTMLResponse(
            content=ADMIN_HTML.format(
                title=f"{settings.app_title} — Admin",
                admin_name=escape(storefront.session.current.name),
                product_count=len(products),
                rows_html="".join(generate_admin_row(p) for p in products),
            )
        )

    storefront.set_filter(category=category, query=q)
    identity = storefront.session.current

    if identity is None:
        session_html = (
            "<button onclick=\"post('/auth/modal')\" "
            'class="font-medium">LOGIN</button>'
        )
        admin_link = ""
    else:
        session_html = (
            f'<span class="text-gray-500">{escape(identity.name)}님</span>'
            "<button onclick=\"if (confirm('로그아웃 하시겠습니까?')) post('/auth/logout', {confirm: true})\" "
            'class="font-medium">LOGOUT</button>'
        )
        admin_link = (
            "<button onclick=\"post('/api/view-mode', {mode: 'admin'}, 'PUT')\" "
            'class="text-sm font-medium">ADMIN</button>'
            if identity.is_admin
            else ""
        )

    products = storefront.visible_products()
    products_html = "".join(generate_product_card(p) for p in products) or (
        "<div class='col-span-full text-center py-20 text-gray-400'>검색 결과가 없습니다.</div>"
    )
    cart_html = "".join(generate_cart_line(line) for line in storefront.cart.lines()) or (
        "<p class='text-center text-gray-400 py-20'>장바구니가 비어있습니다.</p>"
    )

    return HTMLResponse(
        content=STOREFRONT_HTML.format(
            title=settings.app_title,
            admin_link=admin_link,
            session_html=session_html,
            category=escape(storefront.selected_category.value),
            query=escape(storefront.search_query),
            category_tabs="".join(
                generate_category_tab(c, storefront.selected_category, storefront.search_query)
                for c in storefront.catalog.categories()
            ),
            products_html=products_html,
            cart_html=cart_html,
            cart_line_count=storefront.cart.line_count(),
            cart_total=format_price(storefront.cart.total()),
            currency=settings.currency_symbol,
            cart_visibility="" if storefront.cart_open else "hidden",
            chat_html="".join(generate_chat_message(m) for m in storefront.chat.messages()),
            chat_visibility="" if storefront.chat_open else "hidden",
            auth_visibility="" if storefront.auth_modal_open else "hidden",
        )
    )


# ── Catalog ───────────────────────────────────────────────────────────────────

@router.get("/api/products")
async def list_products(
    category: Category = Category.ALL,
    q: str = "",
    storefront: Storefront = Depends(get_storefront),
):
    products = storefront.catalog.filter(category, q)
    return {
        "category": category.value,
        "query": q,
        "count": len(products),
        "products": [p.model_dump(mode="json") for p in products],
    }


@router.get("/api/products/{product_id}")
async def get_product(product_id: int, storefront: Storefront = Depends(get_storefront)):
    product = storefront.catalog.get(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail=f"Product not found: {product_id}")
    return product.model_dump(mode="json")


# ── Cart ──────────────────────────────────────────────────────────────────────

@router.get("/api/cart")
async def get_cart(storefront: Storefront = Depends(get_storefront)):
    return _cart_payload(storefront)


@router.post("/api/cart/items")
async def add_cart_item(body: AddToCartRequest, storefront: Storefront = Depends(get_storefront)):
    line = storefront.add_to_cart(body.product_id)
    if line is None:
        raise HTTPException(status_code=404, detail=f"Product not found: {body.product_id}")
    return _cart_payload(storefront)


@router.patch("/api/cart/items/{product_id}")
async def update_cart_item(
    product_id: int,
    body: UpdateQuantityRequest,
    storefront: Storefront = Depends(get_storefront),
):
    storefront.cart.update_quantity(product_id, body.delta)
    return _cart_payload(storefront)


@router.delete("/api/cart/items/{product_id}")
async def remove_cart_item(product_id: int, storefront: Storefront = Depends(get_storefront)):
    storefront.cart.remove_item(product_id)
    return _cart_payload(storefront)


@router.post("/api/cart/toggle")
async def toggle_cart(storefront: Storefront = Depends(get_storefront)):
    return {"is_open": storefront.toggle_cart()}
