from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from lumina.models.product import ProductDraft
from lumina.routes.dependencies import get_storefront, require_admin
from lumina.storefront import Storefront, ViewMode

router = APIRouter()


class ViewModeRequest(BaseModel):
    mode: ViewMode


@router.put("/api/view-mode")
async def set_view_mode(body: ViewModeRequest, storefront: Storefront = Depends(get_storefront)):
    """Switch storefront/admin. The admin view is gated on the administrator role (403)."""
    return {"view_mode": storefront.set_view_mode(body.mode).value}


# ── Admin product CRUD ────────────────────────────────────────────────────────

@router.get("/admin/products/new")
async def new_product_draft(storefront: Storefront = Depends(require_admin)):
    return storefront.admin.new_draft().model_dump(mode="json")


@router.get("/admin/products/{product_id}/edit")
async def edit_product_draft(product_id: int, storefront: Storefront = Depends(require_admin)):
    draft = storefront.admin.edit_draft(product_id)
    if draft is None:
        raise HTTPException(status_code=404, detail=f"Product not found: {product_id}")
    return draft.model_dump(mode="json")


@router.post("/admin/products")
async def submit_product(draft: ProductDraft, storefront: Storefront = Depends(require_admin)):
    """Create when the draft's id is new, update when it already exists."""
    existed = storefront.catalog.exists(draft.id)
    product = storefront.admin.submit(draft)
    return {"created": not existed, "product": product.model_dump(mode="json")}


@router.delete("/admin/products/{product_id}")
async def delete_product(
    product_id: int,
    confirm: bool = False,
    storefront: Storefront = Depends(require_admin),
):
    deleted = storefront.admin.delete(product_id, confirmed=confirm)
    return {"deleted": deleted, "product_id": product_id}
