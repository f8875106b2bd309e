from fastapi import Request

from lumina.storefront import Storefront


async def get_storefront(request: Request) -> Storefront:
    """The single in-memory storefront created by ``create_app``."""
    return request.app.state.storefront


async def require_admin(request: Request) -> Storefront:
    storefront: Storefront = request.app.state.storefront
    storefront.require_admin()
    return storefront
