from fastapi import APIRouter, Depends
from pydantic import BaseModel

from lumina.models.identity import AuthMode, Credentials
from lumina.routes.dependencies import get_storefront
from lumina.storefront import Storefront
from lumina.utils.logger import get_logger

router = APIRouter()
logger = get_logger(__name__)


class LoginRequest(BaseModel):
    mode: AuthMode = AuthMode.SIGN_UP
    email: str = ""
    password: str = ""
    name: str = ""


class LogoutRequest(BaseModel):
    confirm: bool = False


def _session_payload(storefront: Storefront) -> dict:
    identity = storefront.session.current
    return {
        "authenticated": identity is not None,
        "user": identity.model_dump(mode="json") if identity else None,
        "is_admin": storefront.session.is_admin,
        "view_mode": storefront.view_mode.value,
    }


@router.get("/session")
async def get_session(storefront: Storefront = Depends(get_storefront)):
    return _session_payload(storefront)


@router.post("/modal")
async def toggle_auth_modal(storefront: Storefront = Depends(get_storefront)):
    return {"is_open": storefront.toggle_auth_modal()}


@router.post("/login")
async def login(body: LoginRequest, storefront: Storefront = Depends(get_storefront)):
    """Mock sign-up / sign-in. ValidationError → 400 with the inline message as ``detail``."""
    credentials = Credentials(email=body.email, password=body.password, name=body.name)
    await storefront.login(credentials, body.mode)
    return _session_payload(storefront)


@router.post("/logout")
async def logout(body: LogoutRequest, storefront: Storefront = Depends(get_storefront)):
    cleared = storefront.logout(body.confirm)
    if not cleared:
        logger.info("logout — cancelled by user")
    return {"logged_out": cleared, **_session_payload(storefront)}
