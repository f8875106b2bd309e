import logging
import sys

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from lumina.config.settings import settings
from lumina.errors import LuminaError
from lumina.middleware.request_logging import log_requests_middleware
from lumina.routes.admin_routes import router as admin_router
from lumina.routes.auth_routes import router as auth_router
from lumina.routes.chat_routes import router as chat_router
from lumina.routes.store_routes import router as store_router
from lumina.storefront import Storefront
from lumina.utils.logger import get_logger


def _configure_logging() -> None:
    """Set up a structured, human-readable log format for the whole app.

    Format example::

        2026-10-19 10:33:19 | INFO     | lumina.services.chat_session:97 | send — reply complete id=... chars=212
    """
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(log_level)
    # Avoid duplicate handlers if create_app() is called more than once (e.g. tests)
    if not root.handlers:
        root.addHandler(handler)
    else:
        for h in root.handlers:
            h.setFormatter(formatter)

    if log_level > logging.DEBUG:
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)
        logging.getLogger("openai").setLevel(logging.WARNING)


async def _lumina_error_handler(request: Request, exc: LuminaError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def create_app(storefront: Storefront | None = None) -> FastAPI:
    _configure_logging()

    logger = get_logger(__name__)
    logger.info(
        "Starting %s — log_level=%s, chat_model=%s, openai_key=%s",
        settings.app_title,
        settings.log_level.upper(),
        settings.chat_model,
        "set" if settings.openai_api_key else "missing",
    )

    app = FastAPI(title=settings.app_title, version="0.1.0")
    # Single-client demo: one in-memory storefront per process, reset on restart
    app.state.storefront = storefront if storefront is not None else Storefront()
    logger.info("Storefront ready — %d products in catalog.", len(app.state.storefront.catalog))

    app.middleware("http")(log_requests_middleware)
    app.add_exception_handler(LuminaError, _lumina_error_handler)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(store_router, tags=["store"])
    app.include_router(auth_router, prefix="/auth", tags=["auth"])
    app.include_router(admin_router, tags=["admin"])
    app.include_router(chat_router)
    logger.info("Routers mounted: store, /auth, admin, /api/chat.")

    return app


app = create_app()
