"""FastAPI application factory for the storefront HTTP surface."""

import os
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storefront.catalogue.api import category_router, product_router
from storefront.domain import storefront
from storefront.errors import register_error_handlers
from storefront.identity.api import router as identity_router
from storefront.identity.api import wishlist_router
from storefront.ordering.api import cart_router, order_router
from storefront.payments.api import router as payments_router
from storefront.utils.logging import add_context, clear_context, get_logger

logger = get_logger(__name__)


def create_app() -> FastAPI:
    """Build the app. The storefront domain must already be initialized."""
    app = FastAPI(
        title="Rai Aura API",
        description="Jewellery storefront: catalogue, cart, orders and accounts",
    )

    origins = [o.strip() for o in os.environ.get("CORS_ORIGINS", "*").split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the storefront domain context for every request."""
        with storefront.domain_context():
            response = await call_next(request)
        return response

    @app.middleware("http")
    async def request_logging_middleware(request: Request, call_next):
        """Bind a request id into the log context and log each request."""
        request_id = request.headers.get("x-request-id") or uuid4().hex
        clear_context()
        add_context(request_id=request_id, method=request.method, path=request.url.path)
        try:
            response = await call_next(request)
            logger.info("request_handled", status_code=response.status_code)
            response.headers["x-request-id"] = request_id
            return response
        finally:
            clear_context()

    app.include_router(product_router)
    app.include_router(category_router)
    app.include_router(cart_router)
    app.include_router(order_router)
    app.include_router(identity_router)
    app.include_router(wishlist_router)
    app.include_router(payments_router)

    @app.get("/health")
    async def health():
        return JSONResponse(content={"status": "ok", "domain": storefront.name})

    return app
