import logging

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.core.config import Settings, settings
from storefront.core.exceptions import InvalidQuantity, StorefrontError
from storefront.api import cart, health, products
from storefront.schemas.common import ErrorResponse
from storefront.services.cart import CartStore
from storefront.services.catalog import Catalog
from storefront.services.session import resolve_session_id

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def _error(status_code: int, message: str, **extra) -> JSONResponse:
    body = ErrorResponse(message=message, **extra)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def create_app(
    app_settings: Settings = None,
    catalog: Catalog = None,
    cart_store: CartStore = None
) -> FastAPI:
    app_settings = app_settings or settings

    if catalog is None:
        if app_settings.CATALOG_FILE:
            catalog = Catalog.from_file(app_settings.CATALOG_FILE)
        else:
            catalog = Catalog.default()

    app = FastAPI(
        title=app_settings.APP_NAME,
        description="Product catalog and per-session shopping cart API",
        version="1.0.0",
        openapi_url="/api/openapi.json",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    # Store lifetime is tied to the app object
    app.state.settings = app_settings
    app.state.catalog = catalog
    app.state.cart_store = cart_store or CartStore()

    session_header = app_settings.SESSION_HEADER

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[session_header],
    )

    @app.middleware("http")
    async def session_middleware(request: Request, call_next):
        if not request.url.path.startswith("/api/cart"):
            return await call_next(request)

        session_id = resolve_session_id(request.headers.get(session_header))
        request.state.session_id = session_id
        response = await call_next(request)
        # Echoed on every cart response so header-less clients can keep the id
        response.headers[session_header] = session_id
        return response

    app.include_router(products.router)
    app.include_router(cart.router)
    app.include_router(health.router)

    @app.exception_handler(StorefrontError)
    async def storefront_exception_handler(request: Request, exc: StorefrontError):
        return _error(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        message = "Invalid request."
        if any("quantity" in err.get("loc", ()) for err in errors):
            message = InvalidQuantity.default_message

        return _error(status.HTTP_400_BAD_REQUEST, message, errors=jsonable_encoder(errors))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # Unknown paths and unsupported methods both count as a missing endpoint
        if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
            return _error(status.HTTP_404_NOT_FOUND, "Endpoint not found")

        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
        detail = str(exc) if app_settings.is_development else "Something went wrong"
        response = _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error", error=detail)

        # Built outside session_middleware, so the header is added here
        session_id = getattr(request.state, "session_id", None)
        if session_id is not None:
            response.headers[session_header] = session_id
        return response

    logger.info(f"{app_settings.APP_NAME} ready with {len(catalog)} products ({app_settings.ENVIRONMENT})")
    return app


app = create_app()


def run():
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
