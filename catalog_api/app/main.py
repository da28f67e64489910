"""
Main entrypoint for the Catalog API.

This module assembles the FastAPI application: logging, CORS, the
versioned routers, the health check, error handlers and the generated
OpenAPI documentation.  ``create_app`` builds and configures the app;
a default instance is created at import time as ``app`` so it can be
served directly, e.g.::

    uvicorn catalog_api.app.main:app --reload
"""

import logging
import time
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.v1.endpoints import health
from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.errors import install_error_handlers
from .core.logging_config import setup_logging
from .services import ProductStore, UserStore
from .services.seed import default_products, default_users

logger = logging.getLogger(__name__)

DESCRIPTION = (
    "Demonstration CRUD service for users and products backed by "
    "in-memory stores, with request validation and generated documentation."
)

OPENAPI_TAGS = [
    {"name": "users", "description": "User management endpoints"},
    {"name": "products", "description": "Product management endpoints"},
]


def create_app(
    settings: Optional[Settings] = None,
    user_store: Optional[UserStore] = None,
    product_store: Optional[ProductStore] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use; defaults to the values read from the
        environment.
    user_store, product_store : optional
        Stores to serve.  When omitted, fresh stores are created and,
        if ``settings.seed_data`` is set, filled with the demo records.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    if user_store is None:
        user_store = UserStore(default_users() if settings.seed_data else ())
    if product_store is None:
        product_store = ProductStore(default_products() if settings.seed_data else ())

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        description=DESCRIPTION,
        debug=settings.debug,
        openapi_url=settings.openapi_url,
        docs_url=settings.docs_url,
        redoc_url=None,
        openapi_tags=OPENAPI_TAGS,
        contact={"name": "API Support", "email": "support@example.com"},
        license_info={"name": "MIT", "url": "https://opensource.org/licenses/MIT"},
    )
    app.state.settings = settings
    app.state.user_store = user_store
    app.state.product_store = product_store
    app.state.started_at = time.monotonic()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_error_handlers(app)

    app.include_router(health.router)
    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.on_event("startup")
    async def startup_event() -> None:
        logger.info(
            "%s %s started (%s): %d users, %d products",
            settings.project_name,
            settings.api_version,
            settings.environment,
            app.state.user_store.count(),
            app.state.product_store.count(),
        )
        logger.info("API docs: %s  OpenAPI: %s  Health: /health", settings.docs_url, settings.openapi_url)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
