from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from products_api.config import Settings
from products_api.database.database import Database
from products_api.docs import SITE_TITLE, build_docs_router
from products_api.exceptions import register_exception_handlers
from products_api.routes import product
from products_api.utils.logging import get_logger, log_requests

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.database.connect()
    yield
    logger.info("Shutting down products API")
    app.state.database.dispose()


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    settings = settings or Settings()

    app = FastAPI(
        title="REST API Python / FastAPI",
        description="API Docs for Products",
        version="1.0.0",
        docs_url=None,
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "Products",
                "description": "API operations related to products",
            },
        ],
    )
    app.state.settings = settings
    app.state.database = database or Database(settings)

    app.add_middleware(GZipMiddleware, minimum_size=settings.gzip_minimum_size)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_requests)

    register_exception_handlers(app)

    app.include_router(product.router)
    app.include_router(build_docs_router(app))

    logger.debug("{} ready, CORS origins: {}", SITE_TITLE, settings.allowed_origins)
    return app


app = create_app()
