# catalog/main.py
# run with: uvicorn catalog.main:app --port 8080  (or python -m catalog.main)

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Callable, Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings, settings as default_settings
from .errors import CatalogError, InvalidData
from .handler import router as products_router
from .logging_config import setup_logging
from .repository import ProductRepository
from .responses import failure
from .security import TokenAuthorizer
from .service import ProductService
from .store import JsonStore

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[ProductRepository] = None,
    clock: Optional[Callable[[], datetime]] = None,
) -> FastAPI:
    # without an injected repository, settings.products_file is loaded on startup
    settings = settings or default_settings
    setup_logging(settings.log_level)

    load_on_startup = repository is None
    repository = repository if repository is not None else ProductRepository()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if load_on_startup:
            products = JsonStore(settings.products_file).get_all()
            repository.load(products)
            logger.info("Loaded %d products from %s", len(products), settings.products_file)
        yield

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = settings
    app.state.repository = repository
    app.state.service = ProductService(repository)
    app.state.authorizer = TokenAuthorizer(settings.token)
    app.state.clock = clock or datetime.now

    # ---------------------------
    # Error envelope
    # ---------------------------
    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request, exc: CatalogError):
        return failure(exc.message, exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request, exc: StarletteHTTPException):
        return failure(str(exc.detail), exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request, exc: RequestValidationError):
        return failure(InvalidData.message, InvalidData.status_code)

    # ---------------------------
    # Routes
    # ---------------------------
    @app.get("/ping", response_class=PlainTextResponse)
    async def ping():
        return "pong"

    app.include_router(products_router, prefix="/products", tags=["products"])

    return app


app = create_app()


def main() -> None:
    import uvicorn

    uvicorn.run(app, host=default_settings.host, port=default_settings.port)


if __name__ == "__main__":
    main()
