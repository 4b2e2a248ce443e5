"""numclass-api: FastAPI application factory.

    - Routes registered explicitly
    - CORS from Settings (default: every origin, GET only)
    - Settings, fact provider and classifier index live on app.state;
      nothing is shared through module globals
"""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from numclass_api import __version__
from numclass_api.api.error_handlers import register_error_handlers
from numclass_api.api.routes import classify, health
from numclass_api.config import Settings
from numclass_api.facts import FactProvider
from numclass_api.registry import Index, default_index

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    logger.info(
        f"numclass-api started ({len(app.state.index.funcs)} classifiers, "
        f"facts from {settings.fact_url})",
    )
    yield
    logger.info("numclass-api shutting down")


def create_app(settings: Settings | None = None, fact_provider: FactProvider | None = None,
               index: Index | None = None) -> FastAPI:
    settings = settings or Settings()

    # settings.debug only raises log verbosity; 500 bodies stay generic
    app = FastAPI(title="numclass-api", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.fact_provider = fact_provider or FactProvider(settings.fact_url, settings.fact_timeout)
    app.state.index = index or default_index()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=list(settings.cors_methods),
        allow_headers=["Origin", "Content-Length", "Content-Type"],
    )

    @app.middleware("http")
    async def access_log(request: Request, call_next):
        t0 = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = round((time.perf_counter() - t0) * 1000.0, 2)
        logger.info(
            f"{request.method} {request.url.path} {response.status_code} {elapsed_ms:.2f}ms",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "elapsed_ms": elapsed_ms,
            },
        )
        return response

    app.include_router(health.router)
    app.include_router(classify.router)
    register_error_handlers(app)
    return app
