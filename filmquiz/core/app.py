from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from filmquiz.api.deps import services
from filmquiz.api.main import api_router
from filmquiz.core.errors import CatalogError, ConfigurationError

from .config import settings
from .version import __version__


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events (startup/shutdown).
    """
    config_error = services.config_error()
    if config_error:
        logger.error(f"Configuration error: {config_error}")
    yield
    try:
        await services.close()
        logger.info("TMDB client closed")
    except Exception as exc:
        logger.warning(f"Failed to close TMDB client: {exc}")


app = FastAPI(
    title="Filmquiz",
    description="Quiz-driven movie recommendations backed by TMDB",
    version=__version__,
    lifespan=lifespan,
    docs_url=None if settings.APP_ENV != "development" else "/docs",
    redoc_url=None if settings.APP_ENV != "development" else "/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError):
    return JSONResponse(status_code=503, content={"detail": exc.user_message})


@app.exception_handler(CatalogError)
async def catalog_error_handler(request: Request, exc: CatalogError):
    logger.error(f"Catalog request failed for {request.url.path}: {exc.__cause__}")
    return JSONResponse(status_code=502, content={"detail": exc.user_message})


app.include_router(api_router)
