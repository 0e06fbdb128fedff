from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from src.api.core.exceptions.base import register_exception_handlers
from src.api.core.middleware.logging import logging_middleware
from src.api.core.middleware.security import (
    PayloadSizeMiddleware,
    SecurityHeadersMiddleware,
)
from src.api.router import api_router
from src.database.connection import AsyncSessionLocal, async_engine, init_models
from src.modules.classification.service import build_image_classifier
from src.modules.vessels.service import build_vessel_directory
from src.utils.logger import setup_logging
from src.utils.settings.app import AppSettings
from src.utils.settings.storage import StorageSettings

app_settings = AppSettings()
storage_settings = StorageSettings()
is_production = app_settings.is_production


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger = setup_logging(is_production)
    logger.info("Starting Boat Identifier API...")

    upload_dir = Path(storage_settings.UPLOAD_DIR)
    upload_dir.mkdir(parents=True, exist_ok=True)

    await init_models()

    app.state.session_factory = AsyncSessionLocal
    app.state.upload_dir = upload_dir
    app.state.image_classifier = build_image_classifier()
    app.state.vessel_directory = build_vessel_directory()
    logger.info("Adapters and database session factory added to app state")

    yield

    logger.info("Shutting down Boat Identifier API...")
    await async_engine.dispose()


app = FastAPI(
    title="Boat Identifier API",
    description="Boat identification from photos with maritime registry lookup",
    version=app_settings.API_VERSION,
    lifespan=lifespan,
    docs_url=None if is_production else "/docs",
    redoc_url=None if is_production else "/redoc",
    openapi_url=None if is_production else "/openapi.json",
)

register_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=app_settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(SecurityHeadersMiddleware, is_production=is_production)
app.add_middleware(
    PayloadSizeMiddleware, max_request_size=app_settings.MAX_REQUEST_SIZE
)
app.middleware("http")(logging_middleware)

app.include_router(api_router)

# The directory is created in the lifespan, after the mount is declared
app.mount(
    storage_settings.UPLOAD_URL_PREFIX,
    StaticFiles(directory=storage_settings.UPLOAD_DIR, check_dir=False),
    name="uploads",
)


def run_dev_server():
    """Run development server with auto-reload."""
    uvicorn.run(
        "src.main:app",
        host="0.0.0.0",
        port=app_settings.PORT,
        reload=True,
        access_log=False,
    )


def run_prod_server():
    """Run production server."""
    uvicorn.run(
        "src.main:app",
        host="0.0.0.0",
        port=app_settings.PORT,
        reload=False,
        access_log=False,
    )
