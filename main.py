"""
Image Manipulation Service - Main FastAPI Application
"""

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Add parent directory to path
sys.path.append(str(Path(__file__).parent))

from api.exceptions import register_exception_handlers  # noqa: E402
from api.routers import image, system  # noqa: E402
from config import Settings, get_settings  # noqa: E402
from core.metrics import MetricsBuffer  # noqa: E402
from core.processor import NativeProcessor  # noqa: E402
from services.manipulator import Manipulator  # noqa: E402

# Get configuration
settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.system.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def init_app_state(app: FastAPI, app_settings: Settings) -> None:
    """Create the metrics buffer, processor and manipulator and store them in app state"""
    metrics = MetricsBuffer(max_size=app_settings.metrics.buffer_size)
    processor = NativeProcessor(
        metrics=metrics,
        grayscale_workers=app_settings.system.grayscale_workers,
        jpeg_quality=app_settings.image.jpeg_quality,
        png_compress_level=app_settings.image.png_compress_level,
    )

    app.state.metrics = metrics
    app.state.processor = processor
    app.state.manipulator = Manipulator(processor=processor, metrics=metrics)
    app.state.config = app_settings.to_dict()
    app.state.debug = app_settings.system.debug


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle"""
    # Startup
    logger.info("Starting Image Manipulation Service...")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Debug mode: {settings.system.debug}")

    init_app_state(app, settings)

    logger.info("Processor and manipulator initialized successfully")

    yield

    # Shutdown
    logger.info("Shutting down Image Manipulation Service...")
    app.state.metrics.clear()
    logger.info("Server shutdown complete")


# Create FastAPI app
app = FastAPI(
    title="Image Manipulation Service",
    description="Crop, resize, grayscale and watermark images with timing telemetry",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS
if settings.api.cors_enabled:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

# Register exception handlers
register_exception_handlers(app)

# Include routers
app.include_router(image.router, prefix="/api/image", tags=["Image"])
app.include_router(system.router, prefix="/api/system", tags=["System"])


# Root endpoint
@app.get("/")
async def root():
    return {
        "name": "Image Manipulation Service",
        "status": "running",
        "version": "1.0.0",
        "endpoints": {
            "image": "/api/image",
            "system": "/api/system",
            "docs": "/docs",
        },
    }


# Health check endpoint
@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "services": {
            "processor": getattr(app.state, "processor", None) is not None,
            "manipulator": getattr(app.state, "manipulator", None) is not None,
            "metrics": getattr(app.state, "metrics", None) is not None,
        },
    }


# Error handler
@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    logger.error(f"Global exception: {exc}", exc_info=True)
    return JSONResponse(status_code=500, content={"detail": f"Internal server error: {str(exc)}"})


if __name__ == "__main__":
    reload_excludes = (
        ["*.log", "*.pyc", "__pycache__", ".git", ".venv", "venv"]
        if settings.system.debug
        else None
    )

    server_config = uvicorn.Config(
        "main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.system.debug,
        reload_excludes=reload_excludes,
        log_level="info",
        loop="asyncio",
    )

    server = uvicorn.Server(server_config)

    try:
        server.run()
    except KeyboardInterrupt:
        logger.info("Received keyboard interrupt, shutting down...")
    finally:
        logger.info("Server exiting...")
