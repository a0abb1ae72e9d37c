# Main FastAPI application file
# File: api/main.py

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging
from api.utils.auth import auth_dependency
from api.utils.config import Config
from api.endpoints.routing import router as routing_router
from cable_router import __version__
from cable_router.utils.logging_config import CableRouterLogger
from typing import Dict

# Set up logging
logger = logging.getLogger("cable_router.api")
logger.setLevel(logging.DEBUG if Config.DEBUG else logging.INFO)

# Define lifespan context manager (replaces on_event)
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup code (runs before application starts)
    log_file = CableRouterLogger.configure(
        debug_mode=Config.DEBUG,
        log_dir=Config.LOG_DIR,
        console_only=Config.LOG_DIR is None,
    )
    if log_file:
        logger.info(f"Logging to {log_file}")
    Config.validate()
    logger.info("Run on application startup.")

    yield  # This is where the application runs

    # Shutdown code (runs when application is shutting down)
    logger.info("Application shutting down.")

# Create FastAPI application with lifespan
app = FastAPI(
    title="Mining Cable Router API",
    description="""
    # Mining Cable Router API

    Cable routing engine for containerised mining farm layouts.

    ## Features

    - Equipment connection points (snap points) in world space
    - Passage, equipment and forbidden zone generation
    - Cruising height arbitration for tray runs
    - Path synthesis with collision checks and tray recommendation

    ## Authentication

    All `/routing` endpoints require an API key to be provided in the `X-API-Key` header.

    ## Units

    Equipment dimensions are given in millimetres. Positions, heights and
    lengths are in metres with Y up.
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_tags=[
        {
            "name": "Routing",
            "description": "Snap points, zones, heights, paths and tray recommendations"
        },
        {
            "name": "Status",
            "description": "API status and health check endpoints"
        }
    ],
    lifespan=lifespan,
)

# Root endpoint
@app.get("/", tags=["Status"])
async def root():
    logger.info("Root endpoint called")
    return {"status": "online", "message": "Mining Cable Router API is running"}

# Health check endpoint (general API health)
@app.get("/health", tags=["Status"], response_model=Dict[str, str])
async def health_check():
    """Check if the API service is healthy."""
    logger.info("Health check requested")
    return {"status": "healthy", "message": "Mining Cable Router API is running", "version": __version__}

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Restrict this in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers with dependencies
app.include_router(
    routing_router,
    prefix="/routing",
    tags=["Routing"],
    dependencies=[auth_dependency()]
)
logger.info("Included routing router with prefix /routing")

# Run with: uvicorn api.main:app --reload
