"""
FastAPI application entry point for the job application tracker.

This is the main app that:
- Initializes FastAPI with CORS
- Registers all API routers
- Provides health check endpoint
- Sets up database connection lifecycle
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jobtracker.config import settings
from jobtracker import database
# Import API routers
from jobtracker.api import auth, applications, analytics, bullets

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.

    On startup: Create tables when running against SQLite (dev)
    On shutdown: Close database connections gracefully
    """
    # Startup
    logger.info("Starting Job Tracker API...")
    logger.info(f"Database: {settings.database_url.split('@')[1] if '@' in settings.database_url else settings.database_url}")
    logger.info(f"Debug mode: {settings.debug}")
    if not settings.access_token:
        logger.warning("ACCESS_TOKEN not set, session check disabled (dev mode)")

    if settings.database_url.startswith("sqlite"):
        async with database.engine.begin() as conn:
            await conn.run_sync(database.Base.metadata.create_all)

    yield

    # Shutdown
    logger.info("Shutting down Job Tracker API...")
    await database.engine.dispose()


# Initialize FastAPI app
app = FastAPI(
    title="Job Tracker API",
    description="API for tracking job applications and their outcomes",
    version="1.0.0",
    debug=settings.debug,
    lifespan=lifespan,
)

# Configure CORS
# Set ALLOWED_ORIGINS environment variable with comma-separated domains
allowed_origins = [
    "http://localhost:3000",  # Local development
]

if settings.allowed_origins:
    allowed_origins.extend(settings.allowed_origins.split(','))

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Health check endpoint
@app.get("/health")
async def health_check():
    """Simple health check endpoint."""
    return {
        "status": "healthy",
        "service": "Job Tracker API",
        "version": "1.0.0",
    }


# Root endpoint
@app.get("/")
async def root():
    """API root with basic info."""
    return {
        "message": "Job Tracker API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/health",
    }


# Register API routers
app.include_router(auth.router, prefix="/api/auth", tags=["auth"])
app.include_router(applications.router, prefix="/api/applications", tags=["applications"])
app.include_router(analytics.router, prefix="/api/analytics", tags=["analytics"])
app.include_router(bullets.router, prefix="/api", tags=["bullets"])
