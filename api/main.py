"""
Space Telemetry - FastAPI Application

This is the main entry point for the FastAPI backend.

Startup:
1. Connect to the store (the process exits if it is unreachable)
2. Create the readings table if missing (failures are only logged)
3. Listen on 0.0.0.0:3000

Access Points:
- Health: http://localhost:3000/health
- Data: http://localhost:3000/api/data
- Swagger Docs: http://localhost:3000/docs
"""

import os
import logging
from datetime import datetime, timezone
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, status
from fastapi.responses import JSONResponse, PlainTextResponse

from api.database import StoreGateway, StoreUnavailableError, get_database_url
from api.routes import data_router
from engine.generator import TelemetryGenerator

# =========================================
# Logging Configuration
# =========================================

logging.basicConfig(
    level=getattr(logging, os.getenv("LOG_LEVEL", "INFO")),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

HOST = "0.0.0.0"
PORT = 3000


def create_app(
    store: Optional[StoreGateway] = None,
    database_url: Optional[str] = None
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        store: Gateway to use as-is (connects on startup if None)
        database_url: URL to connect to when no store is given

    Returns:
        Configured application
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        logger.info("🚀 Starting Space Telemetry API...")

        owns_store = store is None
        if owns_store:
            url = database_url or get_database_url()
            logger.info(f"🔌 Connecting to store: {url.split('@')[-1]}")
            try:
                app.state.store = StoreGateway.connect(url)
            except StoreUnavailableError as e:
                logger.critical(f"❌ Failed to connect to store: {e}")
                raise
            logger.info("✅ Store connected")
        else:
            app.state.store = store

        app.state.store.ensure_schema()
        app.state.generator = TelemetryGenerator()

        logger.info(f"🚀 Listening on {HOST}:{PORT}")

        yield  # Application runs here

        # Shutdown
        logger.info("👋 Shutting down Space Telemetry API...")
        if owns_store:
            app.state.store.close()

    app = FastAPI(
        title="Space Telemetry API",
        description="""
## Synthetic ISS Telemetry

Generates a fake ISS reading on every poll, stores it, and serves the
latest readings. When the store cannot be read, a single `offline_stub`
reading is returned so clients always get data.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )

    @app.exception_handler(Exception)
    async def general_exception_handler(request, exc):
        """Handle unexpected exceptions."""
        logger.exception(f"Unhandled exception: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": True,
                "message": "An unexpected error occurred",
                "detail": str(exc) if os.getenv("DEBUG", "false").lower() == "true" else None,
                "timestamp": datetime.now(timezone.utc).isoformat()
            }
        )

    app.include_router(data_router)

    @app.get(
        "/health",
        response_class=PlainTextResponse,
        tags=["System"],
        summary="Liveness Check",
        description="Report that the process is alive. Does not check the store."
    )
    async def health_check():
        return "OK"

    return app


app = create_app()


# =========================================
# Run with Uvicorn
# =========================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api.main:app",
        host=HOST,
        port=PORT,
        log_level=os.getenv("LOG_LEVEL", "info").lower()
    )
