"""
Main FastAPI application entry point.
"""

from contextlib import asynccontextmanager
from typing import Dict

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import httpx
import logfire

from config import settings
from observability.logfire_config import LogfireConfig
from services.email_generator import EmailGeneratorService
from services.gemini_client import GeminiClient
from api.routes import email_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Creates the shared HTTP client and email generator, closes the client on shutdown.
    """
    # Initialize Logfire first so we can use structured logging
    LogfireConfig.initialize(token=settings.logfire_token, environment=settings.environment)

    logfire.info(
        "Starting Email Writer API Server",
        environment=settings.environment,
        debug=settings.debug,
        gemini_timeout=settings.gemini_timeout,
        strict_response_parsing=settings.strict_response_parsing,
    )

    async with httpx.AsyncClient(timeout=settings.gemini_timeout) as http_client:
        client = GeminiClient(
            api_url=settings.gemini_api_url,
            api_key=settings.gemini_api_key,
            http_client=http_client,
            timeout=settings.gemini_timeout,
        )
        app.state.email_generator = EmailGeneratorService(
            client=client,
            strict_parsing=settings.strict_response_parsing,
        )

        logfire.info("Email Writer API Server startup complete")

        yield

        # Shutdown
        logfire.info("Shutting down Email Writer API Server")
        del app.state.email_generator


# Initialize FastAPI app
app = FastAPI(
    title="Email Writer API",
    description="Backend API for Email Writer - AI email reply generation",
    version="1.0.0",
    lifespan=lifespan,
    debug=settings.debug,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# Health Check Endpoints
# ============================================================================

@app.get("/health", tags=["Health"])
async def health_check() -> Dict[str, str]:
    """
    Health check endpoint for load balancers and monitoring.

    Returns:
        dict: Health status of the application
    """
    return {
        "status": "healthy",
        "service": "email-writer-api",
        "version": "1.0.0",
        "environment": settings.environment,
    }


@app.get("/", tags=["Root"])
async def root() -> Dict[str, str]:
    """
    Root endpoint - API information.

    Returns:
        dict: Basic API information
    """
    return {
        "name": "Email Writer API",
        "version": "1.0.0",
        "description": "Backend API for email reply generation",
        "docs": "/docs",
        "health": "/health",
    }


# ============================================================================
# API Routers
# ============================================================================

# Email reply generation endpoint (no authentication)
app.include_router(email_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level=settings.log_level.lower(),
    )
