"""
RessourcesMG API - FastAPI Application
======================================
REST API for the general-practice resource directory.

Features:
- Catalog listing and webmaster CRUD
- Accent-insensitive search with French synonyms and spelling suggestions
- Question-based resource suggestions
- Community proposals, announcements and anonymous analytics
- sitemap.xml
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..catalog import get_catalog_service
from ..config import get_config
from ..exceptions import (
    ConfigurationError,
    ConflictError,
    NotFoundError,
    RessourcesError,
    SuggestionServiceError,
    ValidationError,
)
from .middleware import RequestLoggingMiddleware
from .routers import analytics, announcements, auth, catalog, proposals, search, sitemap

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
    ConfigurationError: status.HTTP_503_SERVICE_UNAVAILABLE,
    SuggestionServiceError: status.HTTP_502_BAD_GATEWAY,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    config = get_config()
    logger.info(f"RessourcesMG API starting up ({config.app_env}, data in {config.data_dir})")

    if config.is_production and not config.webmaster_secret:
        logger.warning("WEBMASTER_SECRET is not set: webmaster login is disabled")
    if not config.webmaster_password:
        logger.warning("WEBMASTER_PASSWORD is not set: webmaster login is disabled")

    if get_catalog_service().is_empty():
        logger.info("Catalog is empty: seed it with scripts/seed_catalog.py or POST /api/v1/catalog/seed")

    yield

    logger.info("RessourcesMG API shutting down...")


# Create FastAPI app
app = FastAPI(
    title="RessourcesMG API",
    description="""
## Ressources pour la médecine générale - REST API

- **Catalog**: categories and resources, webmaster CRUD and ordering
- **Search**: synonym-aware search, did-you-mean, question suggestions
- **Proposals**: community submissions and moderation
- **Announcements**: site banners
- **Analytics**: clicks and searches

### Authentication
Webmaster endpoints require a token from `/api/v1/auth/login`, sent as
`Authorization: Bearer <token>`.
""",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

_config = get_config()

app.add_middleware(
    CORSMiddleware,
    allow_origins=_config.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type"],
)

if _config.request_logging:
    app.add_middleware(RequestLoggingMiddleware)


# ============================================
# Include Routers
# ============================================

app.include_router(
    auth.router,
    prefix="/api/v1/auth",
    tags=["Authentication"]
)

app.include_router(
    catalog.router,
    prefix="/api/v1/catalog",
    tags=["Catalog"]
)

app.include_router(
    search.router,
    prefix="/api/v1/search",
    tags=["Search"]
)

app.include_router(
    proposals.router,
    prefix="/api/v1/proposals",
    tags=["Proposals"]
)

app.include_router(
    announcements.router,
    prefix="/api/v1/announcements",
    tags=["Announcements"]
)

app.include_router(
    analytics.router,
    prefix="/api/v1/analytics",
    tags=["Analytics"]
)

app.include_router(
    sitemap.router,
    tags=["Root"]
)


# ============================================
# Root Endpoints
# ============================================

@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "service": "RessourcesMG API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
        "api_base": "/api/v1"
    }


@app.get("/health", tags=["Root"])
async def health():
    """Simple health check endpoint at root level."""
    return {"status": "healthy", "service": "ressources-mg-api"}


@app.get("/api/v1", tags=["Root"])
async def api_root():
    """API v1 root endpoint."""
    return {
        "version": __version__,
        "endpoints": {
            "auth": "/api/v1/auth",
            "catalog": "/api/v1/catalog",
            "search": "/api/v1/search",
            "proposals": "/api/v1/proposals",
            "announcements": "/api/v1/announcements",
            "analytics": "/api/v1/analytics",
            "sitemap": "/sitemap.xml"
        }
    }


# ============================================
# Exception Handlers
# ============================================

@app.exception_handler(RessourcesError)
async def domain_exception_handler(request: Request, exc: RessourcesError):
    """Map domain errors to HTTP errors with the same shape as HTTPException."""
    status_code = next(
        (code for cls, code in ERROR_STATUS.items() if isinstance(exc, cls)),
        status.HTTP_400_BAD_REQUEST,
    )
    return JSONResponse(
        status_code=status_code,
        content={"detail": {"code": exc.code, "message": exc.message}}
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled errors."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": {
                "code": "INTERNAL_ERROR",
                "message": str(exc)
            },
            "meta": {
                "timestamp": datetime.now().isoformat(),
                "path": str(request.url)
            }
        }
    )


def run():
    """Console entry point."""
    import uvicorn

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    config = get_config()
    uvicorn.run(
        "ressources_mg.api.main:app",
        host="0.0.0.0",
        port=config.api_port,
        reload=config.api_reload
    )


if __name__ == "__main__":
    run()
