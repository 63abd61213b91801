"""
Portfolio API - Main Application

FastAPI backend with:
- MongoDB for page content, projects, submissions and admins
- JWT authentication for the admin dashboard
- Image and CV uploads served from /images and /cv

Run: uvicorn app.main:app --reload  (or: python -m app.main)
"""

import logging
import os
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from pymongo.errors import PyMongoError
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from app import __version__
from app.api.routes import api_router
from app.core.config import get_settings
from app.core.logging_config import setup_logging
from app.core.middleware import RequestIdMiddleware, RequestLoggingMiddleware, SecurityHeadersMiddleware
from app.core.rate_limit import ApiRateLimitMiddleware, limiter, rate_limit_handler
from app.db.mongodb import close_mongo_client, init_mongo_indexes, test_mongo_connection

settings = get_settings()
setup_logging()
logger = logging.getLogger(__name__)

START_TIME = time.monotonic()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create MongoDB indexes on startup, close the client on shutdown."""
    logger.info("Starting Portfolio API (%s)", settings.environment)
    try:
        init_mongo_indexes()
    except PyMongoError as e:
        logger.warning("MongoDB index initialization failed: %s", e)
    yield
    close_mongo_client()


# Create FastAPI app
app = FastAPI(
    title="Portfolio API",
    description="""
    Backend for a personal portfolio website.

    ## Features
    - **Content**: hero, about, services and education sections
    - **Projects**: portfolio entries with uploaded images
    - **Contact / Feedback**: visitor submissions, read by the admin
    - **CV**: upload and public download
    - **Admin**: JWT login for the dashboard
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_handler)


# ============================================================
# EXCEPTION HANDLERS
# Every error body is {success: false, message} (or errors[] for validation)
# ============================================================

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.detail, "detail": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ()) if part != "body"),
            "message": err.get("msg", "Invalid value"),
        }
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content=jsonable_encoder({"success": False, "message": "Validation failed", "errors": errors}),
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s: %s", request.method, request.url.path, exc, exc_info=True)
    message = "Internal Server Error" if settings.is_production else str(exc) or "Internal Server Error"
    return JSONResponse(status_code=500, content={"success": False, "message": message})


# ============================================================
# MIDDLEWARE (last added runs first)
# ============================================================

app.add_middleware(ApiRateLimitMiddleware)
app.add_middleware(GZipMiddleware, minimum_size=1000)

if settings.is_development:
    cors_options = {"allow_origin_regex": ".*"}
else:
    cors_options = {"allow_origins": settings.allowed_origins}

app.add_middleware(
    CORSMiddleware,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
    expose_headers=["X-Request-ID"],
    **cors_options,
)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(RequestIdMiddleware)

# Include API routes
app.include_router(api_router, prefix="/api")

# Serve uploaded files
os.makedirs(settings.images_dir, exist_ok=True)
os.makedirs(settings.cv_dir, exist_ok=True)
app.mount("/images", StaticFiles(directory=settings.images_dir), name="images")
app.mount("/cv", StaticFiles(directory=settings.cv_dir), name="cv")


@app.get("/", tags=["Health"])
async def root():
    """API information."""
    return {
        "success": True,
        "message": "Portfolio API is running",
        "version": __version__,
        "endpoints": {
            "hero": "/api/hero",
            "about": "/api/about",
            "services": "/api/services",
            "education": "/api/education",
            "projects": "/api/projects",
            "contact": "/api/contact",
            "feedback": "/api/feedback",
            "cv": "/api/cv",
            "admin": "/api/admin",
            "health": "/api/health",
        },
    }


@app.get("/api/health", tags=["Health"])
async def health_check():
    """Ping MongoDB; 503 when it is unreachable."""
    connected = test_mongo_connection()
    body = {
        "success": connected,
        "status": "healthy" if connected else "unhealthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime": round(time.monotonic() - START_TIME, 2),
        "environment": settings.environment,
        "database": {
            "status": "connected" if connected else "disconnected",
            "connected": connected,
        },
    }
    return JSONResponse(status_code=200 if connected else 503, content=body)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.port, reload=settings.is_development)
