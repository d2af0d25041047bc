"""
Community Association Backend - FastAPI Application

Member accounts, event registration, a photo/video gallery, a contact/FAQ
board and an admin console, persisted as JSON collection files.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import get_settings
from app.core.errors import AppError
from app.database.connections import close_store, get_store
from app.database.registry import seed_collections
from app.routers import auth, contact, events, faqs, gallery, health, stats, users

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s | %(levelname)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("community_backend")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Refuse to run in production with the placeholder JWT secret
    - Seed any collection document that does not exist yet

    Shutdown:
    - Release the record store
    """
    logger.info("Starting up Community Association Backend...")

    if settings.uses_default_secret:
        if settings.environment == "production":
            raise RuntimeError("JWT_SECRET_KEY must be set in production")
        logger.warning("Using the development JWT secret; set JWT_SECRET_KEY before deploying")

    store = await get_store()
    await seed_collections(store, settings)
    logger.info("Collections ready")

    yield

    logger.info("Shutting down Community Association Backend...")
    await close_store()


# Create FastAPI application
app = FastAPI(
    title="Community Association API",
    description="""
## Community Association Website Backend

### Features
- **Accounts**: signup/signin with bcrypt passwords and 7-day JWTs
- **Events**: public listings, admin management, member registration
- **Gallery**: admin-uploaded photos and videos
- **Contact & FAQ**: public messages, likes and a top-20 FAQ board
- **Admin console**: members, admin access and dashboard stats

### Authentication
Protected endpoints require a bearer token:
```
Authorization: Bearer <token>
```

Obtain a token via `POST /api/auth/signin`.

### Errors
Every error response has the shape `{"error": "<message>"}`.
    """,
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ==================== Error handlers ====================

@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    missing = [
        str(error["loc"][-1])
        for error in exc.errors()
        if error.get("type") == "missing" and error.get("loc")
    ]
    if missing:
        message = f"Missing required fields: {', '.join(missing)}"
    else:
        fields = [str(error["loc"][-1]) for error in exc.errors() if error.get("loc")]
        message = f"Invalid value for: {', '.join(fields)}" if fields else "Invalid request data"
    return JSONResponse({"error": message}, status_code=status.HTTP_400_BAD_REQUEST)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    detail = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return JSONResponse({"error": detail}, status_code=exc.status_code, headers=exc.headers)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Fail closed: log the traceback, return nothing internal."""
    logger.exception(f"Unhandled error while processing {request.method} {request.url.path}")
    return JSONResponse({"error": "Server error"}, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


# Include routers
app.include_router(health.router)
app.include_router(auth.router)
app.include_router(events.router)
app.include_router(gallery.router)
app.include_router(contact.router)
app.include_router(faqs.router)
app.include_router(users.router)
app.include_router(stats.router)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Community Association API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
    }
