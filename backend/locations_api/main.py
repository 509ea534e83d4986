"""
User Locations API - Main FastAPI Application

Stores user accounts, each with a list of saved locations and a
metric/imperial unit preference:
- Registration with credential validation
- Location list retrieval and targeted add/remove
- Unit preference toggle
- JWT login and a bearer-token guarded endpoint
- Structured Logging
- Prometheus Metrics
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import settings
from .api import api_router
from .errors import ApiError, AuthenticationError, InternalError, NotFoundError, ValidationError
from .utils.database import check_db, dispose_db, init_db
from .utils.logging import setup_logging, get_logger, configure_uvicorn_logging
from .utils.metrics import setup_metrics

# Setup structured logging
setup_logging(log_level=settings.LOG_LEVEL)
configure_uvicorn_logging(settings.ENVIRONMENT)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""

    # Startup
    logger.info("Starting User Locations API", version=settings.VERSION)
    await init_db()

    yield

    # Shutdown
    logger.info("Shutting down User Locations API")
    await dispose_db()


# Create FastAPI application
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="User accounts with saved locations and a metric/imperial preference.",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "users", "description": "Registration, locations and unit preference"},
        {"name": "auth", "description": "Login and token refresh"},
        {"name": "protected", "description": "Endpoints requiring a bearer token"},
    ]
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.CLIENT_ORIGIN],
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    allow_headers=["Content-Type", "Authorization"],
)

# Setup Prometheus metrics
setup_metrics(app)

# Include routers
app.include_router(api_router, prefix=settings.API_PREFIX)


# Error handlers

@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
    """Render service errors in the shape clients rely on"""

    if isinstance(exc, NotFoundError):
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    headers = None
    if isinstance(exc, AuthenticationError):
        headers = {"WWW-Authenticate": "Bearer"}

    return JSONResponse(status_code=exc.code, content=exc.to_dict(), headers=headers)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report malformed request bodies as a single field-level ValidationError"""

    errors = exc.errors()
    first = errors[0] if errors else {}
    location = next(
        (str(part) for part in reversed(first.get("loc", ())) if isinstance(part, str)),
        "body"
    )
    message = "Missing field" if first.get("type") == "missing" else first.get("msg", "Invalid value")

    error = ValidationError(message, location=location)
    return JSONResponse(status_code=error.code, content=error.to_dict())


@app.exception_handler(StarletteHTTPException)
async def not_found_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return JSONResponse(status_code=exc.status_code, content={"message": "Not Found"})
    return await http_exception_handler(request, exc)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    """Never leak internal detail to the client"""

    logger.exception("Unhandled error", method=request.method, path=request.url.path)
    error = InternalError()
    return JSONResponse(status_code=error.code, content=error.to_dict())


# Middleware for logging requests
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all HTTP requests"""

    if settings.is_test:
        return await call_next(request)

    logger.info(
        "Request received",
        method=request.method,
        url=str(request.url),
        client=request.client.host if request.client else None
    )

    response = await call_next(request)

    logger.info(
        "Request completed",
        method=request.method,
        url=str(request.url),
        status_code=response.status_code
    )

    return response


@app.get("/", tags=["root"], response_class=PlainTextResponse)
async def root():
    """Root endpoint"""
    return "server is running"


@app.get("/health", tags=["root"])
async def health_check():
    """Health check endpoint"""

    db_healthy = True
    try:
        await check_db()
    except Exception as e:
        logger.error("Database health check failed", error=str(e))
        db_healthy = False

    return {
        "status": "healthy" if db_healthy else "degraded",
        "database": "connected" if db_healthy else "disconnected",
        "version": settings.VERSION
    }
