from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from school_api.api.router import api_router
from school_api.config import settings
from school_api.database import Database, open_database
from school_api.exceptions import SchoolApiException, extract_sql_error_message
from school_api.utils.logger import configure_logger

logger = structlog.get_logger()


# The React frontend dev server is the only allowed origin
CORS_ORIGINS = ["http://localhost:5173"]
CORS_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD"]
CORS_HEADERS = ["Origin", "Content-Length", "Content-Type"]
CORS_MAX_AGE = 12 * 60 * 60


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI application."""
    logger.info("Starting up FastAPI application", environment=settings.ENVIRONMENT)

    database: Optional[Database] = getattr(app.state, "database", None)
    if database is None:
        database = await open_database(
            settings.DATABASE_URI, echo=settings.DB_ECHO_QUERIES
        )
        app.state.database = database

    try:
        await database.auto_migrate()
        yield
    finally:
        logger.info("Shutting down FastAPI application")
        await database.dispose()


def error_response(
    status_code: int, code: str, message: str, details: Optional[Dict[str, Any]] = None
) -> JSONResponse:
    content: Dict[str, Any] = {"error": {"code": code, "message": message}}
    if details and settings.ENVIRONMENT != "production":
        content["error"]["details"] = details
    return JSONResponse(status_code=status_code, content=content)


async def school_api_exception_handler(
    request: Request, exc: SchoolApiException
) -> JSONResponse:
    """Handle custom application exceptions."""
    log = logger.error if exc.status_code >= 500 else logger.info
    log(
        "Application error",
        error_code=exc.error_code,
        message=exc.message,
        status_code=exc.status_code,
        details=exc.details,
        path=request.url.path,
        method=request.method,
    )

    return error_response(exc.status_code, exc.error_code, exc.message, exc.details)


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle malformed bodies and path parameters."""
    logger.info(
        "Validation error",
        errors=exc.errors(),
        path=request.url.path,
        method=request.method,
    )

    # Format validation errors in a user-friendly way
    formatted_errors = []
    for error in exc.errors():
        field_path = " -> ".join(str(loc) for loc in error["loc"])
        formatted_errors.append(
            {
                "field": field_path,
                "message": error["msg"],
                "type": error["type"],
            }
        )

    return JSONResponse(
        status_code=422,
        content={
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Input validation failed",
                "details": {"validation_errors": formatted_errors},
            }
        },
    )


async def integrity_error_handler(
    request: Request, exc: IntegrityError
) -> JSONResponse:
    """Handle database integrity errors (unique constraints, not null, etc.)."""
    error_msg = str(exc.orig) if exc.orig else str(exc)
    logger.error(
        "Database integrity error",
        error=error_msg,
        path=request.url.path,
        method=request.method,
    )

    lowered = error_msg.lower()
    if "unique" in lowered or "duplicate" in lowered:
        message = "A record with this information already exists"
    elif "not null" in lowered:
        message = "Required field is missing"
    else:
        message = "Data integrity error"

    return error_response(400, "INTEGRITY_ERROR", message)


async def sqlalchemy_exception_handler(
    request: Request, exc: SQLAlchemyError
) -> JSONResponse:
    """Handle other SQLAlchemy database errors."""
    user_message, technical_details = extract_sql_error_message(exc)

    logger.exception(
        "Database error",
        error_type=type(exc).__name__,
        path=request.url.path,
        method=request.method,
        technical_details=technical_details,
    )

    return error_response(500, "DATABASE_ERROR", user_message)


async def not_found_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Unmatched routes, and known paths hit with an unsupported verb, are not found."""
    if exc.status_code in (404, 405):
        return JSONResponse(status_code=404, content={"message": "Not found"})

    logger.info(
        "HTTP error",
        status_code=exc.status_code,
        detail=exc.detail,
        path=request.url.path,
        method=request.method,
    )
    return error_response(exc.status_code, "HTTP_ERROR", str(exc.detail))


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Global exception handler for all unhandled exceptions."""
    logger.exception(
        "Unhandled exception",
        error=str(exc),
        error_type=type(exc).__name__,
        path=request.url.path,
        method=request.method,
    )

    return error_response(
        500, "INTERNAL_ERROR", "An unexpected error occurred. Please try again later."
    )


def create_app(database: Optional[Database] = None) -> FastAPI:
    """Build the application.

    Args:
        database: Already connected database to use instead of connecting
            from settings at startup

    Returns:
        FastAPI: The configured application
    """
    configure_logger(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="1.0.0",
        description="School administration API: items, students, subjects, users and teachers",
        lifespan=lifespan,
    )
    if database is not None:
        app.state.database = database

    # Exception handlers
    app.add_exception_handler(SchoolApiException, school_api_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_exception_handler)
    app.add_exception_handler(StarletteHTTPException, not_found_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    # Set CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
        max_age=CORS_MAX_AGE,
    )

    app.include_router(api_router)

    return app


app = create_app()
