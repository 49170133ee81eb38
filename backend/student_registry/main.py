# student_registry/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from .config import settings
from .database.session import init_db
from .exceptions import (
    StudentRegistryException,
    ValidationFailedError,
    student_registry_exception_handler,
    integrity_error_handler,
)
from .routers import health, schools, students
from .services.validation.student_validation import collect_field_errors

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info(f"Starting {settings.APP_NAME} {settings.APP_VERSION}")
    init_db()

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.APP_NAME}")


app = FastAPI(
    title=settings.APP_NAME,
    description="CRUD API for students and the schools they attend",
    version=settings.APP_VERSION,
    lifespan=lifespan
)

# CORS middleware for frontend communication
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(StudentRegistryException)
async def handle_student_registry_exception(request: Request, exc: StudentRegistryException):
    return await student_registry_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    """Body validation failures come back as one 400 listing every bad field."""
    errors = collect_field_errors(exc.errors())
    return await student_registry_exception_handler(request, ValidationFailedError(errors))


@app.exception_handler(IntegrityError)
async def handle_integrity_error(request: Request, exc: IntegrityError):
    logger.warning(f"Persistence conflict on {request.method} {request.url.path}: {exc.orig}")
    return await integrity_error_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

app.include_router(health.router)
app.include_router(students.router)
app.include_router(schools.router)

#   cd backend
#   python -m uvicorn student_registry.main:app --reload
#   API docs (interactive): http://127.0.0.1:8000/docs
