"""FastAPI application entry point."""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from kanban.api import auth, boards, columns, tasks
from kanban.config import get_settings
from kanban.errors import KanbanError
from kanban.models.mixins import now_ms

logger = logging.getLogger(__name__)
settings = get_settings()


def configure_logging(level: str) -> None:
    """Install a root handler at the configured level."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    configure_logging(settings.log_level)
    logger.info(f"Kanban API starting ({settings.environment})")
    yield
    logger.info("Kanban API shutting down")


app = FastAPI(
    title="Kanban Board API",
    description="Multi-user Kanban boards with columns and tasks",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log method, path, status and duration of every request."""
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(
        f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)"
    )
    return response


def error_response(status_code: int, message: str) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def validation_error_message(errors: list[dict]) -> str:
    """Collapse pydantic errors into one client-facing sentence."""
    missing = []
    for err in errors:
        field = ".".join(str(part) for part in err["loc"] if part != "body") or "body"
        too_short = err["type"] == "string_too_short" and err.get("ctx", {}).get("min_length") == 1
        if err["type"] == "missing" or too_short:
            missing.append(field)
    if missing:
        return f"Missing required fields: {', '.join(missing)}"

    err = errors[0]
    field = ".".join(str(part) for part in err["loc"] if part != "body")
    if err["type"] == "extra_forbidden":
        return f"Unknown field: {field}"
    if err["type"] == "value_error":
        return str(err["ctx"]["error"])
    return f"{field}: {err['msg']}" if field else err["msg"]


@app.exception_handler(KanbanError)
async def kanban_error_handler(request: Request, exc: KanbanError):
    return error_response(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return error_response(status.HTTP_400_BAD_REQUEST, validation_error_message(exc.errors()))


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        return error_response(exc.status_code, "Route not found")
    return error_response(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


# Register routers
app.include_router(auth.router)
app.include_router(boards.router)
app.include_router(columns.router)
app.include_router(tasks.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "ok", "timestamp": now_ms()}
