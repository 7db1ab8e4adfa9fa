"""FastAPI application entrypoint and HTTP controllers.

This module defines the HTTP endpoints of the student directory.
Controllers are intentionally thin: they read the request, delegate to
`StudentService`, and return JSON responses. Errors raised by the service
are rendered by the exception handlers registered in `create_app`.

Endpoints implemented:
- GET /
- GET /api/students
- GET /api/students/{id}
- POST /api/students
- PUT /api/students/{id}
- DELETE /api/students/{id}

Any other method/path combination answers 404 `Route not found.`
"""

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.responses import JSONResponse, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
import json
import logging
import time
import uuid
from pathlib import Path
from typing import List

from .config import Settings, settings
from .errors import StudentDirectoryError, UnmatchedRoute
from .models import Student
from .repositories import SAMPLE_STUDENTS, StudentRepository
from .schemas import MessageOut
from .services import StudentService
from .utils.body import read_json_body

logger = logging.getLogger("student_directory.api")

static_dir = Path(__file__).resolve().parent.parent / "static"

router = APIRouter()

_NOT_FOUND = {404: {"model": MessageOut}}
_BAD_REQUEST = {400: {"model": MessageOut}, 413: {"model": MessageOut}}


def get_service(request: Request) -> StudentService:
    """Dependency returning a service bound to this app's collection."""
    return StudentService(request.app.state.students)


def _max_body_bytes(request: Request) -> int:
    return request.app.state.settings.MAX_BODY_BYTES


@router.get("/", response_model=MessageOut)
def home():
    """Welcome message, handy as a liveness probe from the browser."""
    return {"message": "Welcome to the Student Directory API!"}


@router.get("/api/students", response_model=List[Student])
async def list_students(svc: StudentService = Depends(get_service)):
    """Return every student in insertion order."""
    return svc.list_students()


@router.get("/api/students/{student_id:int}", response_model=Student, responses=_NOT_FOUND)
async def get_student(student_id: int, svc: StudentService = Depends(get_service)):
    return svc.get_student(student_id)


@router.post("/api/students", response_model=Student, status_code=201, responses=_BAD_REQUEST)
async def create_student(request: Request, svc: StudentService = Depends(get_service)):
    """Create a student from a `{name, age, major}` JSON body.

    The server assigns the id. Malformed JSON, an oversized body or a
    missing field all fail before anything is stored.
    """
    payload = await read_json_body(request, _max_body_bytes(request))
    return svc.create_student(payload)


@router.put(
    "/api/students/{student_id:int}",
    response_model=Student,
    responses={**_NOT_FOUND, **_BAD_REQUEST},
)
async def update_student(student_id: int, request: Request, svc: StudentService = Depends(get_service)):
    """Replace all fields of a student except its id.

    An unknown id answers 404 before the body is read.
    """
    svc.ensure_exists(student_id)
    payload = await read_json_body(request, _max_body_bytes(request))
    return svc.update_student(student_id, payload)


@router.delete("/api/students/{student_id:int}", status_code=204, responses=_NOT_FOUND)
async def delete_student(student_id: int, svc: StudentService = Depends(get_service)):
    svc.delete_student(student_id)
    return Response(status_code=204)


def _log_request(level: int, event: str, request: Request, started: float, status_code: int = None):
    record = {
        "request_id": request.state.request_id,
        "path": request.url.path,
        "method": request.method,
        "duration_ms": round((time.perf_counter() - started) * 1000.0, 2),
        "client": request.client.host if request.client else "unknown",
    }
    if status_code is not None:
        record["status_code"] = status_code
    logger.log(level, "%s %s", event, json.dumps(record, ensure_ascii=True), exc_info=level >= logging.ERROR)


def _register_middleware(app: FastAPI) -> None:
    @app.middleware("http")
    async def request_context_middleware(request: Request, call_next):
        req_id = request.headers.get("X-Request-ID", uuid.uuid4().hex)
        request.state.request_id = req_id
        started = time.perf_counter()
        traced = request.url.path.startswith("/api/")
        response: Response
        try:
            response = await call_next(request)
        except Exception:
            if traced:
                _log_request(logging.ERROR, "request_failed", request, started)
            raise
        response.headers["X-Request-ID"] = req_id
        if traced:
            _log_request(logging.INFO, "request_done", request, started, response.status_code)
        return response


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(StudentDirectoryError)
    async def student_directory_error_handler(request: Request, exc: StudentDirectoryError):
        logger.warning(
            "%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc.message,
        )
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        # router misses: unknown path (404) or known path with another method (405)
        if exc.status_code in (404, 405):
            err = UnmatchedRoute()
            return JSONResponse(status_code=err.http_status, content=err.to_response())
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"message": "Internal server error."})


def create_app(app_settings: Settings = None) -> FastAPI:
    """Build an application with its own, freshly seeded student collection."""
    cfg = app_settings or settings
    if not logging.getLogger().handlers:
        logging.basicConfig(level=cfg.LOG_LEVEL)

    # exact paths only: no trailing-slash redirects
    app = FastAPI(title="Student Directory API", redirect_slashes=False)
    app.state.settings = cfg
    app.state.students = StudentRepository(SAMPLE_STUDENTS if cfg.SEED_SAMPLE_DATA else ())

    # Wide-open CORS keeps a front-end served from another local port working without extra config.
    if cfg.ALLOW_DEV_CORS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_methods=["*"],
            allow_headers=["*"],
        )

    _register_middleware(app)
    _register_error_handlers(app)
    app.include_router(router)

    # Browser front-end; open /static/index.html while the API is running.
    if static_dir.exists():
        app.mount("/static", StaticFiles(directory=static_dir, html=True), name="static")

    return app


app = create_app()
