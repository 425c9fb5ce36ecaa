"""
FastAPI Main Application
"""
import logging
import time
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from hrd_api.config import settings
from hrd_api.database import init_db
from hrd_api.routers import auth, users, divisions, employees, announcements, statistics

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
logger = logging.getLogger(__name__)

# Initialize database
init_db()

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    debug=settings.debug
)

# CORS middleware (mobile client connects from arbitrary hosts)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every request with its status and duration"""
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(f"{request.method} {request.url.path} - {response.status_code} ({elapsed_ms:.1f} ms)")
    return response


def error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
        headers=headers
    )


def validation_message(exc: RequestValidationError) -> str:
    """Turn pydantic errors into a short human-readable message"""
    messages = []
    for error in exc.errors():
        loc = list(error.get("loc", ()))
        if loc and loc[0] in ("body", "query", "path", "header"):
            loc = loc[1:]
        field = ".".join(str(part) for part in loc)
        error_type = error.get("type")
        min_length = (error.get("ctx") or {}).get("min_length")

        if not field:
            messages.append("Request body is required" if error_type == "missing" else error.get("msg"))
        elif error_type == "missing" or (error_type == "string_too_short" and min_length == 1):
            messages.append(f"{field} is required")
        else:
            messages.append(f"{field}: {error.get('msg')}")
    return "; ".join(messages) or "Invalid request"


# Exception handlers
@app.exception_handler(StarletteHTTPException)
async def custom_http_exception_handler(request: Request, exc: StarletteHTTPException):
    """
    Render HTTP errors as {success: false, message}
    """
    return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Missing or malformed fields are a 400, not FastAPI's default 422
    """
    return error_response(400, validation_message(exc))


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    """
    Log driver errors and hide them behind a generic message
    """
    logger.exception(f"Database error on {request.method} {request.url.path}")
    return error_response(500, "Database error")


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """
    Anything else still answers with the JSON error envelope
    """
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(500, "Internal server error")


# API routers (with /api prefix)
app.include_router(auth.router, prefix="/api")
app.include_router(users.router, prefix="/api")
app.include_router(divisions.router, prefix="/api")
app.include_router(employees.router, prefix="/api")
app.include_router(announcements.router, prefix="/api")
app.include_router(statistics.router, prefix="/api")


@app.on_event("startup")
async def startup_event():
    """Startup event"""
    print(f"🚀 {settings.app_name} v{settings.app_version} started")

    # Initialize default data
    from hrd_api.database import SessionLocal
    from hrd_api.models.init_data import init_default_data
    from hrd_api.models.generate_dummy_data import generate_dummy_data

    db = SessionLocal()
    try:
        init_default_data(db)
        if settings.seed_dummy_data:
            generate_dummy_data(db)
    finally:
        db.close()


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "version": settings.app_version}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("hrd_api.main:app", host=settings.host, port=settings.port, reload=settings.debug)
