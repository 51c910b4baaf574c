# main.py
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from jobly.config import build_sqlalchemy_db_url, is_sqlite_url, settings
from jobly.database import Base, engine
from jobly.db.executor import DatabaseConnectionError, DatabaseQueryError
from jobly.errors import JoblyError
import jobly.models  # noqa: F401  # register tables on Base.metadata
from jobly.api.routes.health import router as health_router
from jobly.routers import auth, companies, jobs, technologies, users


logger = logging.getLogger(__name__)


def _error_response(message, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": {"message": message, "status": status_code}})


def register_exception_handlers(application: FastAPI) -> None:
    @application.exception_handler(JoblyError)
    async def _handle_jobly_error(request: Request, exc: JoblyError) -> JSONResponse:
        return _error_response(exc.message, exc.status_code)

    @application.exception_handler(RequestValidationError)
    async def _handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        messages = [
            f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}" for err in exc.errors()
        ]
        return _error_response(messages, status.HTTP_400_BAD_REQUEST)

    @application.exception_handler(DatabaseConnectionError)
    @application.exception_handler(DatabaseQueryError)
    async def _handle_database_error(request: Request, exc: RuntimeError) -> JSONResponse:
        logger.error("request.db_error path=%s error=%s", request.url.path, exc)
        return _error_response("Internal Server Error", status.HTTP_500_INTERNAL_SERVER_ERROR)

    @application.exception_handler(Exception)
    async def _handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("request.unhandled_error path=%s error=%s", request.url.path, type(exc).__name__)
        return _error_response("Internal Server Error", status.HTTP_500_INTERNAL_SERVER_ERROR)


def create_app() -> FastAPI:
    application = FastAPI(
        title=settings.app_name,
        version=settings.version,
        debug=settings.debug,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(application)

    application.include_router(health_router)
    application.include_router(auth.router, prefix="/auth", tags=["auth"])
    application.include_router(companies.router, prefix="/companies", tags=["companies"])
    application.include_router(jobs.router, prefix="/jobs", tags=["jobs"])
    application.include_router(technologies.router, prefix="/technologies", tags=["technologies"])
    application.include_router(users.router, prefix="/users", tags=["users"])

    # Shared PostgreSQL schemas are created explicitly with scripts/create_tables.py.
    # For local/test sqlite usage, auto-create tables is still convenient.
    if is_sqlite_url(build_sqlalchemy_db_url(settings)):
        Base.metadata.create_all(bind=engine)
    return application


app = create_app()
