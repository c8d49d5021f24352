import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from jobboard import __version__
from jobboard.config import settings
from jobboard.core.errors import JobBoardError, StoreUnavailable, error_body, status_for
from jobboard.database import Database
from jobboard.logging_config import setup_logging
from jobboard.routers import jobs

setup_logging()
logger = logging.getLogger(__name__)


def check_environment(database: Database) -> None:
    env = (settings.app_env or "development").lower()
    if env in {"production", "prod"} and database.url.startswith("sqlite"):
        logger.warning("Running in %s with a SQLite database. Set DATABASE_URL for real deployments.", env)


def create_app(database: Database | None = None) -> FastAPI:
    database = database or Database(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting JobBoard API")
        check_environment(database)
        database.init()
        yield
        database.dispose()
        logger.info("JobBoard API stopped")

    app = FastAPI(
        title="JobBoard API",
        description="Create, list, edit and delete job postings.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.database = database

    cors_origins = [o.strip() for o in settings.cors_allow_origins.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(jobs.router)

    @app.exception_handler(JobBoardError)
    async def job_board_error_handler(request: Request, exc: JobBoardError):
        code = status_for(exc)
        if isinstance(exc, StoreUnavailable):
            logger.error("%s %s -> %d %s", request.method, request.url.path, code, exc.message)
        else:
            logger.info("%s %s -> %d %s", request.method, request.url.path, code, exc.message)
        return JSONResponse(status_code=code, content=error_body(exc))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = [{"field": "body", "message": err.get("msg", "Invalid request body")} for err in exc.errors()]
        return JSONResponse(
            status_code=400,
            content={"success": False, "message": "Validation error", "errors": errors},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled server error on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=500, content={"success": False, "message": "Internal server error"})

    @app.get("/health/live")
    def health_live():
        return {"status": "ok"}

    @app.get("/health/ready")
    def health_ready():
        try:
            database.ping()
            return {"status": "ready"}
        except Exception:
            logger.exception("Readiness check failed")
            return JSONResponse(status_code=503, content={"status": "not_ready"})

    @app.get("/")
    def root():
        return {"message": "JobBoard API. Job postings live under /api/jobs."}

    return app


app = create_app()
