from typing import Optional
from fastapi import FastAPI
from contextlib import asynccontextmanager
from dotenv import load_dotenv
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

# Load environment variables as early as possible
load_dotenv()

from .config import Settings, settings as default_settings
from .middleware import CORSHeadersMiddleware, ErrorHandlingMiddleware, LoggingMiddleware
from .exceptions import http_exception_handler
from .application.ports.audit_logger import AuditLogger
from .application.ports.clinic_repo import ClinicRepository
from .infrastructure.audit.std_logger import StdAuditLogger
from .infrastructure.persistence.memory.clinic_repository_memory import InMemoryClinicRepository
from .routers import appointments_router, doctors_router, patients_router

# Configure logging
logging.basicConfig(
    level=getattr(logging, default_settings.LOG_LEVEL.upper()),
    format=default_settings.LOG_FORMAT
)
logger = logging.getLogger(__name__)


def _log_banner(app: FastAPI, settings: Settings) -> None:
    base_url = settings.BASE_URL.rstrip("/")
    logger.info(f"Clinic Backend Server is running! ({settings.APP_NAME} {settings.APP_VERSION})")
    logger.info(f"Doctors API:       {base_url}/doctors")
    logger.info(f"Patients API:      {base_url}/patients")
    logger.info(f"Appointments API:  {base_url}/appointments")
    logger.info(f"Seeded {len(app.state.repository.list_doctors())} doctors")


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[ClinicRepository] = None,
    audit_logger: Optional[AuditLogger] = None,
) -> FastAPI:
    """Build the API with its own store; nothing is shared between apps."""
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        _log_banner(app, settings)
        yield
        # Shutdown
        logger.info("Shutting down Clinic Backend Server, in-memory data discarded")

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
        redirect_slashes=False,
        docs_url=("/docs" if settings.DOCS_ENABLED else None),
        redoc_url=("/redoc" if settings.DOCS_ENABLED else None),
        openapi_url=("/openapi.json" if settings.DOCS_ENABLED else None)
    )

    app.state.settings = settings
    app.state.repository = repository if repository is not None else InMemoryClinicRepository()
    app.state.audit_logger = audit_logger if audit_logger is not None else StdAuditLogger(enabled=settings.AUDIT_LOG_ENABLED)

    # Router 404/405 and the API's own errors share one JSON shape
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    # Added last runs first: CORS wraps everything, including 500s
    app.add_middleware(ErrorHandlingMiddleware, settings=settings)
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(CORSHeadersMiddleware, settings=settings)

    app.include_router(doctors_router.router)
    app.include_router(patients_router.router)
    app.include_router(appointments_router.router)

    return app


app = create_app()


def run() -> None:
    import uvicorn
    uvicorn.run(
        "clinic_api.main:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
        workers=1,  # the store lives in process memory
        log_level=default_settings.LOG_LEVEL.lower()
    )


# ------------------------
# Run with correct PORT in local/production
# ------------------------
if __name__ == "__main__":
    run()
