from fastapi import FastAPI

from hospital_directory.entrypoints.http.exception_handlers import register_exception_handlers
from hospital_directory.entrypoints.http.routes.health import router as health_router
from hospital_directory.entrypoints.http.routes.hospitals import router as hospitals_router
from hospital_directory.entrypoints.http.routes.medical_tests import router as medical_tests_router
from hospital_directory.entrypoints.http.routes.offerings import router as offerings_router
from hospital_directory.infra.logging_config import configure_logging

API_PREFIX = "/api"


def build_app() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="Hospital Directory API",
        description="""
        Directory of hospitals and the diagnostic tests they offer.

        ## Features
        - Search hospitals by location, department, keyword or proximity
        - Browse and search the medical test catalog
        - Compare hospital prices for a test, with discounts and home collection

        ## Authentication
        None.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        Invalid input is 400, unknown ids 404, conflicts 409.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(hospitals_router, prefix=API_PREFIX)
    app.include_router(medical_tests_router, prefix=API_PREFIX)
    app.include_router(offerings_router, prefix=API_PREFIX)

    return app


app = build_app()
