from fastapi import FastAPI

from car_showcase.entrypoints.http.exception_handlers import register_exception_handlers
from car_showcase.entrypoints.http.routes.cars import router as cars_router
from car_showcase.entrypoints.http.routes.health import router as health_router
from car_showcase.entrypoints.http.routes.makes import router as makes_router
from car_showcase.infra.config import default_page_size
from car_showcase.infra.logging_setup import configure_logging


def build_app() -> FastAPI:
    configure_logging()
    page_size = default_page_size()

    app = FastAPI(
        title="Car Showcase API",
        description="""
        Car showcase API for browsing, filtering and managing a small vehicle catalog.

        ## Features
        - Search the catalog with filters, sorting and pagination
        - Car details, including sold cars
        - Add, replace and mark cars as sold
        - Make/model facets for search filters
        - Display image resolution with fallbacks

        ## Error Handling
        All errors return structured JSON responses with error codes.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    app.state.page_size = page_size

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(cars_router, prefix="/v1")
    app.include_router(makes_router, prefix="/v1")

    return app


app = build_app()
