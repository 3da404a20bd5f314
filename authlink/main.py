"""
Main FastAPI application entry point.

`create_app()` builds the application from Settings. The container is
assembled in the lifespan and kept on `app.state`, so each app (including
each test app) owns its own store.

Run:
    uvicorn authlink.main:app --port 2402
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from authlink.core.config import Settings, get_settings
from authlink.core.container import Container, build_container
from authlink.presentation.errors import register_exception_handlers
from authlink.presentation.routers import users_router


def create_app(
    settings: Settings | None = None,
    *,
    container: Container | None = None,
) -> FastAPI:
    """Create the FastAPI application.

    Args:
        settings: Configuration (defaults to get_settings()).
        container: Prebuilt container (tests). Built from settings otherwise.

    Returns:
        Configured FastAPI app.
    """
    settings = settings or (container.settings if container else get_settings())

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Startup: build container (and tables in development). Shutdown: close pools."""
        app_container = container or build_container(settings)
        if app_container.database is not None and settings.is_development:
            await app_container.database.create_all()
        app.state.container = app_container

        yield

        await app_container.close()

    app = FastAPI(
        title=settings.app_name,
        description="Email verification and login tokens",
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Register global exception handlers (RFC 7807 error responses)
    register_exception_handlers(app)

    app.include_router(users_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Health check endpoint for monitoring and load balancers."""
        return {"status": "healthy"}

    return app


app = create_app()
