"""FastAPI application factory for Grantdesk."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.templating import Jinja2Templates

from grantdesk.common.config import get_settings
from grantdesk.common.schemas import HealthResponse


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.templates = Jinja2Templates(directory=str(settings.templates_path))

    @app.get("/health", response_model=HealthResponse)
    async def health():
        return HealthResponse(version=settings.api_version)

    # Mount routers
    from grantdesk.portal.router import router as portal_router

    app.include_router(portal_router, tags=["portal"])

    return app
