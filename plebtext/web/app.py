"""FastAPI application for plebtext."""

from fastapi import FastAPI

from .. import __version__
from ..config import load_config, load_emoji_table
from ..models import PlebtextConfig
from .routes import content


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Plebtext",
        description="Note content segmentation API",
        version=__version__,
    )

    raw_config = load_config()
    app.state.settings = PlebtextConfig.model_validate(raw_config)
    app.state.emoji_names = load_emoji_table(raw_config)

    app.include_router(content.router, prefix="/api")

    @app.get("/health")
    async def health():
        return {"status": "ok", "version": __version__}

    return app
