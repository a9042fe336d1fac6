"""Web server command."""

import rich_click as click

from ..config import load_config
from ..models import PlebtextConfig
from ._console import console


@click.command()
@click.option("--host", "-h", default=None, help="Host to bind to (default from config)")
@click.option("--port", "-p", type=int, default=None, help="Port to bind to (default from config)")
@click.option("--reload/--no-reload", default=False, help="Auto-reload on code changes")
def web(host: str | None, port: int | None, reload: bool):
    """Start the segmentation API server."""
    import uvicorn

    settings = PlebtextConfig.model_validate(load_config())
    host = host or settings.web.host
    port = port or settings.web.port

    console.print(f"Starting plebtext API at http://{host}:{port}")
    console.print("Press Ctrl+C to stop")

    try:
        uvicorn.run("plebtext.web:create_app", host=host, port=port, reload=reload, factory=True)
    except KeyboardInterrupt:
        pass
