"""CLI entry point for plebtext."""

import rich_click as click

from .. import __version__
from . import config_cmd as _config_mod
from . import parse_cmd as _parse_mod
from . import web as _web_mod
from ._console import configure_logging


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """Segment decentralized social notes into typed content."""
    configure_logging(verbose)


# Register commands
cli.add_command(_parse_mod.parse_command)
cli.add_command(_parse_mod.plain)
cli.add_command(_parse_mod.extract)
cli.add_command(_config_mod.config)
cli.add_command(_web_mod.web)


if __name__ == "__main__":
    cli()
