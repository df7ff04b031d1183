"""Main CLI entry point for onboard-cli."""

import logging
import sys
from pathlib import Path

import click

from . import __version__
from .commands.setup import onboard, preflight, providers
from .config.settings import DEFAULT_CONFIG_PATH, ConfigManager
from .exceptions import ConfigError
from .logging_setup import configure_logging
from .ui.console import create_console
from .ui.formatters import format_error_message

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--debug",
    is_flag=True,
    help="Enable debug mode with verbose output",
)
@click.option(
    "--config",
    type=click.Path(dir_okay=False, path_type=Path),
    help=f"Path to configuration file (default: {DEFAULT_CONFIG_PATH})",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, config: Path | None) -> None:
    """
    onboard-cli - Connect the assistant to a model provider.

    Supports local servers (Ollama, LM Studio) with a preflight check of
    their OpenAI-compatible API, and any custom OpenAI- or
    Anthropic-compatible endpoint.
    """
    ctx.ensure_object(dict)

    # Create console and inject into context (dependency injection pattern)
    console = create_console()
    ctx.obj["console"] = console
    ctx.obj["debug"] = debug

    manager = ConfigManager(config)
    ctx.obj["config_manager"] = manager

    try:
        settings = manager.load()
    except ConfigError as e:
        console.print(format_error_message(str(e), suggestion="Fix or remove the file, then re-run onboard."))
        sys.exit(1)

    ctx.obj["settings"] = settings
    configure_logging(settings.logging, debug=debug)
    logger.debug(f"Using configuration at {manager.config_path}")


cli.add_command(onboard)
cli.add_command(preflight)
cli.add_command(providers)


def main() -> None:
    """Main entry point for onboard-cli command."""
    try:
        cli(obj={})
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(130)
    except ConfigError as e:
        logger.error(f"{e}")
        sys.exit(1)
    except Exception as e:
        logger.critical(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
