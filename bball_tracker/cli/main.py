"""
Basketball Tracker CLI

Command-line interface for live stat tracking and box scores.

Usage:
    bball [OPTIONS] COMMAND [ARGS]...

Commands:
    game      Game lookups (show, box-score)
    track     Interactive live stat tracking
"""

import logging
import sys

import click
from dotenv import load_dotenv

from ..api.client import ProductionGameApiClient
from ..api.retry import RetryStrategy
from ..config import Config
from ..monitoring import init_sentry

# Load .env file
load_dotenv()


def setup_logging(verbose: bool):
    """Configure logging to output to stdout."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(message)s',  # Simple format for CLI
        handlers=[logging.StreamHandler(sys.stdout)]
    )


def build_client(config: Config) -> ProductionGameApiClient:
    return ProductionGameApiClient(
        base_url=config.api.base_url,
        token=config.api.token,
        timeout=config.api.timeout,
        retry=RetryStrategy(max_retries=config.api.max_retries, base_delay=config.api.retry_delay),
    )


@click.group()
@click.option('--api-url', default=None, help='Game API server URL (default: $BBALL_API_URL)')
@click.option('--token', default=None, help='API bearer token (default: $BBALL_API_TOKEN)')
@click.option('-v', '--verbose', is_flag=True, help='Verbose output (show DEBUG logs)')
@click.option('-q', '--quiet', is_flag=True, help='Quiet mode (only show warnings/errors)')
@click.pass_context
def cli(ctx, api_url, token, verbose, quiet):
    """Basketball Tracker - Live stat tracking for your team's games."""
    # Configure logging based on verbosity
    if quiet:
        logging.basicConfig(level=logging.WARNING, format='%(message)s')
    else:
        setup_logging(verbose)

    init_sentry()

    config = Config.from_env()
    if api_url:
        config.api.base_url = api_url
    if token:
        config.api.token = token

    ctx.ensure_object(dict)
    ctx.obj['config'] = config
    # Tests inject a client here
    ctx.obj.setdefault('client_factory', build_client)


def get_client(ctx):
    return ctx.obj['client_factory'](ctx.obj['config'])


# Import and register command groups
from .game import game  # noqa: E402
from .track import track  # noqa: E402

cli.add_command(game)
cli.add_command(track)


if __name__ == '__main__':
    cli()
