"""Cactus shop command-line entry point.

The shop keeps everything in memory, so each command builds a fresh shop,
seeds the demo catalog and works on it within a single process.
"""

import logging

import click

from cactus_shop import config
from cactus_shop.infrastructure.cli.catalog_commands import catalog
from cactus_shop.infrastructure.cli.order_commands import demo

LOG_FORMAT = "%(levelname)-7s %(name)s: %(message)s"


def _parse_log_level(ctx: click.Context, param: click.Parameter, value: str | None) -> int:
    try:
        if value is None:
            return config.get_log_level()
        return config.parse_log_level(value)
    except config.ConfigError as exc:
        raise click.BadParameter(str(exc), ctx=ctx, param=param)


@click.group()
@click.option(
    "--log-level",
    callback=_parse_log_level,
    default=None,
    help=f"Logging level (default: ${config.LOG_LEVEL_ENV} or {config.DEFAULT_LOG_LEVEL}).",
)
def cli(log_level: int) -> None:
    """Cactus Shop: cacti, fertilizers and the orders for them."""
    logging.basicConfig(level=log_level, format=LOG_FORMAT)
    logging.getLogger("cactus_shop").setLevel(log_level)


cli.add_command(catalog)
cli.add_command(demo)
