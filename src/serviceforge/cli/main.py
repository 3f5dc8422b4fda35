"""serviceforge CLI entry point."""

import click

from serviceforge.config import ServiceConfig


@click.group()
@click.option(
    "--log-level",
    default=None,
    help="Override SERVICEFORGE_LOG_LEVEL (DEBUG, INFO, WARNING, ...).",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None):
    """serviceforge: declarative service objects CLI."""
    config = ServiceConfig.from_env()
    if log_level:
        config.log_level = log_level.upper()
    try:
        config.configure_logging()
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--log-level")
    ctx.obj = config


# Register subcommands
from serviceforge.cli.service_cmd import call_cmd, describe  # noqa: E402

cli.add_command(describe)
cli.add_command(call_cmd)
