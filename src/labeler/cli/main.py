#!/usr/bin/env python3
"""
Main CLI Entry Point for the YNAB Labeler

Provides the unified command-line interface for matching labels to YNAB
transactions, syncing their memos and undoing a sync.
"""

import logging
import os

import click

from ..core.config import get_config


@click.group()
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Override environment configuration",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_env: str | None, verbose: bool, debug: bool) -> None:
    """
    YNAB Labeler - attach memos from a personal label record to YNAB transactions.
    """
    ctx.ensure_object(dict)

    if config_env:
        os.environ["LABELER_ENV"] = config_env

    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("labeler").setLevel(logging.DEBUG)

    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = get_config()

    if verbose:
        click.echo(f"Environment: {ctx.obj['config'].environment.value}")
        click.echo(f"Data directory: {ctx.obj['config'].data_dir}")


@main.command()
def version() -> None:
    """Show version information."""
    from labeler import __version__

    click.echo(f"YNAB Labeler v{__version__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]
    settings = config_obj.to_dict()

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {settings['environment']}")
    click.echo(f"  Data Directory: {settings['data_dir']}")
    click.echo(f"  Cache Directory: {settings['cache_dir']}")
    click.echo(f"  Output Directory: {settings['output_dir']}")
    click.echo(f"  YNAB API Token: {settings['ynab']['api_token'] if config_obj.ynab.api_token else 'not set'}")
    click.echo(f"  YNAB Budget: {settings['ynab']['budget_id'] or 'not set'}")
    click.echo(f"  YNAB Account: {settings['ynab']['account_id'] or 'not set'}")
    click.echo(f"  Debug Mode: {settings['debug']}")
    click.echo(f"  Log Level: {settings['log_level']}")


from .labeling import match, sync, undo  # noqa: E402
from .ynab import ynab  # noqa: E402

main.add_command(ynab)
main.add_command(match)
main.add_command(sync)
main.add_command(undo)


if __name__ == "__main__":
    main()
