#!/usr/bin/env python3
"""
Main CLI Entry Point for Subscription Tracker

Provides unified command-line interface for extraction and statistics.
"""

import logging
import os

import click

from ..core.config import reload_config


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
    Subscription Tracker - billing mail extraction and spend statistics.

    Reads Gmail API message dumps and subscription lists from JSON files.
    """
    ctx.ensure_object(dict)

    if config_env:
        os.environ["SUBTRACKER_ENV"] = config_env

    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"

    try:
        config = reload_config()
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("subtracker").setLevel(logging.DEBUG)

    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = config

    if verbose:
        click.echo(f"Environment: {config.environment.value}")
        click.echo(f"Data directory: {config.data_dir}")


@main.command()
def version() -> None:
    """Show version information."""
    from subtracker import __author__, __version__

    click.echo(f"Subscription Tracker v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Data Directory: {config_obj.data_dir}")
    click.echo(f"  Output Directory: {config_obj.output_dir}")
    click.echo(f"  Extract Workers: {config_obj.extraction.workers}")
    click.echo(f"  Renewal Horizon: {config_obj.statistics.renewal_horizon_days} days")
    click.echo(f"  Top Subscriptions: {config_obj.statistics.top_subscriptions}")
    click.echo(f"  Default Currency: {config_obj.statistics.default_currency}")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")


from .extract import extract  # noqa: E402
from .stats import samples, stats  # noqa: E402

main.add_command(extract)
main.add_command(stats)
main.add_command(samples)


if __name__ == "__main__":
    main()
