#!/usr/bin/env python3
"""
Stats CLI - Subscription Statistics Commands

Shows spend statistics for a subscription list and writes sample data.
"""

from pathlib import Path

import click

from ..core.currency import format_decimal
from ..core.json_utils import format_json
from ..subscriptions.loader import load_subscriptions, save_subscriptions
from ..subscriptions.samples import sample_subscriptions
from ..subscriptions.statistics import compute_statistics


@click.command()
@click.argument("subscriptions_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Print statistics as JSON")
@click.option("--horizon", type=int, help="Renewal window in days (default: RENEWAL_HORIZON_DAYS)")
@click.pass_context
def stats(ctx: click.Context, subscriptions_file: Path, as_json: bool, horizon: int | None) -> None:
    """
    Show spend statistics for a subscription list.

    SUBSCRIPTIONS_FILE is a JSON list of subscription records, as written by
    `subtracker extract` or `subtracker samples`.
    """
    config = ctx.obj["config"]
    horizon = horizon if horizon is not None else config.statistics.renewal_horizon_days

    try:
        records = load_subscriptions(subscriptions_file)
    except (ValueError, OSError) as e:
        raise click.ClickException(f"Cannot read {subscriptions_file}: {e}") from e

    snapshot = compute_statistics(
        records,
        top_n=config.statistics.top_subscriptions,
        renewal_horizon_days=horizon,
    )

    if as_json:
        click.echo(format_json(snapshot.to_dict()))
        return

    currency = config.statistics.default_currency

    click.echo("Subscription Statistics")
    click.echo(f"  Active: {snapshot.active_count} of {snapshot.total_count}")
    click.echo(f"  Monthly total: {format_decimal(snapshot.total_monthly, currency)}")
    click.echo(f"  Yearly total: {format_decimal(snapshot.total_yearly, currency)}")

    if snapshot.top_subscriptions:
        click.echo()
        click.echo("Top subscriptions (per month):")
        for rank, top in enumerate(snapshot.top_subscriptions, start=1):
            click.echo(f"  {rank}. {top.name}: {format_decimal(top.monthly_price, currency)}")

    if snapshot.category_breakdown:
        click.echo()
        click.echo("By category (per month):")
        for entry in snapshot.category_breakdown:
            click.echo(f"  {entry.label}: {format_decimal(entry.amount, currency)}")

    click.echo()
    if snapshot.upcoming_renewals:
        click.echo(f"Renewals in the next {horizon} days:")
        for record in snapshot.upcoming_renewals:
            cycle = record.billing_cycle.label
            click.echo(f"  {record.next_billing_date}  {record.name}  {record.price} ({cycle})")
    else:
        click.echo(f"No renewals in the next {horizon} days")


@click.command()
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), help="Output JSON file")
@click.pass_context
def samples(ctx: click.Context, output: Path | None) -> None:
    """Write the sample subscription list to a JSON file."""
    config = ctx.obj["config"]
    output = output or config.data_dir / "sample_subscriptions.json"

    records = sample_subscriptions()
    save_subscriptions(output, records)
    click.echo(f"Saved {len(records)} sample subscriptions to {output}")
