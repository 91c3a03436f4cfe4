#!/usr/bin/env python3
"""
Extract CLI - Subscription Extraction Command

Runs the extraction pipeline over a JSON dump of Gmail API messages.
"""

from datetime import datetime
from pathlib import Path

import click

from ..core.json_utils import write_json
from ..mail import extract_all, summarize_extraction
from ..subscriptions.loader import load_mail_items, subscriptions_to_dataframe


@click.command()
@click.argument("messages_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), help="Output JSON file")
@click.option("--csv", "csv_file", type=click.Path(dir_okay=False, path_type=Path), help="Also write a CSV file")
@click.option("--workers", type=int, help="Extraction threads (default: EXTRACT_WORKERS)")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def extract(
    ctx: click.Context,
    messages_file: Path,
    output: Path | None,
    csv_file: Path | None,
    workers: int | None,
    verbose: bool,
) -> None:
    """
    Extract subscriptions from a Gmail API message dump.

    MESSAGES_FILE is a JSON list of users.messages.get resources (format=full),
    or an object with a "messages" list.

    Examples:
      subtracker extract messages.json
      subtracker extract messages.json --output subs.json --csv subs.csv
    """
    config = ctx.obj["config"]
    verbose = verbose or ctx.obj.get("verbose", False)
    workers = workers if workers is not None else config.extraction.workers
    if workers < 1:
        raise click.BadParameter("must be at least 1", param_hint="--workers")

    try:
        items = load_mail_items(messages_file)
    except (ValueError, OSError) as e:
        raise click.ClickException(f"Cannot read {messages_file}: {e}") from e

    if verbose:
        click.echo(f"Loaded {len(items)} mail items from {messages_file}")

    if workers > 1:
        records = extract_all(items, max_workers=workers)
        click.echo(f"Extracted {len(records)} of {len(items)} mail items ({workers} workers)")
    else:
        records, summary = summarize_extraction(items)
        click.echo(f"Extracted {summary.extracted} of {summary.total} mail items")
        click.echo(f"  Unrecognized senders: {summary.unrecognized}")
        click.echo(f"  Recognized but unparsed: {summary.failed}")
        for provider, count in sorted(summary.by_provider.items()):
            click.echo(f"  {provider}: {count}")

    if output is None:
        timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        output = config.output_dir / f"{timestamp}_subscriptions.json"

    write_json(output, [record.to_dict() for record in records])
    click.echo(f"Saved subscriptions to {output}")

    if csv_file is not None:
        csv_file.parent.mkdir(parents=True, exist_ok=True)
        subscriptions_to_dataframe(records).to_csv(csv_file, index=False)
        click.echo(f"Saved CSV to {csv_file}")
