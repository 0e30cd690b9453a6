"""
CLI tool to inspect and export scan / generation history.

Usage:
    barcode-history list --kind scans
    barcode-history list --kind generations --search ean
    barcode-history export --kind scans --format markdown --output history.md
    barcode-history clear --kind generations
"""

import sys

import click

from barcode_studio.config import configure_logging, get_settings
from barcode_studio.i18n import translate
from barcode_studio.models import format_scan_data
from barcode_studio.repositories import (
    GenerationHistoryRepository,
    PreferencesRepository,
    ScanHistoryRepository,
)
from barcode_studio.repositories.export import format_csv, format_markdown
from barcode_studio.storage import get_store

KIND_OPTION = click.option(
    "--kind", "-k",
    type=click.Choice(["scans", "generations"]),
    default="scans",
    help="Which history to use (default: scans)",
)


def get_repository(kind: str) -> ScanHistoryRepository | GenerationHistoryRepository:
    """Build the repository for a history kind from settings."""
    settings = get_settings()
    store = get_store()
    if kind == "generations":
        return GenerationHistoryRepository(store, limit=settings.history_limit)
    return ScanHistoryRepository(store, limit=settings.history_limit)


def message(key: str) -> str:
    """Catalog string in the user's language."""
    language = PreferencesRepository(get_store()).language(get_settings().default_language)
    return translate(key, language)


@click.group()
def cli() -> None:
    """Inspect and export history."""
    configure_logging(get_settings())


@cli.command("list")
@KIND_OPTION
@click.option("--search", "-q", default="", help="Case-insensitive filter")
def list_command(kind: str, search: str) -> None:
    """Print history entries, newest first."""
    items = get_repository(kind).search(search)
    if not items:
        click.echo(message("history.no_results" if search else f"history.no_{kind}_yet"))
        return

    for item in items:
        label = item.type if kind == "scans" else item.format_name
        click.echo(f"{item.formatted_date:<20} {label:<12} {format_scan_data(item.data)}")
    click.echo(f"Total: {len(items)} entr{'y' if len(items) == 1 else 'ies'}")


@cli.command("export")
@KIND_OPTION
@click.option(
    "--output", "-o",
    type=click.Path(),
    default=None,
    help="Output file path (defaults to stdout)",
)
@click.option(
    "--format", "-f",
    "output_format",
    type=click.Choice(["csv", "markdown"]),
    default="csv",
    help="Output format (default: csv)",
)
def export_command(kind: str, output: str | None, output_format: str) -> None:
    """Export history as CSV or markdown."""
    items = get_repository(kind).list()
    if not items:
        click.echo(message(f"history.no_{kind}_to_export"), err=True)
        sys.exit(1)

    if output_format == "csv":
        content = format_csv(items)
    else:
        content = format_markdown(items)

    if output:
        with open(output, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        click.echo(f"History written to: {output}")
    else:
        click.echo(content)


@cli.command("clear")
@KIND_OPTION
@click.confirmation_option(prompt=f"{translate('history.clear_confirm')} Continue?")
def clear_command(kind: str) -> None:
    """Delete all entries of a history."""
    get_repository(kind).clear()
    click.echo(f"{message('history.cleared')} ({kind})")


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
