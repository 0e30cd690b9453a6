"""
CLI tool to validate input and generate barcode / QR images.

Usage:
    barcode-generate formats
    barcode-generate check --format ean13 400638133393
    barcode-generate render --format qr "https://example.com" --output code.png
"""

import sys

import click
import structlog

from barcode_studio.barcode import encode, get_registry, image_to_png, render
from barcode_studio.barcode.results import CANNOT_RENDER
from barcode_studio.config import configure_logging, get_settings
from barcode_studio.i18n import translate
from barcode_studio.repositories import PreferencesRepository
from barcode_studio.services import GeneratorService
from barcode_studio.storage import get_store

logger = structlog.get_logger(__name__)

FORMAT_IDS = [descriptor.id for descriptor in get_registry().list_formats()]


def ui_language() -> str:
    """Language picked in preferences, else the configured default."""
    return PreferencesRepository(get_store()).language(get_settings().default_language)


@click.group()
def cli() -> None:
    """Generate and validate barcodes and QR codes."""
    configure_logging(get_settings())


@cli.command("formats")
def list_formats_command() -> None:
    """List supported formats in picker order."""
    for descriptor in get_registry().list_formats():
        rule = descriptor.rule.describe() if descriptor.rule else "any text"
        click.echo(f"{descriptor.id:<12} {descriptor.display_name:<12} {rule}")


@cli.command("check")
@click.option(
    "--format", "-f",
    "format_id",
    type=click.Choice(FORMAT_IDS),
    default="qr",
    help="Format id (default: qr)",
)
@click.argument("value")
def check(format_id: str, value: str) -> None:
    """Validate VALUE and print the normalized value."""
    result = encode(format_id, value)
    if not result.is_valid:
        click.echo(f"{translate('generator.invalid_input', ui_language())}: {result.reason}", err=True)
        sys.exit(1)
    click.echo(result.normalized_value)


@cli.command("render")
@click.option(
    "--format", "-f",
    "format_id",
    type=click.Choice(FORMAT_IDS),
    default="qr",
    help="Format id (default: qr)",
)
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False, writable=True),
    required=True,
    help="PNG file to write",
)
@click.option(
    "--size", "-s",
    type=click.IntRange(min=1),
    default=None,
    help="Target QR size in pixels (default from settings)",
)
@click.option(
    "--no-history",
    is_flag=True,
    default=False,
    help="Do not record this generation in history",
)
@click.argument("value")
def render_command(
    format_id: str,
    output: str,
    size: int | None,
    no_history: bool,
    value: str,
) -> None:
    """Encode VALUE and write it as a PNG image."""
    settings = get_settings()
    service = GeneratorService.from_store(get_store(), settings.history_limit)

    if no_history:
        result = encode(format_id, value)
    else:
        result = service.generate(format_id, value)
    if not result.is_valid:
        click.echo(f"{translate('generator.invalid_input', ui_language())}: {result.reason}", err=True)
        sys.exit(1)

    rendered = render(result, size=size or settings.default_render_size)
    if not rendered.ok or rendered.image is None:
        detail = rendered.failure.detail if rendered.failure else None
        logger.warning("Render failed", format_id=format_id, detail=detail)
        language = ui_language()
        click.echo(
            f"{translate('common.error', language)}: "
            f"{translate('generator.cannot_render', language)} ({CANNOT_RENDER}: {detail})",
            err=True,
        )
        sys.exit(2)

    with open(output, "wb") as f:
        f.write(image_to_png(rendered.image))
    click.echo(f"Written {result.normalized_value} to: {output}")


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
