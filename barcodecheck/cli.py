"""
CLI tool to validate codes and compute check digits.

Usage:
    barcodecheck validate 4006381333931
    barcodecheck validate 0-306-40615-2 --family isbn10 --format json
    barcodecheck check-digit 400638133393 --family ean13
    barcodecheck expand-upce 0425261
"""

import json
import logging
import sys

import click
import structlog

from barcodecheck.barcode import (
    compute_check_digit,
    normalize_code,
    upce_to_upca,
    validate_code,
)
from barcodecheck.config import get_settings
from barcodecheck.models import BarcodeFamily, InvalidCodeError, ValidationResult

logger = structlog.get_logger(__name__)

FAMILY_CHOICE = click.Choice([family.name for family in BarcodeFamily], case_sensitive=False)


def configure_logging(level: str, log_format: str) -> None:
    """Configure structlog to write to stderr at the given level."""
    renderer = (
        structlog.processors.JSONRenderer()
        if log_format == "json"
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.WARNING)
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def result_to_dict(result: ValidationResult) -> dict[str, object]:
    """Serialize a result for JSON output."""
    data = result.model_dump(mode="json")
    data["valid"] = result.valid
    return data


def format_table(results: list[ValidationResult]) -> str:
    """Format results as a plain-text table."""
    lines = [
        f"{'Family':<10} {'Valid':<6} {'Result':<22} {'Check':<6}",
        "-" * 48,
    ]
    for result in results:
        valid = "✓" if result.valid else "✗"
        check = result.expected_check_digit or "-"
        lines.append(f"{result.family.value:<10} {valid:<6} {result.kind.value:<22} {check:<6}")
    return "\n".join(lines)


@click.group()
def main() -> None:
    """Validate barcodes and identification codes."""
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format)


@main.command()
@click.argument("code")
@click.option(
    "--family", "-t",
    type=FAMILY_CHOICE,
    default=None,
    help="Family to validate against (default: try every family)",
)
@click.option(
    "--format", "-f",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format (default: table)",
)
def validate(code: str, family: str | None, output_format: str) -> None:
    """Validate CODE and exit with status 1 if it is invalid."""
    if family:
        results = [validate_code(code, BarcodeFamily[family.upper()])]
    else:
        results = [validate_code(code, member) for member in BarcodeFamily]

    matched = [result for result in results if result.valid]
    logger.info("Validated code", code=normalize_code(code), matched=len(matched))

    # Without --family only the accepting families are reported
    shown = results if family else matched

    if output_format == "json":
        click.echo(json.dumps([result_to_dict(result) for result in shown], indent=2))
    elif family:
        result = results[0]
        if result.valid:
            click.echo(f"{result.code}: valid {result.family.value}")
        else:
            click.echo(f"{result.code}: invalid {result.family.value} ({result.message})")
    elif matched:
        click.echo(format_table(matched))
    else:
        click.echo(f"{normalize_code(code)}: no family accepts this code")

    if not matched:
        sys.exit(1)


@main.command("check-digit")
@click.argument("payload")
@click.option(
    "--family", "-t",
    type=FAMILY_CHOICE,
    required=True,
    help="Family the payload belongs to",
)
def check_digit(payload: str, family: str) -> None:
    """Compute the check digit that completes PAYLOAD."""
    member = BarcodeFamily[family.upper()]
    try:
        digit = compute_check_digit(payload, member)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="PAYLOAD") from e

    click.echo(f"Check digit: {digit}")
    if member == BarcodeFamily.UPCE:
        click.echo(f"UPC-A: {upce_to_upca(normalize_code(payload)[-6:])}")
    else:
        click.echo(f"Full code: {normalize_code(payload)}{digit}")


@main.command("expand-upce")
@click.argument("code")
def expand_upce(code: str) -> None:
    """Expand a 6-8 digit UPC-E CODE to its 12-digit UPC-A."""
    try:
        upca = upce_to_upca(code)
    except InvalidCodeError as e:
        click.echo(str(e), err=True)
        sys.exit(1)

    click.echo(upca)


if __name__ == "__main__":
    main()
