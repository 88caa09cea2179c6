"""Command-line entry point.

Running ``eligibility`` on its own does nothing; ``eligibility check``
validates one driver against the default rule set.
"""

from __future__ import annotations

from datetime import datetime, timezone

import click

from eligibility.application.check_driver import CheckDriverHandler
from eligibility.application.dto import DriverSpec
from eligibility.domain.exceptions import DomainException
from eligibility.infrastructure.bootstrap import driver_validator
from eligibility.infrastructure.logging import configure_logging

_DATE_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M:%S"]


def _as_utc(value: datetime | None) -> datetime | None:
    """Treat naive command-line timestamps as UTC."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


@click.group(invoke_without_command=True)
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
def cli(verbose: bool, log_json: bool) -> None:
    """Driver eligibility checks."""
    configure_logging(verbose=verbose, log_json=log_json)


@cli.command("check")
@click.option("--age", required=True, type=click.IntRange(min=0), help="Driver age in years.")
@click.option("--alcohol", required=True, type=click.FloatRange(min=0), help="Blood alcohol in grams/lt.")
@click.option("--licence", "licence_type", default=None, help="Licence category (A, A1, B, C, D, BE, CE, DE).")
@click.option("--expires", type=click.DateTime(_DATE_FORMATS), default=None, help="Licence expiration (UTC).")
@click.option("--on", "reference_date", type=click.DateTime(_DATE_FORMATS), default=None, help="Check validity as of this date (UTC). Defaults to now.")
@click.pass_context
def check(
    ctx: click.Context,
    age: int,
    alcohol: float,
    licence_type: str | None,
    expires: datetime | None,
    reference_date: datetime | None,
) -> None:
    """Check whether a driver may drive."""
    spec = DriverSpec(
        age=age,
        alcohol_in_blood=alcohol,
        licence_type=licence_type,
        licence_expiration=_as_utc(expires),
    )
    handler = CheckDriverHandler(driver_validator(_as_utc(reference_date)))

    try:
        report = handler.handle(spec)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if report.eligible:
        click.echo("Driver is eligible.")
        return

    click.echo("Driver is not eligible:")
    for violation in report.violations:
        click.echo(f"  - {violation.message}")
    ctx.exit(1)
