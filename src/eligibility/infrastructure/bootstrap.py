"""Composition root — wires the standard rule set into a validator.

This is the only place in the codebase that knows which rules, in which
order and with which thresholds, make up the default driver check.
"""

from __future__ import annotations

from datetime import datetime, timezone

from eligibility.domain.model.driver import Driver
from eligibility.domain.model.errors import DriverError
from eligibility.domain.policy import DEFAULT_ALLOWED_ALCOHOL_LEVEL, DEFAULT_REQUIRED_AGE
from eligibility.domain.rule.driver_rules import (
    HasAge,
    HasDrivingLicence,
    HasValidDrivingLicence,
    IsSober,
)
from eligibility.domain.service.validator import RuleValidator, ValidatorBuilder


def driver_validator(
    reference_date: datetime | None = None,
) -> RuleValidator[Driver, DriverError]:
    """Build the default driver validator.

    Licences are checked against *reference_date*, or against the
    current UTC instant when it is omitted.
    """
    if reference_date is None:
        reference_date = datetime.now(timezone.utc)

    return (
        ValidatorBuilder()
        .with_rule(HasDrivingLicence())
        .with_rule(HasValidDrivingLicence(reference_date))
        .with_rule(IsSober(DEFAULT_ALLOWED_ALCOHOL_LEVEL))
        .with_rule(HasAge(DEFAULT_REQUIRED_AGE))
        .build()
    )
