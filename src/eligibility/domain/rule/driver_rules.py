"""Concrete rules for drivers.

Every rule is a frozen dataclass: its thresholds are fixed at
construction and it holds no state between runs.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timezone

from eligibility.domain.exceptions import ValidationError
from eligibility.domain.model.driver import Driver, ensure_aware
from eligibility.domain.model.errors import (
    AboveAllowedAlcoholLevel,
    DriverError,
    LicenceExpired,
    UnderRequiredAge,
    WithoutLicence,
)
from eligibility.domain.rule.rule import Rule


@dataclass(frozen=True)
class HasAge(Rule[Driver, DriverError]):
    """Driver must be at least ``required_age`` years old."""

    required_age: int

    def __post_init__(self) -> None:
        if isinstance(self.required_age, bool) or not isinstance(self.required_age, int):
            raise ValidationError(
                f"Required age must be an integer, got {type(self.required_age).__name__}"
            )
        if self.required_age < 0:
            raise ValidationError("Required age cannot be negative")

    def run(self, entity: Driver) -> DriverError | None:
        if entity.age < self.required_age:
            return UnderRequiredAge(entity.age)
        return None


@dataclass(frozen=True)
class IsSober(Rule[Driver, DriverError]):
    """Blood alcohol must not exceed ``allowed_level`` grams/lt.

    Being exactly at the allowed level is still sober.
    """

    allowed_level: float

    def __post_init__(self) -> None:
        if isinstance(self.allowed_level, bool) or not isinstance(
            self.allowed_level, (int, float)
        ):
            raise ValidationError(
                f"Allowed alcohol level must be a number, got {type(self.allowed_level).__name__}"
            )
        if math.isnan(self.allowed_level):
            raise ValidationError("Allowed alcohol level must not be NaN")
        if self.allowed_level < 0:
            raise ValidationError("Allowed alcohol level cannot be negative")

    def run(self, entity: Driver) -> DriverError | None:
        if entity.alcohol_in_blood > self.allowed_level:
            return AboveAllowedAlcoholLevel(entity.alcohol_in_blood)
        return None


@dataclass(frozen=True)
class HasDrivingLicence(Rule[Driver, DriverError]):
    """Driver must hold a licence of any category."""

    def run(self, entity: Driver) -> DriverError | None:
        if not entity.has_licence:
            return WithoutLicence()
        return None


@dataclass(frozen=True)
class HasValidDrivingLicence(Rule[Driver, DriverError]):
    """A held licence must not have expired before ``date``.

    Drivers without a licence pass: absence is HasDrivingLicence's concern.
    """

    date: datetime

    def __post_init__(self) -> None:
        ensure_aware(self.date, "Reference date")

    @staticmethod
    def as_of_now() -> HasValidDrivingLicence:
        """Check licences against the current UTC instant."""
        return HasValidDrivingLicence(datetime.now(timezone.utc))

    def run(self, entity: Driver) -> DriverError | None:
        licence = entity.licence
        if licence is None:
            return None
        if not licence.is_valid_on(self.date):
            return LicenceExpired(licence.expiration)
        return None
