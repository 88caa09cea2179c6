"""Driver violations.

Each violation is an immutable value compared by content, so two
errors of the same kind carrying the same measurement are equal. The
``str()`` rendering of every kind is a stable, user-facing message.

New rule kinds add new DriverError subclasses; nothing else in the
domain enumerates them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone


class DriverError(ABC):
    """Base class for every way a driver can fail a rule."""

    code: str = ""

    @property
    @abstractmethod
    def message(self) -> str:
        """Human-readable description of the violation."""

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class AboveAllowedAlcoholLevel(DriverError):
    """Measured blood alcohol exceeds the allowed level."""

    level: float
    code = "above_allowed_alcohol_level"

    @property
    def message(self) -> str:
        return f"Alcohol level is: {self.level} grams/lt"


@dataclass(frozen=True)
class UnderRequiredAge(DriverError):
    """Driver is younger than the required age."""

    age: int
    code = "under_required_age"

    @property
    def message(self) -> str:
        return f"Age is: {self.age} years"


@dataclass(frozen=True)
class WithoutLicence(DriverError):
    """Driver holds no licence at all."""

    code = "without_licence"

    @property
    def message(self) -> str:
        return "Without licence"


@dataclass(frozen=True)
class LicenceExpired(DriverError):
    """Licence expired before the reference date."""

    expiration: datetime
    code = "licence_expired"

    @property
    def message(self) -> str:
        stamp = self.expiration.astimezone(timezone.utc)
        # fractional seconds only when present
        fmt = "%Y-%m-%d %H:%M:%S.%f UTC" if stamp.microsecond else "%Y-%m-%d %H:%M:%S UTC"
        return f"Licence expired on date: {stamp.strftime(fmt)}"
