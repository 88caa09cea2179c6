"""Driver entity and its driving licence.

The Driver carries no invariants of its own: whether a driver may drive
is decided entirely by rules. The Licence only insists that its
expiration is a well-defined (timezone-aware) point in time.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from eligibility.domain.exceptions import ValidationError


class LicenceType(Enum):
    A = "A"
    A1 = "A1"
    B = "B"
    C = "C"
    D = "D"
    BE = "BE"
    CE = "CE"
    DE = "DE"

    @staticmethod
    def parse(tag: str) -> LicenceType:
        """Resolve a category tag such as ``"be"`` or ``" B "``."""
        try:
            return LicenceType(tag.strip().upper())
        except ValueError as exc:
            allowed = ", ".join(t.value for t in LicenceType)
            raise ValidationError(
                f"Unknown licence category {tag!r} (expected one of {allowed})"
            ) from exc


def ensure_aware(value: datetime, what: str) -> None:
    if not isinstance(value, datetime):
        raise ValidationError(
            f"{what} must be a datetime, got {type(value).__name__}"
        )
    if value.tzinfo is None or value.utcoffset() is None:
        raise ValidationError(f"{what} must be timezone-aware, got {value!r}")


@dataclass(frozen=True)
class Licence:
    """A driving licence of one category.

    Expiration is kept independent of the category so rules can query it
    without caring which kind of licence the driver holds.
    """

    licence_type: LicenceType
    expiration: datetime

    def __post_init__(self) -> None:
        ensure_aware(self.expiration, "Licence expiration")

    def is_valid_on(self, date: datetime) -> bool:
        """True while *date* has not passed the expiration instant.

        A licence is still valid at the exact instant it expires.
        """
        return self.expiration >= date


@dataclass(frozen=True)
class Driver:
    """The subject of eligibility checks."""

    age: int
    alcohol_in_blood: float
    licence: Licence | None = None

    @property
    def has_licence(self) -> bool:
        return self.licence is not None
