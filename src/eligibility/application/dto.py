"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class DriverSpec:
    """Input: a driver described with plain values."""

    age: int
    alcohol_in_blood: float
    licence_type: str | None = None  # category tag, e.g. "B"
    licence_expiration: datetime | None = None


@dataclass(frozen=True)
class ViolationDTO:
    """Output: one failed rule as displayed to the user."""

    code: str
    message: str


@dataclass(frozen=True)
class EligibilityReportDTO:
    """Output: the verdict for one driver."""

    eligible: bool
    violations: list[ViolationDTO]
