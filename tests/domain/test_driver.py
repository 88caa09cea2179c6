"""Unit tests for the Driver entity and its Licence."""

from datetime import datetime, timedelta, timezone

import pytest

from eligibility.domain.exceptions import ValidationError
from eligibility.domain.model.driver import Driver, Licence, LicenceType

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


# ── Licence ──────────────────────────────────────────────────────────────────


class TestLicence:

    def test_valid_before_expiration(self):
        licence = Licence(LicenceType.B, NOW)
        assert licence.is_valid_on(NOW - timedelta(days=1))

    def test_valid_at_exact_expiration(self):
        licence = Licence(LicenceType.B, NOW)
        assert licence.is_valid_on(NOW)

    def test_invalid_after_expiration(self):
        licence = Licence(LicenceType.B, NOW)
        assert not licence.is_valid_on(NOW + timedelta(seconds=1))

    def test_comparison_across_timezones(self):
        plus_two = timezone(timedelta(hours=2))
        licence = Licence(LicenceType.C, datetime(2024, 6, 1, 14, 0, tzinfo=plus_two))
        assert licence.is_valid_on(NOW)
        assert not licence.is_valid_on(NOW + timedelta(minutes=1))

    def test_naive_expiration_rejected(self):
        with pytest.raises(ValidationError, match="timezone-aware"):
            Licence(LicenceType.B, datetime(2024, 6, 1))

    def test_non_datetime_expiration_rejected(self):
        with pytest.raises(ValidationError, match="must be a datetime"):
            Licence(LicenceType.B, "2024-06-01")

    def test_equality_is_structural(self):
        assert Licence(LicenceType.A1, NOW) == Licence(LicenceType.A1, NOW)
        assert Licence(LicenceType.A1, NOW) != Licence(LicenceType.A, NOW)


class TestLicenceType:

    def test_closed_set_of_categories(self):
        assert [t.value for t in LicenceType] == ["A", "A1", "B", "C", "D", "BE", "CE", "DE"]

    def test_parse_is_case_insensitive(self):
        assert LicenceType.parse("be") == LicenceType.BE
        assert LicenceType.parse(" a1 ") == LicenceType.A1

    def test_parse_unknown_rejected(self):
        with pytest.raises(ValidationError, match="Unknown licence category"):
            LicenceType.parse("Z")


# ── Driver ───────────────────────────────────────────────────────────────────


class TestDriver:

    def test_licence_defaults_to_none(self):
        driver = Driver(age=30, alcohol_in_blood=0.0)
        assert driver.licence is None
        assert not driver.has_licence

    def test_has_licence(self):
        driver = Driver(age=30, alcohol_in_blood=0.0, licence=Licence(LicenceType.D, NOW))
        assert driver.has_licence

    def test_no_structural_invariants(self):
        """Validity is decided by rules, so odd values still construct."""
        driver = Driver(age=0, alcohol_in_blood=9.9)
        assert driver.age == 0

    def test_is_immutable(self):
        driver = Driver(age=30, alcohol_in_blood=0.0)
        with pytest.raises(AttributeError):
            driver.age = 31
