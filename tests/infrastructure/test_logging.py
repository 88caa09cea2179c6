"""Tests for the CLI's structlog-backed log rendering."""

from __future__ import annotations

import json
import logging

import pytest

from eligibility.domain.model.driver import Driver
from eligibility.domain.rule.driver_rules import HasAge
from eligibility.domain.service.validator import RuleValidator
from eligibility.infrastructure.logging import configure_logging


class TestConfigureLogging:

    def test_verbose_enables_debug(self):
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("eligibility").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self):
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("eligibility").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]):
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("eligibility.test").warning("json test %d", 42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test 42"
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "eligibility.test"
        assert "timestamp" in parsed

    def test_failed_rules_logged_when_verbose(self, capfd: pytest.CaptureFixture[str]):
        configure_logging(verbose=True, log_json=True)
        RuleValidator([HasAge(18)]).validate(Driver(age=17, alcohol_in_blood=0.0))

        lines = [json.loads(line) for line in capfd.readouterr().err.splitlines()]
        assert [line["event"] for line in lines] == [
            "Rule HasAge failed: Age is: 17 years",
            "Validated 1 rules, 1 violations",
        ]
        assert all(line["level"] == "debug" for line in lines)
        assert lines[0]["logger"] == "eligibility.domain.service.validator"

    def test_debug_suppressed_when_not_verbose(self, capfd: pytest.CaptureFixture[str]):
        configure_logging(verbose=False, log_json=True)
        RuleValidator([HasAge(18)]).validate(Driver(age=17, alcohol_in_blood=0.0))
        assert capfd.readouterr().err == ""

    def test_other_loggers_stay_at_warning(self, capfd: pytest.CaptureFixture[str]):
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("somelib").debug("noise")
        assert capfd.readouterr().err == ""
