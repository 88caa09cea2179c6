"""Domain service: run a set of rules against one entity.

The validator never stops at the first failure. Every rule runs, every
violation is collected, and violations come back in the order the rules
were added so callers (and tests) see a deterministic list.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Generic, TypeVar

from eligibility.domain.exceptions import ValidationError
from eligibility.domain.rule.rule import Rule

T = TypeVar("T")
E = TypeVar("E")

logger = logging.getLogger(__name__)


class Validator(ABC, Generic[T, E]):

    @abstractmethod
    def validate(self, entity: T) -> list[E]:
        """Return every violation found on *entity* (empty if compliant)."""


class RuleValidator(Validator[T, E]):
    """Validator backed by an ordered, fixed collection of rules.

    The rule collection is frozen at construction, so one instance can be
    shared and reused for any number of ``validate`` calls.
    """

    def __init__(self, rules: Iterable[Rule[T, E]]) -> None:
        self._rules: tuple[Rule[T, E], ...] = tuple(rules)

    @property
    def rules(self) -> tuple[Rule[T, E], ...]:
        return self._rules

    def validate(self, entity: T) -> list[E]:
        errors: list[E] = []
        for rule in self._rules:
            error = rule.run(entity)
            if error is None:
                continue
            logger.debug("Rule %s failed: %s", type(rule).__name__, error)
            errors.append(error)

        logger.debug(
            "Validated %d rules, %d violations", len(self._rules), len(errors)
        )
        return errors

    def __len__(self) -> int:
        return len(self._rules)


class ValidatorBuilder(Generic[T, E]):
    """Fluent accumulator for RuleValidator.

    A builder is single-use: once ``build()`` has been called it refuses
    further rules.
    """

    def __init__(self) -> None:
        self._rules: list[Rule[T, E]] = []
        self._built = False

    def with_rule(self, rule: Rule[T, E]) -> ValidatorBuilder[T, E]:
        self._assert_not_built()
        if not isinstance(rule, Rule):
            raise ValidationError(
                f"Expected a Rule, got {type(rule).__name__}"
            )
        self._rules.append(rule)
        return self

    def with_rules(self, *rules: Rule[T, E]) -> ValidatorBuilder[T, E]:
        for rule in rules:
            self.with_rule(rule)
        return self

    def build(self) -> RuleValidator[T, E]:
        self._assert_not_built()
        self._built = True
        return RuleValidator(self._rules)

    # --- Internal helpers -----------------------------------------------------

    def _assert_not_built(self) -> None:
        if self._built:
            raise ValidationError("Validator builder has already been built")
