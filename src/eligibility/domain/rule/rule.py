"""Abstract business rule.

A rule inspects one entity and either accepts it (returns ``None``) or
describes the single way it is violated (returns an error value). Rules
are generic over the entity and the error type so the same validator
machinery can serve any entity.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


class Rule(ABC, Generic[T, E]):

    @abstractmethod
    def run(self, entity: T) -> E | None:
        """Return the violation for *entity*, or None if it complies.

        Implementations must only read *entity* and must be
        deterministic for a given configuration.
        """
