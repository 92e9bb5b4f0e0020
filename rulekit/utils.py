"""Shared helpers such as the priority ordering of rules."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, TypeVar

from rulekit.traits import Rule

R = TypeVar("R", bound=Rule)


class PriorityOrder(Enum):
    """Order in which rules are run, by their priority value."""

    ASC = "asc"
    """Lower priority values come first. This is the default."""

    DESC = "desc"
    """Higher priority values come first."""

    def sort(self, rules: Iterable[R]) -> list[R]:
        """Return the rules as a new list sorted by priority in this order.

        The sort is stable: rules of equal priority keep their relative order.
        """
        return sorted(rules, key=lambda rule: rule.priority(), reverse=self is PriorityOrder.DESC)