"""Fluent construction of a RuleEngine."""

from __future__ import annotations

from typing import Generic, Iterable, TypeVar

from rulekit.engine import RuleEngine
from rulekit.traits import Rule
from rulekit.utils import PriorityOrder

R = TypeVar("R", bound=Rule)


class RuleEngineBuilder(Generic[R]):
    """Collects rules and an order, then builds a RuleEngine."""

    def __init__(self) -> None:
        self.rules: list[R] = []
        self.order = PriorityOrder.ASC

    def with_rules(self, rules: Iterable[R]) -> RuleEngineBuilder[R]:
        """Replace the rule list."""
        self.rules = list(rules)
        return self

    def add_rule(self, rule: R) -> RuleEngineBuilder[R]:
        """Append one rule."""
        self.rules.append(rule)
        return self

    def priority(self, order: PriorityOrder) -> RuleEngineBuilder[R]:
        """Set the priority order."""
        self.order = order
        return self

    def priority_desc(self) -> RuleEngineBuilder[R]:
        """Run highest priority first."""
        return self.priority(PriorityOrder.DESC)

    def priority_asc(self) -> RuleEngineBuilder[R]:
        """Run lowest priority first."""
        return self.priority(PriorityOrder.ASC)

    def build(self) -> RuleEngine[R]:
        """Build an engine with the rules sorted by the chosen order."""
        return RuleEngine(list(self.rules), self.order)