"""The engine that runs rules over a mutable context."""

from __future__ import annotations

from typing import Any, Generic, Iterable, Optional, TypeVar

from rulekit.errors import RuleApplicationError, RuleEvaluationError
from rulekit.traits import Rule
from rulekit.utils import PriorityOrder

R = TypeVar("R", bound=Rule)


class RuleEngine(Generic[R]):
    """Evaluates rules in priority order and applies those that match."""

    def __init__(self, rules: Iterable[R], order: Optional[PriorityOrder] = None) -> None:
        self._order = order if order is not None else PriorityOrder.ASC
        self._rules = self._order.sort(rules)

    @property
    def rules(self) -> tuple[R, ...]:
        """The rules in the order they are run."""
        return tuple(self._rules)

    @property
    def order(self) -> PriorityOrder:
        """The priority order the rules were sorted by."""
        return self._order

    def _run(self, rule: R, ctx: Any) -> bool:
        try:
            matched = rule.evaluate(ctx)
        except Exception as exc:
            raise RuleEvaluationError(exc) from exc
        if not matched:
            return False
        rule.before_apply(ctx)
        try:
            rule.apply(ctx)
        except Exception as exc:
            raise RuleApplicationError(exc) from exc
        rule.after_apply(ctx)
        return True

    def evaluate_all(self, ctx: Any) -> None:
        """Apply every rule that matches ``ctx``.

        Raises RuleEvaluationError or RuleApplicationError at the first failure.
        """
        for rule in self._rules:
            self._run(rule, ctx)

    def evaluate_first(self, ctx: Any) -> bool:
        """Apply only the first matching rule; return whether one was applied."""
        return any(self._run(rule, ctx) for rule in self._rules)

    def __repr__(self) -> str:
        return f"RuleEngine(rules={self._rules!r}, order={self._order!r})"