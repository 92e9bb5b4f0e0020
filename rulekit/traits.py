"""The interface every rule implements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Rule(ABC):
    """A rule that may alter its context, and itself, when applied.

    ``evaluate`` and ``apply`` signal failure by raising; the engine wraps
    such exceptions in its own error types.
    """

    @abstractmethod
    def name(self) -> str:
        """Return the name or identifier of this rule."""

    def priority(self) -> int:
        """Return the rule's priority; higher numbers mean higher priority."""
        return 0

    @abstractmethod
    def evaluate(self, ctx: Any) -> bool:
        """Return whether the rule should be applied to ``ctx``."""

    @abstractmethod
    def apply(self, ctx: Any) -> None:
        """Apply the rule to ``ctx``, possibly mutating it."""

    def before_apply(self, ctx: Any) -> None:
        """Hook called just before ``apply``; does nothing by default."""

    def after_apply(self, ctx: Any) -> None:
        """Hook called just after ``apply``; does nothing by default."""