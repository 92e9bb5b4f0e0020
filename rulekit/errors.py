"""Exceptions raised while evaluating or applying rules."""

from __future__ import annotations


class RuleEngineError(Exception):
    """Base class for failures reported by the rule engine."""


class RuleEvaluationError(RuleEngineError):
    """A rule raised while deciding whether it applies."""

    def __init__(self, error: BaseException) -> None:
        self.error = error
        super().__init__(f"Rule evaluation failed: {error}")


class RuleApplicationError(RuleEngineError):
    """A rule raised while being applied to the context."""

    def __init__(self, error: BaseException) -> None:
        self.error = error
        super().__init__(f"Rule application failed: {error}")


class UnknownRuleError(RuleEngineError):
    """A rule failure that fits no other category."""

    def __init__(self) -> None:
        super().__init__("Unknown rule error")


class RuleError(Exception):
    """Base class for errors a rule implementation may raise itself."""


class RuleIoError(RuleError):
    """An I/O operation inside a rule failed."""

    def __init__(self, error: OSError) -> None:
        self.error = error
        super().__init__(f"IO error: {error}")


class RuleEvalError(RuleError):
    """Domain-specific failure in a rule's own logic."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Evaluation error: {message}")