from dataclasses import dataclass, field

import pytest

from rulekit.engine import RuleEngine
from rulekit.errors import RuleApplicationError, RuleEvaluationError
from rulekit.traits import Rule
from rulekit.utils import PriorityOrder


@dataclass
class UserContext:
    age: int
    score: int
    applied: list = field(default_factory=list)


class AgeRule(Rule):
    def name(self):
        return "AgeRule"

    def priority(self):
        return 10

    def evaluate(self, ctx):
        return ctx.age >= 18

    def apply(self, ctx):
        ctx.applied.append("Passed age check")


class ScoreRule(Rule):
    def name(self):
        return "ScoreRule"

    def priority(self):
        return 5

    def evaluate(self, ctx):
        return ctx.score >= 80

    def apply(self, ctx):
        ctx.applied.append("Passed score check")


class _Recording(Rule):
    def __init__(self, log):
        self.log = log
        self.calls = 0

    def name(self):
        return "Recording"

    def evaluate(self, ctx):
        self.log.append("evaluate")
        return True

    def before_apply(self, ctx):
        self.log.append("before")

    def apply(self, ctx):
        self.calls += 1
        self.log.append("apply")

    def after_apply(self, ctx):
        self.log.append("after")


class _FailEvaluate(Rule):
    def __init__(self, error):
        self.error = error

    def name(self):
        return "FailEvaluate"

    def evaluate(self, ctx):
        raise self.error

    def apply(self, ctx):
        ctx.applied.append("never")


class _FailApply(Rule):
    def __init__(self, error):
        self.error = error

    def name(self):
        return "FailApply"

    def evaluate(self, ctx):
        return True

    def apply(self, ctx):
        raise self.error


def test_apply_mutates_context():
    engine = RuleEngine([AgeRule(), ScoreRule()])
    ctx = UserContext(age=20, score=90)
    engine.evaluate_all(ctx)
    assert ctx.applied == ["Passed score check", "Passed age check"]


def test_default_order_is_ascending():
    engine = RuleEngine([AgeRule(), ScoreRule()], None)
    assert engine.order is PriorityOrder.ASC
    assert [r.name() for r in engine.rules] == ["ScoreRule", "AgeRule"]


def test_descending_order_runs_highest_first():
    engine = RuleEngine([ScoreRule(), AgeRule()], PriorityOrder.DESC)
    ctx = UserContext(age=20, score=90)
    engine.evaluate_all(ctx)
    assert ctx.applied == ["Passed age check", "Passed score check"]


def test_non_matching_rules_are_skipped():
    engine = RuleEngine([AgeRule(), ScoreRule()])
    ctx = UserContext(age=15, score=90)
    engine.evaluate_all(ctx)
    assert ctx.applied == ["Passed score check"]


def test_evaluate_first_applies_only_first_match():
    engine = RuleEngine([AgeRule(), ScoreRule()])
    ctx = UserContext(age=20, score=90)
    assert engine.evaluate_first(ctx) is True
    assert ctx.applied == ["Passed score check"]


def test_evaluate_first_skips_to_next_match():
    engine = RuleEngine([AgeRule(), ScoreRule()])
    ctx = UserContext(age=20, score=10)
    assert engine.evaluate_first(ctx) is True
    assert ctx.applied == ["Passed age check"]


def test_evaluate_first_returns_false_without_match():
    engine = RuleEngine([AgeRule(), ScoreRule()])
    ctx = UserContext(age=10, score=10)
    assert engine.evaluate_first(ctx) is False
    assert ctx.applied == []


def test_hooks_surround_apply():
    log = []
    engine = RuleEngine([_Recording(log)])
    engine.evaluate_all(UserContext(age=0, score=0))
    assert log == ["evaluate", "before", "apply", "after"]


def test_rule_state_persists_between_runs():
    rule = _Recording([])
    engine = RuleEngine([rule])
    ctx = UserContext(age=0, score=0)
    engine.evaluate_all(ctx)
    engine.evaluate_first(ctx)
    assert rule.calls == 2


@pytest.mark.parametrize("method", ["evaluate_all", "evaluate_first"])
def test_evaluation_failure_is_wrapped(method):
    inner = ValueError("cannot decide")
    engine = RuleEngine([_FailEvaluate(inner), AgeRule()])
    ctx = UserContext(age=30, score=0)
    with pytest.raises(RuleEvaluationError) as info:
        getattr(engine, method)(ctx)
    assert info.value.error is inner
    assert ctx.applied == []


@pytest.mark.parametrize("method", ["evaluate_all", "evaluate_first"])
def test_application_failure_is_wrapped(method):
    inner = RuntimeError("cannot apply")
    engine = RuleEngine([_FailApply(inner)])
    with pytest.raises(RuleApplicationError) as info:
        getattr(engine, method)(UserContext(age=0, score=0))
    assert info.value.error is inner
    assert info.value.__cause__ is inner


def test_failure_stops_later_rules():
    log = []
    later = _Recording(log)
    engine = RuleEngine([_FailApply(RuntimeError("x")), later])
    with pytest.raises(RuleApplicationError):
        engine.evaluate_all(UserContext(age=0, score=0))
    assert log == []


def test_rules_property_is_a_snapshot():
    source = [AgeRule()]
    engine = RuleEngine(source)
    source.append(ScoreRule())
    assert [r.name() for r in engine.rules] == ["AgeRule"]