# rulekit

rulekit is a small rule engine. You write rules as Python classes and pass in a context object of any kind. The engine sorts the rules by priority and runs them in that order. For each rule whose check passes, the engine applies it, and the rule may change the context or itself.

The package has no dependencies outside the standard library.

## Installation

```
pip install rulekit
```

## Defining rules

To define a rule, subclass `rulekit.traits.Rule` and implement these three methods:

- `name()` returns an identifier for the rule.
- `evaluate(ctx)` returns whether the rule applies to `ctx`.
- `apply(ctx)` carries out the rule and may mutate `ctx`.

These methods are optional:

- `priority()` returns `0` unless you override it.
- `before_apply(ctx)` and `after_apply(ctx)` are hooks that run around `apply`. They do nothing unless you override them.

```python
from dataclasses import dataclass

from rulekit.traits import Rule


@dataclass
class Order:
    total: float
    discount: float = 0.0


class DiscountIfHighValue(Rule):
    def name(self):
        return "DiscountIfHighValue"

    def priority(self):
        return 1

    def evaluate(self, ctx):
        return ctx.total > 100.0

    def apply(self, ctx):
        discount = ctx.total * 0.10
        ctx.discount += discount
        ctx.total -= discount
```

## Running the engine

```python
from rulekit.engine import RuleEngine
from rulekit.utils import PriorityOrder

order = Order(total=150.0)
engine = RuleEngine([DiscountIfHighValue()], PriorityOrder.ASC)

engine.evaluate_all(order)             # applies every matching rule
applied = engine.evaluate_first(order) # applies only the first matching rule
```

`evaluate_first` returns `True` if it applied a rule and `False` if no rule matched.

For each matching rule, the engine calls `before_apply`, then `apply`, then `after_apply`.

The order argument is optional and defaults to `PriorityOrder.ASC`:

- `PriorityOrder.ASC` runs lower priority values first.
- `PriorityOrder.DESC` runs higher priority values first.

The rules are sorted once, when the engine is created. The sort is stable, so rules with equal priority keep the order in which you gave them. Two read-only properties show the result:

- `engine.rules` is a tuple of the rules in run order.
- `engine.order` is the `PriorityOrder` used.

`PriorityOrder.sort(rules)` is also available on its own. It returns a new sorted list.

### Builder

`rulekit.builder.RuleEngineBuilder` builds an engine step by step:

```python
from rulekit.builder import RuleEngineBuilder

engine = (
    RuleEngineBuilder()
    .with_rules([DiscountIfHighValue()])
    .add_rule(DiscountIfHighValue())
    .priority_desc()
    .build()
)
```

The builder has these methods:

- `with_rules` replaces the current rule list.
- `add_rule` appends one rule.
- `priority(order)` sets the order. `priority_asc()` and `priority_desc()` are shortcuts for the two orders.
- `build()` returns a `RuleEngine` with the rules sorted by the chosen order.

## Errors

When a rule raises an `Exception`, the engine wraps it and stops at that rule:

- An exception from `evaluate` surfaces as `rulekit.errors.RuleEvaluationError`.
- An exception from `apply` surfaces as `rulekit.errors.RuleApplicationError`.

In both cases the original exception is kept on the `error` attribute and is also set as the cause. Both classes derive from `RuleEngineError`. The module also defines `UnknownRuleError`, but the engine itself never raises it.

Exceptions from `before_apply` and `after_apply` are not wrapped; they pass through as they are.

Rules can raise their own errors with the classes in `rulekit.errors`:

- `RuleError` is the base class.
- `RuleIoError(os_error)` is for I/O failures.
- `RuleEvalError(message)` is for failures in the rule's own logic.

## Demo

```
rulekit-demo
```

This command applies `DiscountIfHighValue` (from `rulekit.demo`) to a sample order of 150, once through `RuleEngine` and once through `RuleEngineBuilder`. It prints the hook messages, the resulting discount, and the new total.

## What it does not do

- Rules are Python classes only. There is no loader that reads rules from JSON, YAML or any other text format.
- Rules run one after another in a single thread. The engine does not run rules in parallel.