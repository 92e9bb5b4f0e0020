"""A small order-discount example driven by the rule engine."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Optional, Sequence

from rulekit.builder import RuleEngineBuilder
from rulekit.engine import RuleEngine
from rulekit.traits import Rule


def _fmt(value: float) -> str:
    return f"{value:.0f}" if value.is_integer() else repr(value)


@dataclass
class Order:
    """An order with a running total and accumulated discount."""

    total: float
    discount: float = 0.0


class DiscountIfHighValue(Rule):
    """Gives a ten percent discount on orders above 100."""

    def name(self) -> str:
        return "DiscountIfHighValue"

    def priority(self) -> int:
        return 1

    def evaluate(self, ctx: Order) -> bool:
        return ctx.total > 100.0

    def apply(self, ctx: Order) -> None:
        discount = ctx.total * 0.10
        ctx.discount += discount
        ctx.total -= discount

    def before_apply(self, ctx: Order) -> None:
        print(f"Checking order total: {_fmt(ctx.total)}")

    def after_apply(self, ctx: Order) -> None:
        print(f"Applied discount, new total discount: {_fmt(ctx.discount)}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the discount example with a plain engine and with the builder."""
    argparse.ArgumentParser(description="Apply a discount rule to sample orders.").parse_args(argv)

    rules = [DiscountIfHighValue()]

    order = Order(total=150.0)
    RuleEngine(rules).evaluate_all(order)
    print(f"Discount after RuleEngine: {order.discount:.2f}")

    order2 = Order(total=150.0)
    engine = RuleEngineBuilder().with_rules(rules).priority_asc().build()
    engine.evaluate_all(order2)
    print(f"Discount after RuleEngineBuilder: {order2.discount:.2f}")
    print(f"Total after RuleEngineBuilder: {order2.total:.2f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())