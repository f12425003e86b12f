"""Monthly bill estimate for a plan, line count and tax rate."""

import logging
from dataclasses import dataclass

from planwise.schemas.plan import Plan

logger = logging.getLogger(__name__)

MIN_LINES, MAX_LINES = 1, 10
MIN_TAX_RATE, MAX_TAX_RATE = 5, 30
DEFAULT_TAX_RATE = 15


@dataclass(frozen=True)
class BillEstimate:
    plan_id: str
    line_count: int
    tax_rate_percent: float
    base_cost: float
    tax_amount: float
    total: float

    def to_dict(self) -> dict:
        return {
            "plan_id": self.plan_id,
            "line_count": self.line_count,
            "tax_rate_percent": self.tax_rate_percent,
            "base_cost": round(self.base_cost, 2),
            "tax_amount": round(self.tax_amount, 2),
            "total": round(self.total, 2),
        }


def estimate(plan: Plan, line_count: int, tax_rate_percent: float) -> BillEstimate:
    """
    Compute base, tax and total in one go.

    base = monthly_cost * lines, tax = base * rate / 100, total = base + tax.
    """
    if not MIN_LINES <= line_count <= MAX_LINES:
        raise ValueError(f"line_count must be between {MIN_LINES} and {MAX_LINES}, got {line_count}")
    if not MIN_TAX_RATE <= tax_rate_percent <= MAX_TAX_RATE:
        raise ValueError(f"tax_rate_percent must be between {MIN_TAX_RATE} and {MAX_TAX_RATE}, got {tax_rate_percent}")

    base = plan.monthly_cost * line_count
    tax = base * tax_rate_percent / 100
    return BillEstimate(
        plan_id=plan.id,
        line_count=line_count,
        tax_rate_percent=tax_rate_percent,
        base_cost=base,
        tax_amount=tax,
        total=base + tax,
    )


class BillEstimatorState:
    """Estimator inputs. Plans are held by reference; nothing derived is cached."""

    def __init__(self):
        self.plans: list[Plan] = []
        self.selected_plan_id: str | None = None
        self.line_count: int = MIN_LINES
        self.tax_rate_percent: float = DEFAULT_TAX_RATE

    @property
    def selected_plan(self) -> Plan | None:
        return next((p for p in self.plans if p.id == self.selected_plan_id), None)

    def set_plans(self, plans: list[Plan]) -> None:
        """New candidates. Keep the selection if it survived, else default to the first plan."""
        self.plans = plans
        if not plans:
            self.selected_plan_id = None
        elif self.selected_plan is None:
            self.selected_plan_id = plans[0].id
            self.line_count = MIN_LINES

    def select(self, plan_id: str | None) -> None:
        """Select a plan by id; an id not among the candidates clears the selection."""
        if plan_id is not None and not any(p.id == plan_id for p in self.plans):
            logger.debug(f"Plan {plan_id!r} is not a current candidate, clearing selection")
            plan_id = None
        self.selected_plan_id = plan_id

    def update(self, line_count: int | None = None, tax_rate_percent: float | None = None) -> None:
        if line_count is not None:
            if not MIN_LINES <= line_count <= MAX_LINES:
                raise ValueError(f"line_count must be between {MIN_LINES} and {MAX_LINES}")
            self.line_count = line_count
        if tax_rate_percent is not None:
            if not MIN_TAX_RATE <= tax_rate_percent <= MAX_TAX_RATE:
                raise ValueError(f"tax_rate_percent must be between {MIN_TAX_RATE} and {MAX_TAX_RATE}")
            self.tax_rate_percent = tax_rate_percent

    def current(self) -> BillEstimate | None:
        plan = self.selected_plan
        if plan is None:
            return None
        return estimate(plan, self.line_count, self.tax_rate_percent)
