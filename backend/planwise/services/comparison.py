"""Side-by-side feature table for the plans picked for comparison."""

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from planwise.schemas.plan import Plan


def format_cost(value: float, currency_symbol: str) -> str:
    """50 -> '$50', 49.5 -> '$49.50'."""
    if float(value).is_integer():
        return f"{currency_symbol}{int(value)}"
    return f"{currency_symbol}{value:.2f}"


def _text(value: str) -> str:
    return value if value and value.strip() else "N/A"


def _joined(values: list[str]) -> str:
    return ", ".join(values) or "None"


def _bullets(values: list[str]) -> str:
    return "\n".join(f"• {v}" for v in values)


class RowKind(str, Enum):
    MONTHLY_COST = "monthly_cost"
    DATA = "data"
    SPEED = "speed"
    CONTRACT = "contract"
    OTT_SERVICES = "ott_services"
    FAMILY_BENEFITS = "family_benefits"
    ROAMING = "roaming"
    DEVICE_PERKS = "device_perks"
    PROS = "pros"


@dataclass(frozen=True)
class RowSpec:
    kind: RowKind
    label: str
    format: Callable[[Plan, str], str]


# Fixed order; identical for every table
ROW_SPECS: tuple[RowSpec, ...] = (
    RowSpec(RowKind.MONTHLY_COST, "Monthly Cost", lambda p, sym: format_cost(p.monthly_cost, sym)),
    RowSpec(RowKind.DATA, "Data Allowance", lambda p, sym: _text(p.data)),
    RowSpec(RowKind.SPEED, "Speed", lambda p, sym: _text(p.speed)),
    RowSpec(RowKind.CONTRACT, "Contract", lambda p, sym: _text(p.contract_length)),
    RowSpec(RowKind.OTT_SERVICES, "OTT Services", lambda p, sym: _joined(p.ott_services)),
    RowSpec(RowKind.FAMILY_BENEFITS, "Family Benefits", lambda p, sym: _joined(p.family_benefits)),
    RowSpec(RowKind.ROAMING, "Roaming", lambda p, sym: _text(p.roaming)),
    RowSpec(RowKind.DEVICE_PERKS, "Device Perks", lambda p, sym: _text(p.device_perks)),
    RowSpec(RowKind.PROS, "Pros", lambda p, sym: _bullets(p.pros)),
)


@dataclass(frozen=True)
class ComparisonRow:
    kind: RowKind
    label: str
    values: tuple[str, ...]   # one per plan, in plan order

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "label": self.label, "values": list(self.values)}


def project(plans: list[Plan], currency_symbol: str = "$") -> list[ComparisonRow]:
    """Project plans onto the fixed feature rows. No plans, no table."""
    if not plans:
        return []
    return [
        ComparisonRow(
            kind=spec.kind,
            label=spec.label,
            values=tuple(spec.format(plan, currency_symbol) for plan in plans),
        )
        for spec in ROW_SPECS
    ]


def column_headers(plans: list[Plan]) -> list[str]:
    return [f"{p.provider} - {p.plan_name}" for p in plans]
