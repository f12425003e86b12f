from conftest import make_plan_dict
from planwise.schemas.plan import Plan
from planwise.services.comparison import RowKind, column_headers, format_cost, project

LABELS = [
    "Monthly Cost",
    "Data Allowance",
    "Speed",
    "Contract",
    "OTT Services",
    "Family Benefits",
    "Roaming",
    "Device Perks",
]


def test_no_plans_no_table():
    assert project([]) == []


def test_rows_keep_fixed_order_for_every_column():
    a = Plan.model_validate(make_plan_dict("Verizon", "Play More", 80, ottServices=["Disney+", "Max"]))
    b = Plan.model_validate(make_plan_dict("AT&T", "Unlimited Starter", 65.5, speed=" "))

    rows = project([a, b], "$")

    assert [r.label for r in rows[:8]] == LABELS
    assert rows[-1].kind is RowKind.PROS
    assert all(len(r.values) == 2 for r in rows)

    by_kind = {r.kind: r.values for r in rows}
    assert by_kind[RowKind.MONTHLY_COST] == ("$80", "$65.50")
    assert by_kind[RowKind.OTT_SERVICES] == ("Disney+, Max", "JioCinema")
    assert by_kind[RowKind.FAMILY_BENEFITS] == ("None", "None")
    assert by_kind[RowKind.SPEED] == ("5G", "N/A")
    assert by_kind[RowKind.PROS][0] == "• Cheap\n• Wide 5G coverage"


def test_row_order_does_not_depend_on_content():
    sparse = Plan.model_validate(make_plan_dict(ottServices=[], pros=[], roaming=""))
    full = Plan.model_validate(make_plan_dict("Airtel", "Infinity", 999))

    assert [r.kind for r in project([sparse])] == [r.kind for r in project([full])]


def test_cost_formatting():
    assert format_cost(50, "$") == "$50"
    assert format_cost(49.5, "₹") == "₹49.50"


def test_column_headers():
    plans = [Plan.model_validate(make_plan_dict("EE", "Essentials", 20))]
    assert column_headers(plans) == ["EE - Essentials"]
