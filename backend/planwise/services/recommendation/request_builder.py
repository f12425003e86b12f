"""Turns a user profile into instruction text plus a strict output schema."""

from dataclasses import dataclass

from planwise.data.countries import get_country
from planwise.data.features import FeatureCategory
from planwise.schemas.profile import Profile
from planwise.services.recommendation.config import recommendation_config

cfg = recommendation_config

_STRING = {"type": "string"}
_STRING_LIST = {"type": "array", "items": {"type": "string"}}

PLAN_SCHEMA: dict = {
    "type": "object",
    "properties": {
        "id": {**_STRING, "description": "Unique identifier 'provider-plan-name', lowercase and hyphenated, e.g. 'verizon-play-more-5g'."},
        "provider": {**_STRING, "description": "The telecom provider's name, e.g. 'Verizon'."},
        "planName": {**_STRING, "description": "The specific name of the plan, e.g. '5G Play More'."},
        "monthlyCost": {"type": "number", "description": "Monthly cost in the local currency as a number."},
        "data": {**_STRING, "description": "Data allowance, e.g. '50GB', 'Unlimited'."},
        "speed": {**_STRING, "description": "Network speed details, e.g. 'Up to 100Mbps', '5G Ultra Wideband'."},
        "contractLength": {**_STRING, "description": "Contract length, e.g. '24 months', 'No Contract'."},
        "ottServices": {**_STRING_LIST, "description": "Included streaming/media services like 'Netflix', 'Disney+'."},
        "familyBenefits": {**_STRING_LIST, "description": "Family plan benefits, e.g. 'Discount per line'."},
        "roaming": {**_STRING, "description": "International roaming details, e.g. 'Free roaming in Mexico & Canada'."},
        "devicePerks": {**_STRING, "description": "Perks related to new devices, e.g. 'Free iPhone 15 on contract'."},
        "pros": {**_STRING_LIST, "description": "2-3 key advantages of the plan."},
        "cons": {**_STRING_LIST, "description": "2-3 key disadvantages of the plan."},
    },
    "required": [
        "id", "provider", "planName", "monthlyCost", "data", "speed", "contractLength",
        "ottServices", "familyBenefits", "roaming", "devicePerks", "pros", "cons",
    ],
    "additionalProperties": False,
}

RECOMMENDATION_SCHEMA: dict = {
    "type": "array",
    "items": PLAN_SCHEMA,
}


@dataclass(frozen=True)
class RecommendationRequest:
    instruction_text: str
    output_schema: dict


def build_request(profile: Profile, available_providers: list[str]) -> RecommendationRequest:
    """Build the instruction text and output schema for one recommendation call.

    The schema is the same object for every call; only the text varies.
    """
    return RecommendationRequest(
        instruction_text=build_instruction(profile, available_providers),
        output_schema=RECOMMENDATION_SCHEMA,
    )


def build_instruction(profile: Profile, available_providers: list[str]) -> str:
    country = get_country(profile.country)
    currency = country.currency if country else None
    count = cfg.limits.plan_count

    if currency:
        currency_line = f"{currency.name} ({currency.symbol})"
        budget_line = f"Up to {currency.symbol}{_fmt_number(profile.budget)}"
        cost_rule = f"The monthlyCost must be a number in {currency.code}."
    else:
        currency_line = "Local currency"
        budget_line = f"Up to {_fmt_number(profile.budget)} (local currency)"
        cost_rule = "The monthlyCost must be a number in the local currency."

    lines = [
        "You are an expert telecom plan advisor.",
        f"Based on the following user profile, recommend exactly {count} telecom plans available in their region.",
        "Analyze the user's needs and provide a balanced view with pros and cons for each plan.",
        _provider_instruction(profile, available_providers),
        "",
        "User Profile:",
        f"- Country Code: {profile.country}",
        f"- City: {profile.city}",
        f"- Currency: {currency_line}",
        f"- Number of Lines: {profile.line_count}",
        f"- Monthly Data Usage: ~{_fmt_number(profile.data_usage_gb)} GB",
        f"- Primary Uses: {', '.join(profile.primary_uses) or 'Not specified'}",
        f"- Monthly Budget: {budget_line}",
        f"- Needs a new device: {'Yes' if profile.wants_new_device else 'No'}",
        "",
        "Desired Features & Perks:",
        _features_section(profile),
        "",
        f"Your task is to return a JSON array of exactly {count} plan recommendations that are the best fit for this user.",
        "For each plan, provide a unique 'id' in the format 'provider-plan-name' (all lowercase, hyphenated).",
        f"Give {cfg.limits.min_points}-{cfg.limits.max_points} pros and {cfg.limits.min_points}-{cfg.limits.max_points} cons per plan.",
        "Fill out all fields in the provided JSON schema and never omit a field. If a field is not applicable "
        "(e.g. 'familyBenefits' for a single-line plan), use an empty array for list fields or the text 'N/A' "
        "for text fields.",
        cost_rule,
    ]
    return "\n".join(lines)


def _provider_instruction(profile: Profile, available_providers: list[str]) -> str:
    if profile.preferred_providers:
        allowed = ", ".join(profile.preferred_providers)
        return (
            f"IMPORTANT: The user has a strong preference for the following providers. "
            f"ONLY recommend plans from this list: {allowed}. "
            f"Do not recommend plans from any other provider."
        )
    if available_providers:
        return (
            f"Recommend plans only from the major providers in the region: "
            f"{', '.join(available_providers)}."
        )
    return "Recommend plans from the major providers in the user's region."


def _features_section(profile: Profile) -> str:
    if profile.features.is_empty:
        return "  - None requested."
    rows = []
    for category in FeatureCategory:
        selected = profile.features.get(category)
        if selected:
            rows.append(f"  - {category.display_name}: {', '.join(selected)}")
    return "\n".join(rows)


def _fmt_number(value: float) -> str:
    """20.0 -> '20', 12.5 -> '12.5'."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}".rstrip("0").rstrip(".")
