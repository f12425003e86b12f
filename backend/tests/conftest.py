import asyncio
import json

import pytest

from planwise.schemas.plan import Plan
from planwise.schemas.profile import Profile


def make_plan_dict(provider: str = "Jio", name: str = "Unlimited 599", cost: float = 599, **overrides) -> dict:
    plan = {
        "id": f"{provider}-{name}".lower().replace(" ", "-"),
        "provider": provider,
        "planName": name,
        "monthlyCost": cost,
        "data": "2GB/day",
        "speed": "5G",
        "contractLength": "No Contract",
        "ottServices": ["JioCinema"],
        "familyBenefits": [],
        "roaming": "N/A",
        "devicePerks": "N/A",
        "pros": ["Cheap", "Wide 5G coverage"],
        "cons": ["Daily data cap", "Crowded network"],
    }
    plan.update(overrides)
    return plan


class FakeLLM:
    """Stands in for LLMClient: returns canned text or raises."""

    def __init__(self, text: str = "", error: Exception | None = None, delay: float = 0):
        self.text = text
        self.error = error
        self.delay = delay
        self.calls: list[dict] = []

    async def complete(self, system: str, user: str, **kwargs) -> str:
        self.calls.append({"system": system, "user": user, **kwargs})
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise self.error
        return self.text


class GatedClient:
    """Recommendation client whose calls finish only when the test releases them."""

    def __init__(self):
        self.pending: list[asyncio.Future] = []

    async def fetch(self, profile, providers):
        future = asyncio.get_running_loop().create_future()
        self.pending.append(future)
        return await future


@pytest.fixture
def make_profile():
    def _make(**overrides) -> Profile:
        data = {
            "country": "IN",
            "city": "Mumbai",
            "line_count": 2,
            "data_usage_gb": 20,
            "primary_uses": ["Streaming Video/Music", "Gaming"],
            "budget": 500,
            "wants_new_device": False,
        }
        data.update(overrides)
        return Profile(**data)
    return _make


@pytest.fixture
def plan_dicts() -> list[dict]:
    return [
        make_plan_dict("Jio", "Unlimited 599", 599),
        make_plan_dict("Airtel", "Infinity 699", 699),
        make_plan_dict("Vodafone Idea", "Hero 499", 499),
    ]


@pytest.fixture
def plans(plan_dicts) -> list[Plan]:
    return [Plan.model_validate(d) for d in plan_dicts]


@pytest.fixture
def plans_json(plan_dicts) -> str:
    return json.dumps(plan_dicts)
