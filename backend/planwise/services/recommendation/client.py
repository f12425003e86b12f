"""Recommendation client — one schema-constrained LLM call, validated into Plan records.

The generator is untrusted: this module only checks the *shape* of what comes
back. Whether the plans are sensible is the generator's problem; no sorting,
de-duplication or business checks happen here.
"""

import asyncio
import json
import logging

from pydantic import ValidationError

from planwise.config import settings
from planwise.schemas.plan import Plan
from planwise.schemas.profile import Profile
from planwise.services.llm_client import llm_client
from planwise.services.recommendation.config import recommendation_config
from planwise.services.recommendation.errors import (
    EmptyResponse,
    EmptyResultSet,
    RecommendationError,
    SchemaViolation,
    TransportFailure,
)
from planwise.services.recommendation.prompts import load_prompt
from planwise.services.recommendation.request_builder import build_request

logger = logging.getLogger(__name__)

cfg = recommendation_config

# Load advisor guide once at module level
_ADVISOR_GUIDE = load_prompt("telecom_advisor_guide.md")


class RecommendationClient:
    """Profile in, list of Plans out, or exactly one RecommendationError."""

    def __init__(self, llm=None, timeout_seconds: float | None = None):
        self._llm = llm or llm_client
        self._timeout = timeout_seconds if timeout_seconds is not None else settings.recommendation_timeout_seconds

    async def fetch(self, profile: Profile, available_providers: list[str]) -> list[Plan]:
        """Request recommendations for a profile.

        Raises:
            EmptyResponse, SchemaViolation, EmptyResultSet, TransportFailure
        """
        request = build_request(profile, available_providers)

        try:
            raw = await asyncio.wait_for(
                self._llm.complete(
                    system=_ADVISOR_GUIDE,
                    user=request.instruction_text,
                    response_schema=request.output_schema,
                    schema_name=cfg.llm.schema_name,
                    max_tokens=cfg.llm.max_tokens,
                    temperature=cfg.llm.temperature,
                ),
                timeout=self._timeout,
            )
        except asyncio.TimeoutError:
            logger.error(f"Recommendation call timed out after {self._timeout:.0f}s ({profile.country}/{profile.city})")
            raise TransportFailure(f"The request timed out after {self._timeout:.0f} seconds.")
        except Exception as e:
            logger.error(f"Recommendation call failed ({profile.country}/{profile.city}): {e}")
            raise TransportFailure(str(e)) from e

        try:
            plans = parse_plans(raw)
        except RecommendationError as e:
            logger.warning(f"Recommendation response rejected [{e.kind}]: {e.detail}\nRaw: {(raw or '')[:500]}")
            raise

        logger.info(f"Received {len(plans)} plan recommendations for {profile.country}/{profile.city}")
        return plans


def parse_plans(raw: str | None) -> list[Plan]:
    """Validate raw generator text into Plans, classifying every failure."""
    text = _strip_fences(raw or "")
    if not text:
        raise EmptyResponse(
            "Received an empty response from the AI. "
            "The model may not have recommendations for the selected region."
        )

    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as e:
        raise SchemaViolation(f"AI response was not valid JSON ({e.msg}).") from e
    except RecursionError as e:
        raise SchemaViolation("AI response was nested too deeply to be a list of plans.") from e

    if not isinstance(parsed, list):
        raise SchemaViolation(
            f"AI response was not a list of plans (got {type(parsed).__name__})."
        )
    if not parsed:
        raise EmptyResultSet("AI response was not a valid list of plans. Please try adjusting your criteria.")

    plans = []
    for i, item in enumerate(parsed):
        if not isinstance(item, dict):
            raise SchemaViolation(f"Plan #{i + 1} is not an object.")
        try:
            plans.append(Plan.model_validate(item))
        except ValidationError as e:
            fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
            raise SchemaViolation(f"Plan #{i + 1} does not match the plan schema ({fields}).") from e
    return plans


def _strip_fences(text: str) -> str:
    """Clean markdown fencing if present."""
    text = text.strip()
    if text.startswith("```"):
        lines = [l for l in text.split("\n") if not l.strip().startswith("```")]
        text = "\n".join(lines).strip()
    return text


# Singleton
recommendation_client = RecommendationClient()
