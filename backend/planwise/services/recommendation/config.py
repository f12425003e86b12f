"""Recommendation engine configuration — single source for all thresholds."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class LLMParams:
    """Parameters for the recommendation LLM call."""
    max_tokens: int = 4000
    temperature: float = 0.2
    schema_name: str = "telecom_plan_recommendations"


@dataclass(frozen=True)
class RecommendationLimits:
    """What we ask the generator for."""
    plan_count: int = 3      # plans per request
    min_points: int = 2      # pros/cons per plan
    max_points: int = 3


@dataclass(frozen=True)
class RecommendationConfig:
    llm: LLMParams = field(default_factory=LLMParams)
    limits: RecommendationLimits = field(default_factory=RecommendationLimits)


recommendation_config = RecommendationConfig()
