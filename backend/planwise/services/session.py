"""Plan finder session: the single user's state between form, results and derived views.

Each submission gets a generation number. Only the latest generation may
write plans, errors or the loading flag, so a slow response that was
overtaken by a newer submission is dropped on arrival.
"""

import logging
from dataclasses import dataclass

from planwise.data.countries import DEFAULT_CURRENCY_SYMBOL, get_country
from planwise.schemas.plan import Plan
from planwise.schemas.profile import Profile
from planwise.services.bill_estimator import BillEstimatorState
from planwise.services.comparison import ComparisonRow, column_headers, project
from planwise.services.recommendation.client import recommendation_client
from planwise.services.recommendation.errors import RecommendationError

logger = logging.getLogger(__name__)


@dataclass
class SubmissionOutcome:
    generation: int
    applied: bool                 # False when a newer submission took over
    plans: list[Plan]
    error: str | None = None


class PlanFinderSession:
    def __init__(self, client=None):
        self._client = client or recommendation_client
        self._generation = 0

        self.profile: Profile | None = None
        self.plans: list[Plan] = []
        self.comparison_ids: list[str] = []
        self.loading = False
        self.error: str | None = None
        self.last_error_kind: str | None = None
        self.currency_symbol = DEFAULT_CURRENCY_SYMBOL
        self.estimator = BillEstimatorState()

    @property
    def generation(self) -> int:
        return self._generation

    async def submit(self, profile: Profile) -> SubmissionOutcome:
        """Request recommendations for a profile, superseding any request in flight."""
        self._generation += 1
        generation = self._generation

        country = get_country(profile.country)
        providers = list(country.providers) if country else []

        self.profile = profile
        self.loading = True
        self.error = None
        self.last_error_kind = None
        self.currency_symbol = country.currency.symbol if country else DEFAULT_CURRENCY_SYMBOL
        self._set_plans([])

        plans: list[Plan] = []
        error: RecommendationError | None = None
        try:
            plans = await self._client.fetch(profile, providers)
        except RecommendationError as e:
            error = e
        finally:
            if generation == self._generation:
                self.loading = False

        if generation != self._generation:
            logger.info(f"Discarding superseded recommendation result (gen {generation}, latest {self._generation})")
            return SubmissionOutcome(generation=generation, applied=False, plans=[])

        if error is not None:
            self.error = error.user_message
            self.last_error_kind = error.kind
            logger.warning(f"Recommendations failed [{error.kind}]: {error.detail}")
            return SubmissionOutcome(generation=generation, applied=True, plans=[], error=self.error)

        self._set_plans(plans)
        return SubmissionOutcome(generation=generation, applied=True, plans=plans)

    def _set_plans(self, plans: list[Plan]) -> None:
        self.plans = plans
        self.comparison_ids = []
        self.estimator.set_plans(plans)

    # ---- Comparison selection ----

    def toggle_comparison(self, plan_id: str) -> bool:
        """Add/remove a plan from the comparison. Unknown ids are ignored. Returns membership."""
        if not any(p.id == plan_id for p in self.plans):
            logger.debug(f"Ignoring comparison toggle for unknown plan {plan_id!r}")
            return False
        if plan_id in self.comparison_ids:
            self.comparison_ids.remove(plan_id)
            return False
        self.comparison_ids.append(plan_id)
        return True

    @property
    def comparison_plans(self) -> list[Plan]:
        by_id = {p.id: p for p in self.plans}
        return [by_id[i] for i in self.comparison_ids if i in by_id]

    def comparison_rows(self) -> list[ComparisonRow]:
        return project(self.comparison_plans, self.currency_symbol)

    def comparison_table(self) -> dict:
        plans = self.comparison_plans
        return {
            "columns": column_headers(plans),
            "rows": [r.to_dict() for r in project(plans, self.currency_symbol)],
        }

    def to_dict(self) -> dict:
        return {
            "generation": self._generation,
            "loading": self.loading,
            "error": self.error,
            "currency_symbol": self.currency_symbol,
            "plans": [p.to_wire() for p in self.plans],
            "comparison_ids": list(self.comparison_ids),
        }


# Singleton
plan_finder_session = PlanFinderSession()
