"""Bill estimator router."""

from fastapi import APIRouter, Depends

from planwise.dependencies import get_session
from planwise.schemas.estimator import EstimatorUpdate
from planwise.services.session import PlanFinderSession

router = APIRouter()


def _state(session: PlanFinderSession) -> dict:
    est = session.estimator
    current = est.current()
    return {
        "selected_plan_id": est.selected_plan_id,
        "line_count": est.line_count,
        "tax_rate_percent": est.tax_rate_percent,
        "currency_symbol": session.currency_symbol,
        "estimate": current.to_dict() if current else None,
    }


@router.get("")
async def get_estimate(session: PlanFinderSession = Depends(get_session)):
    return _state(session)


@router.put("")
async def update_estimate(
    req: EstimatorUpdate,
    session: PlanFinderSession = Depends(get_session),
):
    """Change plan / lines / tax rate; the estimate is recomputed in full."""
    if "plan_id" in req.model_fields_set:
        session.estimator.select(req.plan_id)
    session.estimator.update(line_count=req.line_count, tax_rate_percent=req.tax_rate_percent)
    return _state(session)
