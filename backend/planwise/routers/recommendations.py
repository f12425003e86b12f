"""Recommendations router — profile submission, results and plan comparison."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from planwise.dependencies import get_session
from planwise.schemas.profile import Profile
from planwise.services.session import PlanFinderSession

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
async def get_recommendations(session: PlanFinderSession = Depends(get_session)):
    """Current session state: plans, loading flag, last error."""
    return session.to_dict()


@router.post("")
async def submit_profile(
    profile: Profile,
    session: PlanFinderSession = Depends(get_session),
):
    """Request recommendations. A newer submission supersedes this one."""
    outcome = await session.submit(profile)

    if not outcome.applied:
        raise HTTPException(status_code=409, detail="Superseded by a newer request")
    if outcome.error:
        raise HTTPException(status_code=502, detail=outcome.error)

    return {
        "generation": outcome.generation,
        "currency_symbol": session.currency_symbol,
        "plans": [p.to_wire() for p in outcome.plans],
    }


@router.post("/compare/{plan_id}")
async def toggle_comparison(
    plan_id: str,
    session: PlanFinderSession = Depends(get_session),
):
    selected = session.toggle_comparison(plan_id)
    return {"plan_id": plan_id, "selected": selected, "comparison_ids": list(session.comparison_ids)}


@router.get("/compare")
async def get_comparison(session: PlanFinderSession = Depends(get_session)):
    """Side-by-side table of the plans picked for comparison."""
    return session.comparison_table()
