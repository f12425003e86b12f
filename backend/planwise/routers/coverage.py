"""Coverage map router — simulated provider zones per country."""

from fastapi import APIRouter, Depends, HTTPException

from planwise.data.countries import get_country
from planwise.dependencies import get_coverage_map
from planwise.services.coverage.visibility import CoverageMapController

router = APIRouter()


def _state(controller: CoverageMapController) -> dict:
    country = controller.country
    surface = controller.surface
    return {
        "country": country.code if country else None,
        "center": {"lat": surface.center.lat, "lng": surface.center.lng} if surface.center else None,
        "zoom": surface.zoom,
        "providers": list(controller.zones),
        "visible_providers": sorted(controller.visible_providers),
        "overlay": surface.to_geojson(),
    }


@router.get("")
async def get_coverage(controller: CoverageMapController = Depends(get_coverage_map)):
    return _state(controller)


@router.put("/country/{code}")
async def select_country(
    code: str,
    controller: CoverageMapController = Depends(get_coverage_map),
):
    """Switch country: clears visible providers and regenerates every zone."""
    country = get_country(code)
    if not country:
        raise HTTPException(status_code=404, detail=f"Unknown country '{code}'")
    controller.select_country(country)
    return _state(controller)


@router.post("/providers/{provider}/toggle")
async def toggle_provider(
    provider: str,
    controller: CoverageMapController = Depends(get_coverage_map),
):
    controller.toggle(provider)
    return _state(controller)
