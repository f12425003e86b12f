"""Reference data router — countries, currencies, providers and form options."""

from fastapi import APIRouter, HTTPException, Query

from planwise.data.countries import COUNTRIES, get_country, search_countries
from planwise.data.features import feature_catalog

router = APIRouter()


@router.get("/countries")
async def list_countries():
    return [c.to_dict() for c in COUNTRIES]


@router.get("/countries/search")
async def find_countries(q: str = Query("", max_length=64)):
    """Autocomplete: countries whose name contains q."""
    return [c.to_dict() for c in search_countries(q)]


@router.get("/countries/{code}")
async def get_country_detail(code: str):
    country = get_country(code)
    if not country:
        raise HTTPException(status_code=404, detail=f"Unknown country '{code}'")
    return country.to_dict()


@router.get("/features")
async def get_features():
    return feature_catalog()
