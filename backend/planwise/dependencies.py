"""Dependency providers for routers, overridable in tests."""

from planwise.data.countries import DEFAULT_COUNTRY
from planwise.services.coverage.visibility import CoverageMapController, coverage_map
from planwise.services.session import PlanFinderSession, plan_finder_session
from planwise.services.speed_test import SpeedTest, speed_test


def get_session() -> PlanFinderSession:
    return plan_finder_session


def get_coverage_map() -> CoverageMapController:
    if coverage_map.country is None:
        coverage_map.select_country(DEFAULT_COUNTRY)
    return coverage_map


def get_speed_test() -> SpeedTest:
    return speed_test
