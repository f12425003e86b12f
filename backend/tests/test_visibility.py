import random

import pytest

from planwise.data.countries import get_country
from planwise.services.coverage.map_surface import InMemoryMapSurface
from planwise.services.coverage.visibility import CoverageMapController


class RecordingSurface(InMemoryMapSurface):
    def __init__(self):
        super().__init__()
        self.ops: list[tuple[str, str]] = []

    def add_polygon(self, zone):
        self.ops.append(("add", zone.provider))
        super().add_polygon(zone)

    def remove_polygon(self, zone):
        self.ops.append(("remove", zone.provider))
        super().remove_polygon(zone)


@pytest.fixture
def controller():
    c = CoverageMapController(RecordingSurface(), rng=random.Random(1))
    c.select_country(get_country("US"))
    return c


def test_select_country_generates_but_shows_nothing(controller):
    assert set(controller.zones) == {"Verizon", "AT&T", "T-Mobile"}
    assert controller.visible_providers == set()
    assert controller.surface.attached() == set()
    assert controller.surface.zoom == 4


def test_toggle_shows_only_that_provider(controller):
    assert controller.toggle("Verizon") is True

    expected = {z.id for z in controller.zones["Verizon"]}
    assert controller.surface.attached() == expected


def test_double_toggle_restores_render_state(controller):
    controller.toggle("AT&T")
    before = controller.surface.attached()

    controller.toggle("Verizon")
    controller.toggle("Verizon")

    assert controller.surface.attached() == before
    assert controller.visible_providers == {"AT&T"}


def test_unknown_provider_is_ignored(controller):
    assert controller.toggle("Jio") is False
    assert controller.visible_providers == set()
    assert controller.surface.ops == []


def test_country_switch_retracts_before_adding(controller):
    controller.toggle("Verizon")
    controller.toggle("T-Mobile")
    old_ids = controller.surface.attached()
    controller.surface.ops.clear()

    controller.select_country(get_country("IN"))

    assert controller.visible_providers == set()
    assert controller.surface.attached() == set()
    assert len(controller.surface.ops) == len(old_ids) == 10
    assert all(op == "remove" for op, _ in controller.surface.ops)

    controller.toggle("Jio")
    first_add = controller.surface.ops.index(("add", "Jio"))
    assert all(op == "remove" for op, _ in controller.surface.ops[:first_add])
    assert controller.surface.attached() == {z.id for z in controller.zones["Jio"]}


def test_country_switch_regenerates_zones(controller):
    us_ids = {z.id for zones in controller.zones.values() for z in zones}
    controller.select_country(get_country("US"))
    new_ids = {z.id for zones in controller.zones.values() for z in zones}
    assert us_ids.isdisjoint(new_ids)


def test_new_surface_gets_fresh_zones_for_visible_providers(controller):
    controller.toggle("AT&T")
    old_surface = controller.surface
    old_ids = old_surface.attached()

    new_surface = InMemoryMapSurface()
    controller.attach_surface(new_surface)

    assert old_surface.attached() == set()
    assert new_surface.attached() == {z.id for z in controller.zones["AT&T"]}
    assert new_surface.attached().isdisjoint(old_ids)
    assert new_surface.center.lat == pytest.approx(37.0902)


def test_overlay_geojson(controller):
    controller.toggle("T-Mobile")
    overlay = controller.surface.to_geojson()

    assert overlay["type"] == "FeatureCollection"
    assert len(overlay["features"]) == 5
    assert {f["properties"]["provider"] for f in overlay["features"]} == {"T-Mobile"}
