"""Map render surface: the add/remove polygon boundary the coverage map draws on."""

import logging
from typing import Protocol

from planwise.services.coverage.geometry import CoverageZone, LatLng

logger = logging.getLogger(__name__)


class MapSurface(Protocol):
    center: LatLng | None
    zoom: float | None

    def add_polygon(self, zone: CoverageZone) -> None: ...

    def remove_polygon(self, zone: CoverageZone) -> None: ...

    def set_view(self, center: LatLng, zoom: float) -> None: ...

    def attached(self) -> set[str]:
        """Ids of zones currently drawn."""
        ...

    def to_geojson(self) -> dict:
        """Drawn zones as a GeoJSON FeatureCollection."""
        ...


class InMemoryMapSurface:
    """Surface that remembers what is drawn and hands it to the frontend as GeoJSON."""

    def __init__(self):
        self._zones: dict[str, CoverageZone] = {}
        self.center: LatLng | None = None
        self.zoom: float | None = None

    def add_polygon(self, zone: CoverageZone) -> None:
        self._zones[zone.id] = zone

    def remove_polygon(self, zone: CoverageZone) -> None:
        self._zones.pop(zone.id, None)

    def set_view(self, center: LatLng, zoom: float) -> None:
        self.center = center
        self.zoom = zoom

    def attached(self) -> set[str]:
        return set(self._zones)

    def to_geojson(self) -> dict:
        return {
            "type": "FeatureCollection",
            "features": [z.to_geojson() for z in self._zones.values()],
        }
