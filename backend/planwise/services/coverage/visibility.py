"""Controls which providers' coverage zones are drawn, and for which country.

Generation and visibility are separate: zones are generated once per
country/surface, and toggling a provider only attaches or detaches polygons
already generated. Rendering is a set difference against what the surface
currently holds, so repeated renders are no-ops.
"""

import logging
import random

from planwise.data.countries import Country
from planwise.services.coverage.geometry import CoverageZone, LatLng, generate_zones
from planwise.services.coverage.map_surface import InMemoryMapSurface, MapSurface

logger = logging.getLogger(__name__)


class CoverageMapController:
    """Owns the generated zones for one country and the visible-provider set."""

    def __init__(self, surface: MapSurface, rng: random.Random | None = None):
        self._surface = surface
        self._rng = rng
        self._country: Country | None = None
        self._zones: dict[str, list[CoverageZone]] = {}
        self._visible: set[str] = set()

    @property
    def surface(self) -> MapSurface:
        return self._surface

    @property
    def country(self) -> Country | None:
        return self._country

    @property
    def zones(self) -> dict[str, list[CoverageZone]]:
        return self._zones

    @property
    def visible_providers(self) -> set[str]:
        return set(self._visible)

    def select_country(self, country: Country) -> None:
        """Switch country: retract everything, reset visibility, regenerate."""
        self._retract_all()
        self._visible.clear()
        self._country = country
        self._surface.set_view(LatLng(country.lat, country.lng), country.zoom)
        self._regenerate()
        logger.info(f"Coverage map switched to {country.code}: {len(self._zones)} providers")

    def attach_surface(self, surface: MapSurface) -> None:
        """Move to a new surface. Zones are regenerated, visibility is kept."""
        self._retract_all()
        self._surface = surface
        if self._country:
            self._surface.set_view(LatLng(self._country.lat, self._country.lng), self._country.zoom)
            self._regenerate()
            self._render()

    def toggle(self, provider: str) -> bool:
        """Flip a provider's visibility. Returns the new state.

        Providers without generated zones are ignored (nothing to show).
        """
        if provider not in self._zones:
            logger.debug(f"Ignoring toggle for unknown provider {provider!r}")
            return False
        if provider in self._visible:
            self._visible.discard(provider)
        else:
            self._visible.add(provider)
        self._render()
        return provider in self._visible

    def _regenerate(self) -> None:
        country = self._country
        self._zones = generate_zones(
            LatLng(country.lat, country.lng),
            country.zoom,
            list(country.providers),
            rng=self._rng,
        )

    def _render(self) -> None:
        attached = self._surface.attached()
        for provider, zones in self._zones.items():
            show = provider in self._visible
            for zone in zones:
                if show and zone.id not in attached:
                    self._surface.add_polygon(zone)
                elif not show and zone.id in attached:
                    self._surface.remove_polygon(zone)

    def _retract_all(self) -> None:
        attached = self._surface.attached()
        for zones in self._zones.values():
            for zone in zones:
                if zone.id in attached:
                    self._surface.remove_polygon(zone)


# Singleton
coverage_map = CoverageMapController(InMemoryMapSurface())
