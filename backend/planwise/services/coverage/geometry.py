"""Hexagonal coverage zones scattered at random around a country centre.

Zone centres are sampled uniformly by *area* over a disk (radius grows with
sqrt(u)), so they do not bunch up near the middle. Longitudes are divided by
cos(latitude) so zones keep their shape away from the equator.
"""

import math
import random
import uuid
from dataclasses import dataclass, field
from enum import Enum

from planwise.services.coverage.config import zone_geometry

geo = zone_geometry


@dataclass(frozen=True)
class LatLng:
    lat: float
    lng: float


class SignalStrength(str, Enum):
    STRONG = "strong"
    MEDIUM = "medium"
    WEAK = "weak"

    @property
    def color(self) -> str:
        return SIGNAL_COLORS[self]


SIGNAL_COLORS: dict[SignalStrength, str] = {
    SignalStrength.STRONG: "#00FF00",
    SignalStrength.MEDIUM: "#FFFF00",
    SignalStrength.WEAK: "#FF0000",
}


@dataclass(frozen=True)
class CoverageZone:
    """A simulated signal area. Vertices form a closed ring; the first is not repeated."""
    provider: str
    vertices: tuple[LatLng, ...]
    strength: SignalStrength
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def to_geojson(self) -> dict:
        # GeoJSON rings are [lng, lat] and repeat the first position
        ring = [[v.lng, v.lat] for v in self.vertices]
        ring.append(ring[0])
        return {
            "type": "Feature",
            "id": self.id,
            "geometry": {"type": "Polygon", "coordinates": [ring]},
            "properties": {
                "provider": self.provider,
                "strength": self.strength.value,
                "color": self.strength.color,
            },
        }


def random_point_in_disk(center: LatLng, radius_m: float, rng: random.Random | None = None) -> LatLng:
    """Uniform-area random point within radius_m metres of center."""
    rng = rng or random
    u = rng.random()
    v = rng.random()
    w = radius_m * math.sqrt(u)
    t = 2 * math.pi * v
    dx = w * math.cos(t)   # metres east
    dy = w * math.sin(t)   # metres north
    dlat = dy / geo.sample_m_per_degree
    dlng = dx / (geo.sample_m_per_degree * math.cos(math.radians(center.lat)))
    return LatLng(lat=center.lat + dlat, lng=center.lng + dlng)


def hexagon_vertices(center: LatLng, radius_m: float, sides: int = geo.sides) -> tuple[LatLng, ...]:
    """Regular polygon around center; vertex 0 points north."""
    lat_step = radius_m / geo.polygon_m_per_degree
    lng_step = radius_m / (geo.polygon_m_per_degree * math.cos(math.radians(center.lat)))
    vertices = []
    for j in range(sides):
        angle = (j / sides) * 2 * math.pi
        vertices.append(LatLng(
            lat=center.lat + lat_step * math.cos(angle),
            lng=center.lng + lng_step * math.sin(angle),
        ))
    return tuple(vertices)


def generate_zones(
    center: LatLng,
    zoom_level: float,
    providers: list[str],
    rng: random.Random | None = None,
) -> dict[str, list[CoverageZone]]:
    """
    Generate simulated coverage zones for every provider.

    Higher zoom levels shrink both the scatter disk and the zones themselves.
    Returns {provider: [CoverageZone, ...]} with zones_per_provider zones each.
    """
    if zoom_level <= 0:
        raise ValueError(f"zoom_level must be positive, got {zoom_level}")

    rng = rng or random.Random()
    strengths = list(SignalStrength)
    sample_radius = geo.sample_radius_m / zoom_level

    zones: dict[str, list[CoverageZone]] = {}
    for provider in providers:
        provider_zones = []
        for _ in range(geo.zones_per_provider):
            zone_center = random_point_in_disk(center, sample_radius, rng)
            radius = rng.uniform(geo.min_zone_radius_m, geo.max_zone_radius_m) / zoom_level
            provider_zones.append(CoverageZone(
                provider=provider,
                vertices=hexagon_vertices(zone_center, radius),
                strength=rng.choice(strengths),
            ))
        zones[provider] = provider_zones
    return zones
