"""Coverage zone geometry constants."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ZoneGeometry:
    zones_per_provider: int = 5
    sample_radius_m: float = 500_000     # divided by zoom level
    min_zone_radius_m: float = 20_000    # divided by zoom level
    max_zone_radius_m: float = 100_000
    sides: int = 6

    # Metres per degree. Centre sampling and polygon drawing use slightly
    # different figures; both are kept as they are.
    sample_m_per_degree: float = 111_300
    polygon_m_per_degree: float = 111_111


zone_geometry = ZoneGeometry()
