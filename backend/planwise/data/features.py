"""Fixed option sets offered by the profile form."""

from enum import Enum


class FeatureCategory(str, Enum):
    OTT = "ott"
    CONNECTIVITY = "connectivity"
    FAMILY = "family"
    DEVICE = "device"

    @property
    def display_name(self) -> str:
        return CATEGORY_NAMES[self]

    @property
    def options(self) -> tuple[str, ...]:
        return FEATURE_OPTIONS[self]


CATEGORY_NAMES: dict[FeatureCategory, str] = {
    FeatureCategory.OTT: "OTT Services",
    FeatureCategory.CONNECTIVITY: "Connectivity",
    FeatureCategory.FAMILY: "Family Perks",
    FeatureCategory.DEVICE: "Device Perks",
}

FEATURE_OPTIONS: dict[FeatureCategory, tuple[str, ...]] = {
    FeatureCategory.OTT: ("Netflix", "Disney+", "Spotify", "YouTube Premium", "Max"),
    FeatureCategory.CONNECTIVITY: ("5G Access", "Mobile Hotspot", "International Roaming"),
    FeatureCategory.FAMILY: ("Multi-line Discount", "Shared Data Pool", "Parental Controls"),
    FeatureCategory.DEVICE: ("Device Insurance", "Early Upgrade", "Trade-in Offers"),
}

PRIMARY_USES: tuple[str, ...] = (
    "Streaming Video/Music",
    "Gaming",
    "Social Media",
    "Work/Hotspot",
    "General Browsing",
)


def feature_catalog() -> dict:
    """Option sets in the shape the form renders them."""
    return {
        "primary_uses": list(PRIMARY_USES),
        "categories": [
            {"key": c.value, "name": c.display_name, "options": list(c.options)}
            for c in FeatureCategory
        ],
    }
