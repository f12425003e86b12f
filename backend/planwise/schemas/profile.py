from pydantic import BaseModel, Field, ValidationInfo, field_validator

from planwise.data.features import FeatureCategory


def _unique(values) -> tuple[str, ...]:
    """De-duplicate while keeping first-seen order."""
    seen: list[str] = []
    for v in values:
        if v not in seen:
            seen.append(v)
    return tuple(seen)


class FeatureSelections(BaseModel):
    """Selected options for each of the four fixed feature categories."""

    ott: tuple[str, ...] = ()
    connectivity: tuple[str, ...] = ()
    family: tuple[str, ...] = ()
    device: tuple[str, ...] = ()

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("ott", "connectivity", "family", "device")
    @classmethod
    def _known_options(cls, values: tuple[str, ...], info: ValidationInfo) -> tuple[str, ...]:
        category = FeatureCategory(info.field_name)
        unknown = [v for v in values if v not in category.options]
        if unknown:
            raise ValueError(f"Unknown {category.value} option(s): {', '.join(unknown)}")
        return _unique(values)

    def get(self, category: FeatureCategory) -> tuple[str, ...]:
        """Selections for a category, in the category's option order."""
        selected = getattr(self, category.value)
        return tuple(o for o in category.options if o in selected)

    @property
    def is_empty(self) -> bool:
        return not any(getattr(self, c.value) for c in FeatureCategory)


class Profile(BaseModel):
    """What the user told us: location, usage, budget and wanted perks."""

    country: str = Field(..., min_length=2, max_length=2)
    city: str
    line_count: int = Field(1, ge=1)
    data_usage_gb: float = Field(..., ge=0)
    primary_uses: tuple[str, ...] = ()
    budget: float = Field(..., ge=0)
    wants_new_device: bool = False
    features: FeatureSelections = Field(default_factory=FeatureSelections)
    preferred_providers: tuple[str, ...] = ()

    model_config = {"frozen": True}

    @field_validator("country")
    @classmethod
    def _upper_country(cls, value: str) -> str:
        return value.upper()

    @field_validator("primary_uses", "preferred_providers")
    @classmethod
    def _dedupe(cls, values: tuple[str, ...]) -> tuple[str, ...]:
        return _unique(values)
