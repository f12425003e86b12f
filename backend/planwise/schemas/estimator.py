from pydantic import BaseModel, Field


class EstimatorUpdate(BaseModel):
    plan_id: str | None = None
    line_count: int | None = Field(None, ge=1, le=10)
    tax_rate_percent: float | None = Field(None, ge=5, le=30)
