from pydantic import BaseModel, Field


class Plan(BaseModel):
    """One recommended telecom plan, exactly as the generator returned it.

    Validation is strict: a cost given as a string or boolean, or a list
    holding non-strings, is rejected rather than coerced. NaN and Infinity
    costs are rejected too since they cannot be sent back out as JSON.
    """

    id: str
    provider: str
    plan_name: str = Field(alias="planName")
    monthly_cost: float = Field(alias="monthlyCost", allow_inf_nan=False)
    data: str
    speed: str
    contract_length: str = Field(alias="contractLength")
    ott_services: list[str] = Field(alias="ottServices")
    family_benefits: list[str] = Field(alias="familyBenefits")
    roaming: str
    device_perks: str = Field(alias="devicePerks")
    pros: list[str]
    cons: list[str]

    model_config = {"frozen": True, "strict": True, "populate_by_name": True, "extra": "ignore"}

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)
