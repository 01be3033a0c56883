"""Producer Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - ProducerIn.cpf_cnpj: 11-14 chars
    - producer_name, farm_name, city, state: non-empty, not whitespace-only
    - Area fields are finite numbers; numeric strings ("100") are coerced, booleans rejected
    - crops is a list of strings (may be empty)
    - JSON uses camelCase aliases, Python uses snake_case attributes

Design Decisions:
    - Shape checks only; the cross-field area rule lives in core/area_rules.py
    - Submitted values are echoed back as-is (no stripping or normalization)
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProducerBase(_CamelModel):
    """Fields shared by request and response bodies."""
    cpf_cnpj: str = Field(min_length=11, max_length=14)
    producer_name: str = Field(min_length=1)
    farm_name: str = Field(min_length=1)
    city: str = Field(min_length=1)
    state: str = Field(min_length=1)
    total_area: float = Field(allow_inf_nan=False)
    cultivable_area: float = Field(allow_inf_nan=False)
    vegetation_area: float = Field(allow_inf_nan=False)
    crops: list[str]

    @field_validator(
        "total_area", "cultivable_area", "vegetation_area", mode="before",
    )
    @classmethod
    def reject_bool(cls, v):
        if isinstance(v, bool):
            raise ValueError("must be a number, not a boolean")
        return v


class ProducerIn(ProducerBase):
    """POST/PUT body — every field required, full replacement on PUT."""

    @field_validator("producer_name", "farm_name", "city", "state")
    @classmethod
    def reject_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty or whitespace")
        return v


class ProducerOut(ProducerBase):
    """Producer row as returned by the API."""
    model_config = ConfigDict(from_attributes=True)

    id: int


class DashboardStats(_CamelModel):
    """Aggregate counters for GET /dashboard."""
    total_farms: int
    total_area: float
