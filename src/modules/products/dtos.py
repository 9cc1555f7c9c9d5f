"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2. Request bodies
reach these only after the route's rule set passed, so the validators here
cover what the rules do not: coercion to ``Decimal``/``bool`` and the
column precision of ``price``.

- ``CreateProductDTO``: input for product creation.
- ``ReplaceProductDTO``: input for a full product replacement.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from modules.core.validation import as_string

PRICE_QUANTUM = Decimal("0.01")
PRICE_MAX = Decimal("99999999.99")
NAME_MAX_LENGTH = 255


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    Unknown keys (``availability``, ``id`` ...) are ignored: a new product
    always starts available.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    price: Decimal

    @field_validator("name", mode="before")
    @classmethod
    def name_as_text(cls, v: Any) -> str:
        return v if isinstance(v, str) else as_string(v)

    @field_validator("price")
    @classmethod
    def price_must_fit_column(cls, v: Decimal) -> Decimal:
        if v > PRICE_MAX:
            raise ValueError(f"Price must not exceed {PRICE_MAX}.")
        # Rounded to the column scale before the sign check: 0.001 is stored as 0.00.
        v = v.quantize(PRICE_QUANTUM)
        if v <= 0:
            raise ValueError("Price must be greater than zero.")
        return v


class ReplaceProductDTO(CreateProductDTO):
    """Immutable DTO for full product replacement (all fields required)."""

    availability: bool
