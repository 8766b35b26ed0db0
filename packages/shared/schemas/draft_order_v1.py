"""Shared draft order request/response schema (v1).

The microsite posts these payloads as-is, so field names (including the
camelCase codes) must stay backwards compatible once shipped.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool


class GarmentConfigurationV1(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Pricing fields. Matched case-insensitively.
    length: str
    sleeve: str
    style: str
    collar: str

    # Descriptive only, carried through verbatim.
    hem: str = ""
    cuff: str = ""
    arms_slits: str = ""
    color: str = ""


class DraftOrderRequestV1(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    diy_code: str = Field(..., alias="diyCode", min_length=1)
    wxyz_code: str = Field(..., alias="wxyzCode")
    customer_name: str | None = None
    customer_email: str | None = None
    configuration: GarmentConfigurationV1
    quantities: dict[str, Annotated[int, Field(ge=0)]]
    total_pieces: int | None = Field(default=None, ge=0)
    notes: str | None = None

    # None means the flag was not sent; strict so "false" is not truthy.
    is_retail: StrictBool | None = Field(default=None, alias="isRetail")


class DraftOrderSummaryV1(BaseModel):
    id: int | str
    name: str | None = None
    status: str | None = None
    invoice_url: str | None = None
    total_price: str | None = None


class DraftOrderCreatedV1(BaseModel):
    success: bool = True
    draft_order: DraftOrderSummaryV1
    message: str = "Draft order created successfully"


class DraftOrderFailedV1(BaseModel):
    success: bool = False
    error: str
    detail: list[dict[str, Any]] | None = None
