from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field


class LineItemProperty(BaseModel):
    name: str
    value: str


class DraftOrderLineItem(BaseModel):
    # Explicit-price shape uses title/price/product_id; catalog-price shape uses variant_id.
    title: str | None = None
    price: str | None = None
    product_id: str | None = None
    variant_id: str | None = None
    quantity: int = Field(..., ge=1)
    taxable: bool = True
    properties: list[LineItemProperty]


class DraftOrderCustomer(BaseModel):
    first_name: str
    last_name: str
    email: str | None = None


class DraftOrderPayload(BaseModel):
    customer: DraftOrderCustomer
    line_items: list[DraftOrderLineItem] = Field(..., min_length=1)
    use_customer_default_address: Literal[False] = False
    note: str
    tags: str
    invoice_sent_at: None = None
    status: Literal["open"] = "open"
    send_receipt: Literal[False] = False
    send_fulfillment_receipt: Literal[False] = False

    def to_request_body(self) -> dict[str, Any]:
        """Body for the Admin API ``draft_orders.json`` endpoint."""

        body = self.model_dump(exclude={"line_items"})
        body["line_items"] = [item.model_dump(exclude_none=True) for item in self.line_items]
        return {"draft_order": body}
