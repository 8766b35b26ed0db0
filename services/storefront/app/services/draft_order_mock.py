from __future__ import annotations

import json
import zlib
from decimal import Decimal
from typing import Any

from services.storefront.app.models.draft_order import DraftOrderPayload


class MockDraftOrderGateway:
    """Deterministic stand-in for the Shopify Admin API.

    Echoes the payload back in the shape Shopify returns, without any network.
    The draft id is a checksum of the request body, so the same payload always
    yields the same id and name.
    """

    vendor = "SHOPIFY_MOCK"

    def create_draft_order(self, payload: DraftOrderPayload) -> dict[str, Any]:
        body = payload.to_request_body()["draft_order"]
        draft_id = zlib.crc32(json.dumps(body, sort_keys=True).encode("utf-8")) or 1

        # Catalog-priced items have no price here; Shopify fills it in.
        total = sum(
            (Decimal(item.price) * item.quantity for item in payload.line_items if item.price),
            Decimal("0"),
        )

        return {
            **body,
            "id": draft_id,
            "name": f"#D{draft_id % 10000}",
            "invoice_url": None,
            "total_price": f"{total:.2f}",
        }
