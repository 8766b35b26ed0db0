from __future__ import annotations

import os

from services.storefront.app.services.assembler import DEFAULT_PRICING_MODE, PricingMode
from services.storefront.app.services.draft_order_base import DraftOrderGateway
from services.storefront.app.services.draft_order_mock import MockDraftOrderGateway


def get_draft_order_gateway() -> DraftOrderGateway:
    """Select a gateway based on env vars.

    Defaults to the mock gateway so tests and local dev never create real draft
    orders unless explicitly configured otherwise.
    """

    mode = os.getenv("MICROSITE_DRAFT_ORDER_GATEWAY", "mock").strip().lower()

    if mode == "mock":
        return MockDraftOrderGateway()

    if mode == "shopify":
        from services.storefront.app.services.shopify_admin import ShopifyAdminGateway

        return ShopifyAdminGateway.from_env()

    raise ValueError(f"Unknown MICROSITE_DRAFT_ORDER_GATEWAY={mode!r}. Expected mock or shopify.")


def get_pricing_mode() -> PricingMode:
    raw = os.getenv("MICROSITE_PRICING_MODE", DEFAULT_PRICING_MODE.value).strip().lower()
    try:
        return PricingMode(raw)
    except ValueError as e:
        raise ValueError(f"Unknown MICROSITE_PRICING_MODE={raw!r}. Expected explicit or catalog.") from e
