from __future__ import annotations

import json
import logging
from datetime import date
from decimal import Decimal
from enum import Enum

from packages.shared.schemas.draft_order_v1 import DraftOrderRequestV1
from services.storefront.app.models.draft_order import (
    DraftOrderCustomer,
    DraftOrderLineItem,
    DraftOrderPayload,
    LineItemProperty,
)
from services.storefront.app.services.draft_order_base import ValidationError
from services.storefront.app.services.pricing import (
    ConfigurationResolver,
    PricingTier,
    ProductCatalogEntry,
    composite_key,
    decode_product_code,
    resolver as default_resolver,
    tier_from_flag,
)

logger = logging.getLogger("microsite")

PLACEHOLDER_CUSTOMER_NAME = "Custom Order"
LINE_ITEM_TITLE = "Custom DIY Sweater"
CATEGORY_TAGS = ("Custom-Sweater", "Microsite-Order")


class PricingMode(str, Enum):
    EXPLICIT_PRICE = "explicit"
    CATALOG_PRICE = "catalog"


DEFAULT_PRICING_MODE = PricingMode.EXPLICIT_PRICE


def assemble(
    order: DraftOrderRequestV1,
    *,
    resolver: ConfigurationResolver = default_resolver,
    pricing_mode: PricingMode = DEFAULT_PRICING_MODE,
    today: date | None = None,
) -> DraftOrderPayload:
    """Turn one microsite order into a draft order payload.

    Raises ValidationError when no size has a positive quantity, or when
    ``total_pieces`` disagrees with the per-size quantities. Unknown
    configurations and product codes are not errors; the resolver degrades
    them to the tier's fallback price.
    """

    tier = tier_from_flag(order.is_retail)
    unit_price = resolver.resolve_price(order.configuration, tier)
    entry = resolver.resolve_product(order.diy_code, tier)
    _warn_on_code_mismatch(order)

    order_date = _short_date(today or date.today())
    line_items = [
        _line_item(order, tier, size, quantity, unit_price, entry, pricing_mode, order_date)
        for size, quantity in order.quantities.items()
        if quantity > 0
    ]
    if not line_items:
        raise ValidationError("No items with quantity > 0 found")

    piece_count = sum(item.quantity for item in line_items)
    if order.total_pieces is not None and order.total_pieces != piece_count:
        raise ValidationError(
            f"total_pieces={order.total_pieces} does not match the sum of quantities ({piece_count})"
        )

    first_name, last_name = split_customer_name(order.customer_name)

    return DraftOrderPayload(
        customer=DraftOrderCustomer(
            first_name=first_name,
            last_name=last_name,
            email=order.customer_email or None,
        ),
        line_items=line_items,
        note=_note(order, tier),
        tags=",".join(_tags(order, tier, piece_count)),
    )


def split_customer_name(customer_name: str | None) -> tuple[str, str]:
    tokens = (customer_name or "").split()
    if not tokens:
        return PLACEHOLDER_CUSTOMER_NAME, ""
    return tokens[0], " ".join(tokens[1:])


def _line_item(
    order: DraftOrderRequestV1,
    tier: PricingTier,
    size: str,
    quantity: int,
    unit_price: Decimal,
    entry: ProductCatalogEntry,
    pricing_mode: PricingMode,
    order_date: str,
) -> DraftOrderLineItem:
    properties = _properties(order, tier, size, entry, order_date)

    if pricing_mode is PricingMode.CATALOG_PRICE and entry.variant_id is not None:
        return DraftOrderLineItem(
            variant_id=entry.variant_id,
            quantity=quantity,
            properties=properties,
        )

    # Explicit price, also used in catalog mode when there is nothing to reference.
    return DraftOrderLineItem(
        title=f"{LINE_ITEM_TITLE} - Size {size.upper()}",
        price=f"{unit_price:.2f}",
        product_id=entry.catalog_id,
        quantity=quantity,
        properties=properties,
    )


def _properties(
    order: DraftOrderRequestV1,
    tier: PricingTier,
    size: str,
    entry: ProductCatalogEntry,
    order_date: str,
) -> list[LineItemProperty]:
    cfg = order.configuration
    pairs = [
        ("DIY Code", f"{order.diy_code}-{order.wxyz_code}"),
        ("Product ID", entry.catalog_id or "Custom"),
        ("Order Type", tier.label),
        ("Size", size.upper()),
        ("Length", cfg.length),
        ("Sleeve", cfg.sleeve),
        ("Style", cfg.style),
        ("Collar", cfg.collar),
        ("Hem", cfg.hem),
        ("Cuff", cfg.cuff),
        ("Arms Slits", cfg.arms_slits),
        ("Color", cfg.color),
        ("Customer Email", order.customer_email or ""),
        ("Order Date", order_date),
    ]
    return [LineItemProperty(name=name, value=value) for name, value in pairs]


def _note(order: DraftOrderRequestV1, tier: PricingTier) -> str:
    configuration = json.dumps(order.configuration.model_dump(), indent=2, ensure_ascii=False)
    return (
        f"Custom DIY Sweater Order - {order.diy_code}-{order.wxyz_code}\n"
        f"Order Type: {tier.label}\n\n"
        f"Configuration:\n{configuration}\n\n"
        f"Customer Notes: {order.notes or 'None'}"
    )


def _tags(order: DraftOrderRequestV1, tier: PricingTier, piece_count: int) -> list[str]:
    return [
        f"DIY-{order.diy_code}",
        f"Config-{order.wxyz_code}",
        *CATEGORY_TAGS,
        f"{tier.label}-Order",
        f"Total-{piece_count}-pieces",
    ]


def _short_date(day: date) -> str:
    # en-US short form, no zero padding: 3/7/2026
    return f"{day.month}/{day.day}/{day.year}"


def _warn_on_code_mismatch(order: DraftOrderRequestV1) -> None:
    expected = decode_product_code(order.diy_code)
    actual = composite_key(order.configuration)
    if expected is not None and expected != actual:
        logger.warning(
            "Product code %s describes %r but configuration is %r",
            order.diy_code,
            expected,
            actual,
        )
