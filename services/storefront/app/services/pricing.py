from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from packages.shared.schemas.draft_order_v1 import GarmentConfigurationV1
from services.storefront.app.services import catalog_data

logger = logging.getLogger("microsite")

KEY_DELIMITER = "_"


class PricingTier(str, Enum):
    WHOLESALE = "WHOLESALE"
    RETAIL = "RETAIL"

    @property
    def label(self) -> str:
        return self.value.title()


DEFAULT_TIER = PricingTier.WHOLESALE


def tier_from_flag(is_retail: bool | None) -> PricingTier:
    """Map the caller's ``isRetail`` flag to a tier. Absent means wholesale."""

    if is_retail is None:
        return DEFAULT_TIER
    return PricingTier.RETAIL if is_retail else PricingTier.WHOLESALE


@dataclass(frozen=True, slots=True)
class ProductCatalogEntry:
    catalog_id: str | None
    unit_price: Decimal
    # Default variant of the catalog product; draft order line items reference variants.
    variant_id: str | None = None


@dataclass(frozen=True, slots=True)
class _TierTables:
    prices: Mapping[str, Decimal]
    catalog: Mapping[str, ProductCatalogEntry]
    fallback_price: Decimal


def _tier_tables(
    prices: dict[str, Decimal],
    catalog: dict[str, tuple[str, str, Decimal]],
    fallback_price: Decimal,
) -> _TierTables:
    return _TierTables(
        prices=MappingProxyType(dict(prices)),
        catalog=MappingProxyType(
            {
                code: ProductCatalogEntry(catalog_id=catalog_id, unit_price=price, variant_id=variant_id)
                for code, (catalog_id, variant_id, price) in catalog.items()
            }
        ),
        fallback_price=fallback_price,
    )


_TABLES: Mapping[PricingTier, _TierTables] = MappingProxyType(
    {
        PricingTier.WHOLESALE: _tier_tables(
            catalog_data.WHOLESALE_PRICES,
            catalog_data.WHOLESALE_CATALOG,
            catalog_data.WHOLESALE_FALLBACK_PRICE,
        ),
        PricingTier.RETAIL: _tier_tables(
            catalog_data.RETAIL_PRICES,
            catalog_data.RETAIL_CATALOG,
            catalog_data.RETAIL_FALLBACK_PRICE,
        ),
    }
)


def composite_key(configuration: GarmentConfigurationV1) -> str:
    parts = (
        configuration.length,
        configuration.sleeve,
        configuration.style,
        configuration.collar,
    )
    return KEY_DELIMITER.join(part.strip().lower() for part in parts)


def decode_product_code(product_code: str) -> str | None:
    """Return the composite key a product code stands for, or None if malformed."""

    if len(product_code) != len(catalog_data.CODE_DIGITS):
        return None

    parts: list[str] = []
    for digit, (_, values) in zip(product_code, catalog_data.CODE_DIGITS):
        value = values.get(digit)
        if value is None:
            return None
        parts.append(value)
    return KEY_DELIMITER.join(parts)


class ConfigurationResolver:
    """Price and catalog lookups for a garment order.

    Both lookups degrade instead of failing: an unknown combination or product
    code resolves to the tier's fallback (lowest) price so checkout is never
    blocked by pricing.
    """

    def __init__(self, tables: Mapping[PricingTier, _TierTables] = _TABLES) -> None:
        self._tables = tables

    def fallback_price(self, tier: PricingTier) -> Decimal:
        return self._tables[tier].fallback_price

    def resolve_price(self, configuration: GarmentConfigurationV1, tier: PricingTier) -> Decimal:
        tables = self._tables[tier]
        key = composite_key(configuration)
        price = tables.prices.get(key)
        if price is None:
            logger.warning(
                "Unknown configuration %r for tier=%s; using fallback price %s",
                key,
                tier.value,
                tables.fallback_price,
            )
            return tables.fallback_price
        return price

    def resolve_product(self, product_code: str, tier: PricingTier) -> ProductCatalogEntry:
        tables = self._tables[tier]
        entry = tables.catalog.get(product_code)
        if entry is None:
            logger.warning(
                "Unknown product code %r for tier=%s; using fallback price %s",
                product_code,
                tier.value,
                tables.fallback_price,
            )
            return ProductCatalogEntry(catalog_id=None, unit_price=tables.fallback_price)
        return entry


resolver = ConfigurationResolver()
