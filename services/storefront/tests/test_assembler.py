from __future__ import annotations

from datetime import date
from typing import Any

import pytest
from packages.shared.schemas.draft_order_v1 import DraftOrderRequestV1
from services.storefront.app.services.assembler import PricingMode, assemble, split_customer_name
from services.storefront.app.services.draft_order_base import ValidationError

TODAY = date(2026, 3, 7)


def _order(**overrides: Any) -> DraftOrderRequestV1:
    data: dict[str, Any] = {
        "diyCode": "1112",
        "wxyzCode": "A7K2",
        "customer_name": "Jane Q. Public",
        "customer_email": "jane@example.com",
        "configuration": {
            "length": "Normal",
            "sleeve": "Long",
            "style": "Sweater",
            "collar": "Polo",
            "hem": "Ribbed",
            "cuff": "Folded",
            "arms_slits": "None",
            "color": "Forest Green",
        },
        "quantities": {"S": 0, "M": 2, "L": 1},
        "total_pieces": 3,
        "notes": "Gift wrap please",
    }
    data.update(overrides)
    return DraftOrderRequestV1.model_validate(data)


def _props(item: Any) -> dict[str, str]:
    return {p.name: p.value for p in item.properties}


def test_only_positive_quantities_become_line_items() -> None:
    payload = assemble(_order(), today=TODAY)

    assert [_props(item)["Size"] for item in payload.line_items] == ["M", "L"]
    assert [item.quantity for item in payload.line_items] == [2, 1]


def test_line_items_use_resolver_price_and_catalog_id() -> None:
    payload = assemble(_order(), today=TODAY)
    item = payload.line_items[0]

    assert item.title == "Custom DIY Sweater - Size M"
    assert item.price == "120.90"
    assert item.product_id == "9552915398984"
    assert item.variant_id is None
    assert item.taxable is True


def test_property_order_is_fixed() -> None:
    payload = assemble(_order(), today=TODAY)

    assert [p.name for p in payload.line_items[0].properties] == [
        "DIY Code",
        "Product ID",
        "Order Type",
        "Size",
        "Length",
        "Sleeve",
        "Style",
        "Collar",
        "Hem",
        "Cuff",
        "Arms Slits",
        "Color",
        "Customer Email",
        "Order Date",
    ]
    props = _props(payload.line_items[0])
    assert props["DIY Code"] == "1112-A7K2"
    assert props["Order Type"] == "Wholesale"
    assert props["Customer Email"] == "jane@example.com"
    assert props["Order Date"] == "3/7/2026"


def test_configuration_values_appear_verbatim() -> None:
    order = _order()
    payload = assemble(order, today=TODAY)

    for item in payload.line_items:
        props = _props(item)
        assert props["Length"] == "Normal"
        assert props["Collar"] == "Polo"
        assert props["Arms Slits"] == "None"
        assert props["Color"] == "Forest Green"

    for value in order.configuration.model_dump().values():
        assert f'"{value}"' in payload.note


def test_non_ascii_configuration_values_are_not_escaped() -> None:
    configuration = {
        "length": "Normal",
        "sleeve": "Long",
        "style": "Sweater",
        "collar": "Polo",
        "hem": "Côtelé",
        "color": "Crème",
    }
    payload = assemble(_order(configuration=configuration), today=TODAY)

    assert '"color": "Crème"' in payload.note
    assert '"hem": "Côtelé"' in payload.note
    assert "\\u00e8" not in payload.note
    assert _props(payload.line_items[0])["Color"] == "Crème"


def test_all_zero_quantities_fail() -> None:
    with pytest.raises(ValidationError, match="No items with quantity > 0"):
        assemble(_order(quantities={"S": 0, "M": 0}, total_pieces=0), today=TODAY)


def test_empty_quantities_fail() -> None:
    with pytest.raises(ValidationError):
        assemble(_order(quantities={}, total_pieces=None), today=TODAY)


def test_total_pieces_mismatch_fails() -> None:
    with pytest.raises(ValidationError, match="total_pieces=5"):
        assemble(_order(total_pieces=5), today=TODAY)


def test_missing_total_pieces_uses_quantity_sum() -> None:
    payload = assemble(_order(total_pieces=None), today=TODAY)
    assert "Total-3-pieces" in payload.tags.split(",")


def test_name_split() -> None:
    assert split_customer_name("Jane Q. Public") == ("Jane", "Q. Public")
    assert split_customer_name("  Cher  ") == ("Cher", "")
    assert split_customer_name("Mary   Ann   Lee") == ("Mary", "Ann Lee")
    assert split_customer_name(None) == ("Custom Order", "")
    assert split_customer_name("   ") == ("Custom Order", "")


def test_customer_block() -> None:
    payload = assemble(_order(), today=TODAY)
    assert payload.customer.first_name == "Jane"
    assert payload.customer.last_name == "Q. Public"
    assert payload.customer.email == "jane@example.com"

    anonymous = assemble(_order(customer_name=None, customer_email=None), today=TODAY)
    assert anonymous.customer.first_name == "Custom Order"
    assert anonymous.customer.last_name == ""
    assert anonymous.customer.email is None
    assert _props(anonymous.line_items[0])["Customer Email"] == ""


def test_note_and_tags() -> None:
    payload = assemble(_order(), today=TODAY)

    assert payload.note.startswith("Custom DIY Sweater Order - 1112-A7K2\nOrder Type: Wholesale\n")
    assert "Configuration:\n{\n" in payload.note
    assert payload.note.endswith("Customer Notes: Gift wrap please")
    assert payload.tags == (
        "DIY-1112,Config-A7K2,Custom-Sweater,Microsite-Order,Wholesale-Order,Total-3-pieces"
    )

    no_notes = assemble(_order(notes=None), today=TODAY)
    assert no_notes.note.endswith("Customer Notes: None")


def test_retail_tier_changes_price_catalog_and_labels() -> None:
    payload = assemble(_order(isRetail=True), today=TODAY)
    item = payload.line_items[0]

    assert item.price == "239.00"
    assert item.product_id == "9561204474184"
    assert _props(item)["Order Type"] == "Retail"
    assert "Retail-Order" in payload.tags.split(",")
    assert "Order Type: Retail" in payload.note


def test_unknown_code_and_configuration_degrade() -> None:
    order = _order(
        diyCode="ZZZZ",
        configuration={"length": "maxi", "sleeve": "long", "style": "sweater", "collar": "crew"},
    )
    payload = assemble(order, today=TODAY)
    item = payload.line_items[0]

    assert item.price == "94.20"
    assert item.product_id is None
    assert _props(item)["Product ID"] == "Custom"


def test_catalog_pricing_mode_emits_bare_reference() -> None:
    payload = assemble(_order(), pricing_mode=PricingMode.CATALOG_PRICE, today=TODAY)
    item = payload.line_items[0]

    assert item.variant_id == "49468121334088"
    assert item.product_id is None
    assert item.title is None
    assert item.price is None

    body = payload.to_request_body()["draft_order"]["line_items"][0]
    assert set(body) == {"variant_id", "quantity", "taxable", "properties"}


def test_catalog_pricing_mode_without_variant_keeps_explicit_price() -> None:
    payload = assemble(_order(diyCode="ZZZZ"), pricing_mode=PricingMode.CATALOG_PRICE, today=TODAY)
    item = payload.line_items[0]

    assert item.variant_id is None
    assert item.price == "94.20"


def test_request_body_flags() -> None:
    body = assemble(_order(), today=TODAY).to_request_body()["draft_order"]

    assert body["use_customer_default_address"] is False
    assert body["invoice_sent_at"] is None
    assert body["status"] == "open"
    assert body["send_receipt"] is False
    assert body["send_fulfillment_receipt"] is False
    assert body["customer"] == {"first_name": "Jane", "last_name": "Q. Public", "email": "jane@example.com"}
    assert body["line_items"][0]["properties"][0] == {"name": "DIY Code", "value": "1112-A7K2"}
