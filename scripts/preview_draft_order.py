from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from packages.shared.schemas.draft_order_v1 import DraftOrderRequestV1
from pydantic import ValidationError as PydanticValidationError
from services.storefront.app.services.assembler import PricingMode, assemble
from services.storefront.app.services.draft_order_base import ValidationError


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Print the Shopify draft order body for a microsite order, without sending it"
    )
    parser.add_argument("order_json", type=Path, help="Path to a microsite order request JSON file")
    parser.add_argument(
        "--pricing-mode",
        choices=[mode.value for mode in PricingMode],
        default=PricingMode.EXPLICIT_PRICE.value,
    )
    args = parser.parse_args(argv)

    try:
        order = DraftOrderRequestV1.model_validate_json(args.order_json.read_text(encoding="utf-8"))
    except OSError as e:
        print(f"error: cannot read {args.order_json}: {e}", file=sys.stderr)
        return 2
    except PydanticValidationError as e:
        print(f"error: invalid order request:\n{e}", file=sys.stderr)
        return 2

    try:
        payload = assemble(order, pricing_mode=PricingMode(args.pricing_mode))
    except ValidationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(json.dumps(payload.to_request_body(), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
