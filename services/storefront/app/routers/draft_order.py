from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException
from packages.shared.schemas.draft_order_v1 import (
    DraftOrderCreatedV1,
    DraftOrderRequestV1,
    DraftOrderSummaryV1,
)
from pydantic import ValidationError as PydanticValidationError
from services.storefront.app.services.assembler import assemble
from services.storefront.app.services.draft_order_base import (
    ConfigurationError,
    DraftOrderError,
    UpstreamError,
    ValidationError,
)
from services.storefront.app.services.draft_order_factory import (
    get_draft_order_gateway,
    get_pricing_mode,
)

logger = logging.getLogger("microsite")

router = APIRouter()


def _raise_draft_order_http_error(e: Exception) -> None:
    if isinstance(e, ValidationError):
        logger.warning("Draft order rejected: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e

    if isinstance(e, ConfigurationError):
        raise HTTPException(status_code=500, detail=str(e)) from e

    if isinstance(e, UpstreamError):
        raise HTTPException(status_code=502, detail=str(e)) from e

    if isinstance(e, DraftOrderError):
        raise HTTPException(status_code=500, detail=str(e)) from e

    logger.exception("Draft order creation failed")
    raise HTTPException(status_code=500, detail="Internal Server Error") from e


@router.post("/v1/draft-orders", response_model=DraftOrderCreatedV1)
def create_draft_order(payload: DraftOrderRequestV1) -> DraftOrderCreatedV1:
    logger.info(
        "Received draft order request customer=%r code=%s-%s",
        payload.customer_name,
        payload.diy_code,
        payload.wxyz_code,
    )

    try:
        gateway = get_draft_order_gateway()
        pricing_mode = get_pricing_mode()
    except ValueError as e:
        raise HTTPException(status_code=500, detail=str(e)) from e
    except Exception as e:
        _raise_draft_order_http_error(e)

    try:
        draft_payload = assemble(payload, pricing_mode=pricing_mode)
    except Exception as e:
        _raise_draft_order_http_error(e)

    logger.info("Line items: %d", len(draft_payload.line_items))

    try:
        created = gateway.create_draft_order(draft_payload)
        summary = _summarize(created)
    except Exception as e:
        _raise_draft_order_http_error(e)

    logger.info("Draft order created on %s: %s", gateway.vendor, summary.name)

    return DraftOrderCreatedV1(draft_order=summary)


def _summarize(created: object) -> DraftOrderSummaryV1:
    try:
        return DraftOrderSummaryV1.model_validate(created)
    except PydanticValidationError as e:
        raise UpstreamError(200, f"Unexpected draft order in response: {created!r}") from e
