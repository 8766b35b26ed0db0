from __future__ import annotations

from typing import Any, Protocol

from services.storefront.app.models.draft_order import DraftOrderPayload


class DraftOrderError(Exception):
    """Base class for draft order pipeline errors."""


class ValidationError(DraftOrderError):
    """The order cannot be turned into a draft order (nothing is sent upstream)."""


class ConfigurationError(DraftOrderError):
    def __init__(self, missing: list[str]) -> None:
        super().__init__(f"Shopify credentials not configured. Missing: {', '.join(missing)}")
        self.missing = missing


class UpstreamError(DraftOrderError):
    def __init__(self, status_code: int | None, body: str) -> None:
        status = status_code if status_code is not None else "unreachable"
        super().__init__(f"Shopify API error: {status} - {body}")
        self.status_code = status_code
        self.body = body


class DraftOrderGateway(Protocol):
    vendor: str

    def create_draft_order(self, payload: DraftOrderPayload) -> dict[str, Any]: ...
