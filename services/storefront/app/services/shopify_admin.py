from __future__ import annotations

import json
import logging
import os
import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import Any

from services.storefront.app.models.draft_order import DraftOrderPayload
from services.storefront.app.services.draft_order_base import ConfigurationError, UpstreamError

logger = logging.getLogger("microsite")


@dataclass(frozen=True, slots=True)
class _ShopifyConfig:
    domain: str
    access_token: str
    api_version: str
    timeout_seconds: float


class ShopifyAdminGateway:
    """Creates draft orders through the Shopify Admin REST API.

    One POST per order, no retries. A non-2xx response surfaces as
    UpstreamError carrying the status and body.

    Env vars:
    - SHOPIFY_DOMAIN (required), e.g. my-shop.myshopify.com
    - SHOPIFY_ACCESS_TOKEN (required)
    - SHOPIFY_API_VERSION (default: 2024-01)
    - SHOPIFY_TIMEOUT_SECONDS (default: 30)
    """

    vendor = "SHOPIFY"

    def __init__(self, cfg: _ShopifyConfig) -> None:
        self._cfg = cfg

    @classmethod
    def from_env(cls) -> "ShopifyAdminGateway":
        domain = os.getenv("SHOPIFY_DOMAIN", "").strip()
        access_token = os.getenv("SHOPIFY_ACCESS_TOKEN", "").strip()

        missing = [
            name
            for name, value in (("SHOPIFY_DOMAIN", domain), ("SHOPIFY_ACCESS_TOKEN", access_token))
            if not value
        ]
        if missing:
            raise ConfigurationError(missing)

        return cls(
            _ShopifyConfig(
                domain=domain.removeprefix("https://").rstrip("/"),
                access_token=access_token,
                api_version=os.getenv("SHOPIFY_API_VERSION", "2024-01").strip(),
                timeout_seconds=float(os.getenv("SHOPIFY_TIMEOUT_SECONDS", "30")),
            )
        )

    @property
    def endpoint(self) -> str:
        return f"https://{self._cfg.domain}/admin/api/{self._cfg.api_version}/draft_orders.json"

    def create_draft_order(self, payload: DraftOrderPayload) -> dict[str, Any]:
        logger.info("Sending draft order to %s", self._cfg.domain)

        req = urllib.request.Request(self.endpoint, method="POST")
        req.add_header("Content-Type", "application/json")
        req.add_header("X-Shopify-Access-Token", self._cfg.access_token)
        data = json.dumps(payload.to_request_body()).encode("utf-8")

        try:
            with urllib.request.urlopen(req, data=data, timeout=self._cfg.timeout_seconds) as resp:
                raw = resp.read().decode("utf-8")
        except urllib.error.HTTPError as e:
            body = e.read().decode("utf-8", errors="replace")
            logger.error("Shopify API error: %s %s", e.code, body)
            raise UpstreamError(e.code, body) from e
        except urllib.error.URLError as e:
            logger.error("Shopify API unreachable: %s", e.reason)
            raise UpstreamError(None, str(e.reason)) from e

        try:
            return json.loads(raw)["draft_order"]
        except (ValueError, KeyError, TypeError) as e:
            raise UpstreamError(200, f"Unexpected response shape: {raw[:500]}") from e
