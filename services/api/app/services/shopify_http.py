from __future__ import annotations

import http.client
import json
import urllib.error
import urllib.request
from typing import Any
from urllib.parse import quote

from services.api.app.config import RelaySettings
from services.api.app.services.shopify_base import (
    ShopifyHTTPError,
    ShopifyResponseError,
    ShopifyUnreachableError,
)


class ShopifyHttpAdmin:
    """Shopify Admin API client over plain HTTP.

    Every call is a single request. There is no retry and, unless
    SHOPIFY_TIMEOUT_SECONDS is set, no explicit timeout.
    """

    vendor = "SHOPIFY"

    def __init__(self, settings: RelaySettings) -> None:
        settings.require_shopify()
        self._settings = settings

    @classmethod
    def from_env(cls) -> "ShopifyHttpAdmin":
        return cls(RelaySettings.from_env())

    def variant_url(self, variant_id: str | int) -> str:
        return f"{self._settings.shop_url}/admin/variants/{quote(str(variant_id), safe='')}.json"

    def draft_orders_url(self) -> str:
        return f"{self._settings.shop_url}/admin/api/{self._settings.api_version}/draft_orders.json"

    def fetch_variant(self, variant_id: str | int) -> dict[str, Any]:
        return self._request("GET", self.variant_url(variant_id))

    def create_draft_order(self, document: dict[str, Any]) -> dict[str, Any]:
        return self._request("POST", self.draft_orders_url(), body=document)

    def _request(self, method: str, url: str, body: dict[str, Any] | None = None) -> dict[str, Any]:
        req = urllib.request.Request(url, method=method)
        req.add_header("X-Shopify-Access-Token", self._settings.access_token)
        req.add_header("Content-Type", "application/json")

        data = json.dumps(body).encode("utf-8") if body is not None else None
        kwargs: dict[str, Any] = {}
        if self._settings.timeout_seconds is not None:
            kwargs["timeout"] = self._settings.timeout_seconds

        try:
            with urllib.request.urlopen(req, data=data, **kwargs) as resp:
                raw_bytes = resp.read()
        except urllib.error.HTTPError as e:
            raise ShopifyHTTPError(e.code, e.read().decode("utf-8", errors="replace")) from e
        except (urllib.error.URLError, http.client.HTTPException, OSError) as e:
            raise ShopifyUnreachableError(url, getattr(e, "reason", e)) from e

        try:
            raw = raw_bytes.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ShopifyResponseError(f"Shopify returned a non UTF-8 body: {raw_bytes[:300]!r}") from e

        if not raw.strip():
            return {}

        try:
            payload = json.loads(raw)
        except ValueError as e:
            raise ShopifyResponseError(f"Shopify returned non-JSON body: {raw[:300]!r}") from e

        if payload is None:
            return {}
        if not isinstance(payload, dict):
            raise ShopifyResponseError(f"Unexpected Shopify response shape: {payload!r}")
        return payload
