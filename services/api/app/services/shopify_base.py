from __future__ import annotations

from typing import Any, Protocol


class ShopifyAdminError(Exception):
    """Base class for Shopify Admin API errors."""


class ShopifyHTTPError(ShopifyAdminError):
    def __init__(self, status: int, body: str) -> None:
        super().__init__(f"Shopify HTTP {status}: {body[:300]}")
        self.status = status
        self.body = body


class ShopifyUnreachableError(ShopifyAdminError):
    def __init__(self, url: str, reason: object) -> None:
        super().__init__(f"Shopify unreachable at {url}: {reason}")
        self.url = url
        self.reason = reason


class ShopifyResponseError(ShopifyAdminError):
    """The response body was not a JSON object."""


class ShopifyAdmin(Protocol):
    vendor: str

    def fetch_variant(self, variant_id: str | int) -> dict[str, Any]: ...

    def create_draft_order(self, document: dict[str, Any]) -> dict[str, Any]: ...
