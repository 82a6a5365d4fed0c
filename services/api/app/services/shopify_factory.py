from __future__ import annotations

import os

from services.api.app.services.shopify_base import ShopifyAdmin
from services.api.app.services.shopify_mock import ShopifyMockAdmin


def get_shopify_admin() -> ShopifyAdmin:
    """Select a Shopify admin adapter based on env vars.

    Defaults to the HTTP adapter, which needs SHOPIFY_URL and SHOPIFY_ACCESS_TOKEN.
    Set RELAY_SHOPIFY_ADAPTER=mock for local dev without a shop.
    """

    mode = os.getenv("RELAY_SHOPIFY_ADAPTER", "http").strip().lower()

    if mode == "mock":
        return ShopifyMockAdmin()

    if mode == "http":
        from services.api.app.services.shopify_http import ShopifyHttpAdmin

        return ShopifyHttpAdmin.from_env()

    raise ValueError(f"Unknown RELAY_SHOPIFY_ADAPTER={mode!r}. Expected http or mock.")
