from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_API_VERSION = "2024-10"


@dataclass(frozen=True, slots=True)
class RelaySettings:
    """Process configuration for the draft order relay.

    Env vars:
    - SHOPIFY_URL: shop base URL, e.g. https://example.myshopify.com
    - SHOPIFY_ACCESS_TOKEN: Admin API access token
    - SHOPIFY_API_VERSION (default: 2024-10)
    - SHOPIFY_TIMEOUT_SECONDS (default: unset, no explicit timeout)
    - HOST (default: 0.0.0.0)
    - PORT (default: 3000)
    - LOG_LEVEL (default: INFO)
    """

    shop_url: str
    access_token: str
    api_version: str = DEFAULT_API_VERSION
    timeout_seconds: float | None = None
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "RelaySettings":
        timeout = os.getenv("SHOPIFY_TIMEOUT_SECONDS", "").strip()
        return cls(
            shop_url=os.getenv("SHOPIFY_URL", "").strip().rstrip("/"),
            access_token=os.getenv("SHOPIFY_ACCESS_TOKEN", "").strip(),
            api_version=os.getenv("SHOPIFY_API_VERSION", DEFAULT_API_VERSION).strip(),
            timeout_seconds=float(timeout) if timeout else None,
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3000")),
            log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
        )

    def require_shopify(self) -> None:
        if not self.shop_url:
            raise ValueError("SHOPIFY_URL is required when RELAY_SHOPIFY_ADAPTER=http")
        if not self.access_token:
            raise ValueError("SHOPIFY_ACCESS_TOKEN is required when RELAY_SHOPIFY_ADAPTER=http")
