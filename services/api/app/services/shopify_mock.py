from __future__ import annotations

from itertools import count
from typing import Any
from uuid import uuid4

from services.api.app.services.shopify_base import ShopifyHTTPError

_DRAFT_IDS = count(1001)


class ShopifyMockAdmin:
    """In-memory stand-in for the Shopify Admin API.

    Variants resolve from a small fixed catalog. Every draft order call mints a
    new id and invoice URL, so identical submissions yield distinct orders.
    """

    vendor = "SHOPIFY_MOCK"

    def __init__(self, catalog: dict[str, int] | None = None) -> None:
        self._catalog = (
            catalog
            if catalog is not None
            else {
                "111": 999,
                "40000000001": 8000000001,
                "40000000002": 8000000001,
                "40000000003": 8000000002,
            }
        )
        self.variant_lookups: list[str] = []
        self.draft_orders: list[dict[str, Any]] = []

    def fetch_variant(self, variant_id: str | int) -> dict[str, Any]:
        key = str(variant_id)
        self.variant_lookups.append(key)

        product_id = self._catalog.get(key)
        if product_id is None:
            raise ShopifyHTTPError(404, '{"errors":"Not Found"}')

        return {"variant": {"id": int(key) if key.isdigit() else key, "product_id": product_id}}

    def create_draft_order(self, document: dict[str, Any]) -> dict[str, Any]:
        self.draft_orders.append(document)

        draft_id = next(_DRAFT_IDS)
        order = dict(document.get("draft_order") or {})
        order["id"] = draft_id
        order["status"] = "open"
        order["invoice_url"] = f"https://mock.myshopify.com/invoices/{uuid4().hex}"
        return {"draft_order": order}
