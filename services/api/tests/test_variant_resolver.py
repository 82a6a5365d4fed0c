from __future__ import annotations

from typing import Any

import pytest
from services.api.app.services.shopify_base import (
    ShopifyHTTPError,
    ShopifyResponseError,
    ShopifyUnreachableError,
)
from services.api.app.services.variant_resolver import (
    VariantFound,
    VariantNotFound,
    VariantResolver,
)


class _Admin:
    vendor = "SHOPIFY_STUB"

    def __init__(self, result: dict[str, Any] | Exception) -> None:
        self._result = result
        self.calls: list[str | int] = []

    def fetch_variant(self, variant_id: str | int) -> dict[str, Any]:
        self.calls.append(variant_id)
        if isinstance(self._result, Exception):
            raise self._result
        return self._result

    def create_draft_order(self, document: dict[str, Any]) -> dict[str, Any]:
        raise AssertionError("not used")


def test_resolve_returns_variant_as_given() -> None:
    variant = {"id": 111, "product_id": 999, "title": "Large / Red", "sku": "X-1"}
    admin = _Admin({"variant": variant})

    lookup = VariantResolver(admin).resolve(111)

    assert isinstance(lookup, VariantFound)
    assert lookup.variant == variant
    assert lookup.product_id == 999
    assert admin.calls == [111]


@pytest.mark.parametrize(
    ("result", "reason"),
    [
        ({}, "missing"),
        ({"variant": None}, "missing"),
        ({"variant": ["unexpected"]}, "malformed"),
        (ShopifyHTTPError(404, '{"errors":"Not Found"}'), "http_error"),
        (ShopifyHTTPError(401, "Invalid API key or access token"), "http_error"),
        (ShopifyUnreachableError("https://shop", "Name or service not known"), "unreachable"),
        (ShopifyResponseError("not json"), "malformed"),
    ],
)
def test_resolve_collapses_failures_into_not_found(
    result: dict[str, Any] | Exception, reason: str
) -> None:
    lookup = VariantResolver(_Admin(result)).resolve("42")

    # "No such variant" and "shop unreachable" are both NotFound; only the reason differs.
    assert isinstance(lookup, VariantNotFound)
    assert lookup.variant_id == "42"
    assert lookup.reason == reason


def test_resolve_does_not_cache() -> None:
    admin = _Admin({"variant": {"id": 1, "product_id": 2}})
    resolver = VariantResolver(admin)

    resolver.resolve(1)
    resolver.resolve(1)

    assert admin.calls == [1, 1]
