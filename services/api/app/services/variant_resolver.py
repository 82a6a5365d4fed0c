from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Literal

from services.api.app.services.shopify_base import (
    ShopifyAdmin,
    ShopifyAdminError,
    ShopifyHTTPError,
    ShopifyUnreachableError,
)

logger = logging.getLogger(__name__)

NotFoundReason = Literal["missing", "http_error", "unreachable", "malformed"]


@dataclass(frozen=True, slots=True)
class VariantFound:
    variant: dict[str, Any]

    @property
    def product_id(self) -> Any:
        return self.variant.get("product_id")


@dataclass(frozen=True, slots=True)
class VariantNotFound:
    variant_id: str | int
    reason: NotFoundReason


VariantLookup = VariantFound | VariantNotFound


class VariantResolver:
    """Look up a single product variant on the shop.

    Never raises: every failure, whether the shop has no such variant or could
    not be reached, comes back as VariantNotFound. `reason` tells them apart for
    diagnostics only; callers treat all of them the same way.
    """

    def __init__(self, admin: ShopifyAdmin) -> None:
        self._admin = admin

    def resolve(self, variant_id: str | int) -> VariantLookup:
        try:
            body = self._admin.fetch_variant(variant_id)
        except ShopifyHTTPError as e:
            logger.warning("Variant %s lookup failed with HTTP %s", variant_id, e.status)
            return VariantNotFound(variant_id, "http_error")
        except ShopifyUnreachableError as e:
            logger.warning("Variant %s lookup failed: %s", variant_id, e)
            return VariantNotFound(variant_id, "unreachable")
        except ShopifyAdminError as e:
            logger.warning("Variant %s lookup returned an unexpected body: %s", variant_id, e)
            return VariantNotFound(variant_id, "malformed")

        variant = body.get("variant") if body else None
        if not variant:
            logger.info("Variant %s not present in lookup response", variant_id)
            return VariantNotFound(variant_id, "missing")
        if not isinstance(variant, dict):
            logger.warning("Variant %s lookup returned %r", variant_id, variant)
            return VariantNotFound(variant_id, "malformed")

        return VariantFound(variant)
