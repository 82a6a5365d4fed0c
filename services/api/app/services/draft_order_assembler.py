from __future__ import annotations

import logging
import re
from typing import Any

from services.api.app.models.draft_order import (
    BillingAddress,
    DraftOrder,
    DraftOrderDocument,
    DraftOrderLineItem,
    DraftOrderSubmission,
    LineItemSubmission,
    NoteAttribute,
    ShippingLine,
)
from services.api.app.services.shopify_base import ShopifyAdmin, ShopifyAdminError
from services.api.app.services.variant_resolver import VariantFound, VariantResolver

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


def parse_quantity(value: Any) -> int | None:
    """Parse the leading base-10 integer of `value`, or None when there is none.

    "2" -> 2, "3 boxes" -> 3, 2.7 -> 2, "abc" -> None.
    """

    if value is None or isinstance(value, bool):
        return None
    match = _LEADING_INT.match(str(value))
    if match is None:
        return None
    return int(match.group(1))


class DraftOrderAssembler:
    """Turn a cart form submission into a Shopify draft order and submit it."""

    def __init__(self, admin: ShopifyAdmin, resolver: VariantResolver | None = None) -> None:
        self._admin = admin
        self._resolver = resolver or VariantResolver(admin)

    def assemble(self, submission: DraftOrderSubmission) -> dict[str, Any] | None:
        """Build and submit the draft order.

        Returns the shop's raw response body, or None when submission failed for
        any reason. Validation errors from the shop are not told apart from
        network failures.
        """

        document = self.build(submission)

        try:
            return self._admin.create_draft_order(document.to_payload())
        except ShopifyAdminError as e:
            logger.error("Error creating draft order: %s", e)
            return None

    def build(self, submission: DraftOrderSubmission) -> DraftOrderDocument:
        form = submission.form_details or {}
        shipping = submission.shipping_details

        email = _text(form.get("email"))
        return DraftOrderDocument(
            draft_order=DraftOrder(
                line_items=self._resolve_line_items(submission.line_items),
                shipping_line=ShippingLine(
                    title=shipping.type if shipping else None,
                    price=shipping.price if shipping else None,
                ),
                note_attributes=[NoteAttribute(name=key, value=value) for key, value in form.items()],
                billing_address=BillingAddress(
                    email=email,
                    name=_text(form.get("name")),
                    phone=_text(form.get("phone")),
                ),
                email=email,
            )
        )

    def _resolve_line_items(self, items: Any) -> list[DraftOrderLineItem]:
        # One lookup per item, in input order. Duplicate ids are looked up again.
        if not isinstance(items, list):
            return []

        resolved: list[DraftOrderLineItem] = []
        for entry in items:
            if not entry:
                continue
            if isinstance(entry, LineItemSubmission):
                item = entry
            elif isinstance(entry, dict):
                item = LineItemSubmission.model_validate(entry)
            else:
                continue
            if item.id is None:
                continue

            lookup = self._resolver.resolve(item.id)
            if not isinstance(lookup, VariantFound):
                continue

            resolved.append(
                DraftOrderLineItem(
                    variant_id=item.id,
                    product_id=lookup.product_id,
                    quantity=parse_quantity(item.quantity),
                )
            )
        return resolved


def _text(value: Any) -> str:
    if not value:
        return ""
    return value if isinstance(value, str) else str(value)
