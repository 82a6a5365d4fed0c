from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Inbound form submission. Every section is optional.


class LineItemSubmission(BaseModel):
    id: Any = None
    quantity: Any = None


class ShippingDetails(BaseModel):
    type: Any = None
    price: Any = None


class DraftOrderSubmission(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    # Kept raw: falsy entries and a non-list value are skipped when the order is built.
    line_items: Any = None
    form_details: dict[str, Any] | None = Field(default=None, alias="Form_details")
    shipping_details: ShippingDetails | None = Field(default=None, alias="Shipping_details")

    def is_empty(self) -> bool:
        return not self.model_fields_set and not self.model_extra


# Outbound Shopify draft order document.


class DraftOrderLineItem(BaseModel):
    variant_id: Any
    product_id: Any = None
    # None is rendered as JSON null when the submitted quantity has no integer prefix.
    quantity: int | None


class ShippingLine(BaseModel):
    custom: bool = True
    title: Any = None
    price: Any = None


class NoteAttribute(BaseModel):
    name: str
    value: Any = None


class BillingAddress(BaseModel):
    email: str = ""
    name: str = ""
    phone: str = ""


class DraftOrder(BaseModel):
    line_items: list[DraftOrderLineItem] = Field(default_factory=list)
    shipping_line: ShippingLine = Field(default_factory=ShippingLine)
    note_attributes: list[NoteAttribute] = Field(default_factory=list)
    billing_address: BillingAddress = Field(default_factory=BillingAddress)
    email: str = ""


class DraftOrderDocument(BaseModel):
    draft_order: DraftOrder

    def to_payload(self) -> dict[str, Any]:
        payload = self.model_dump(mode="json")
        # Absent shipping fields are left out of the request, not sent as null.
        payload["draft_order"]["shipping_line"] = self.draft_order.shipping_line.model_dump(
            mode="json", exclude_none=True
        )
        return payload


class DraftOrderCreateResponse(BaseModel):
    success: bool
    message: str
    invoice_url: str | None = None
