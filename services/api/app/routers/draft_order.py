from __future__ import annotations

import logging

from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse
from services.api.app.models.draft_order import DraftOrderCreateResponse, DraftOrderSubmission
from services.api.app.services.draft_order_assembler import DraftOrderAssembler
from services.api.app.services.shopify_factory import get_shopify_admin

logger = logging.getLogger(__name__)

router = APIRouter()

NO_DATA_MESSAGE = "Error: No data received"
FAILURE_MESSAGE = "Error creating draft order"
SUCCESS_MESSAGE = "Draft Order created successfully"


def _failure(status_code: int, message: str) -> JSONResponse:
    body = DraftOrderCreateResponse(success=False, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


@router.post("/create-draft-order", response_model=DraftOrderCreateResponse)
def create_draft_order(
    payload: DraftOrderSubmission | None = Body(default=None),
) -> DraftOrderCreateResponse | JSONResponse:
    if payload is None or payload.is_empty():
        return _failure(400, NO_DATA_MESSAGE)

    try:
        admin = get_shopify_admin()
    except ValueError as e:
        logger.error("Shopify adapter is not configured: %s", e)
        return _failure(500, FAILURE_MESSAGE)

    created = DraftOrderAssembler(admin).assemble(payload)
    if not created:
        return _failure(500, FAILURE_MESSAGE)

    draft_order = created.get("draft_order")
    invoice_url = draft_order.get("invoice_url") if isinstance(draft_order, dict) else None
    if not invoice_url:
        logger.error("Draft order response has no invoice_url: %r", created)
        return _failure(500, FAILURE_MESSAGE)

    return DraftOrderCreateResponse(success=True, message=SUCCESS_MESSAGE, invoice_url=invoice_url)
