"""
Receipt Processor API endpoints.

POST /receipts/process        — validate + store a receipt → id
GET  /receipts/{id}/points    — points awarded for a stored receipt
"""
from __future__ import annotations

import logging
import re
from typing import Any

from fastapi import APIRouter, Body, Depends

from receipt_processor.errors import ReceiptNotFoundError
from receipt_processor.pipeline import score_receipt, validate_receipt
from receipt_processor.schemas import PointsResponse, ProcessReceiptResponse
from receipt_processor.store import ReceiptStore, get_receipt_store

logger = logging.getLogger(__name__)
router = APIRouter()

RECEIPT_ID_PATTERN = re.compile(r"\S+")


# ── POST /receipts/process ───────────────────────────────────────────────
@router.post("/receipts/process", response_model=ProcessReceiptResponse)
def process_receipt(
    payload: Any = Body(...),
    store: ReceiptStore = Depends(get_receipt_store),
):
    receipt = validate_receipt(payload)
    receipt_id = store.insert(receipt)
    logger.info("Stored receipt %s (%d items)", receipt_id, len(receipt.items))
    return ProcessReceiptResponse(id=receipt_id)


# ── GET /receipts/{receipt_id}/points ────────────────────────────────────
# :path so an empty id reaches the handler and gets the same 404 as an unknown one
@router.get("/receipts/{receipt_id:path}/points", response_model=PointsResponse)
def get_receipt_points(
    receipt_id: str,
    store: ReceiptStore = Depends(get_receipt_store),
):
    if RECEIPT_ID_PATTERN.fullmatch(receipt_id) is None:
        raise ReceiptNotFoundError(receipt_id)
    receipt = store.get(receipt_id)
    if receipt is None:
        raise ReceiptNotFoundError(receipt_id)
    return PointsResponse(points=score_receipt(receipt))
