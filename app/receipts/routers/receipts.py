"""
Receipt points API endpoints.

POST /receipts/process         — score a receipt, return its id
GET  /receipts/{id}/points     — points previously awarded to a receipt
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from app.receipts.pipeline import score_receipt
from app.receipts.schemas import PointsResponse, ProcessResponse, Receipt
from app.receipts.store import ReceiptStore, get_store

logger = logging.getLogger(__name__)
router = APIRouter()


# ── POST /receipts/process ───────────────────────────────────────────────
@router.post("/receipts/process", response_model=ProcessResponse)
def process_receipt(receipt: Receipt, store: ReceiptStore = Depends(get_store)):
    scored = score_receipt(receipt)
    store.put(scored.id, scored.points)
    logger.info("Stored receipt %s", scored.id)
    return ProcessResponse(id=scored.id)


# ── GET /receipts/{receipt_id}/points ────────────────────────────────────
@router.get("/receipts/{receipt_id}/points", response_model=PointsResponse)
def get_points(receipt_id: str, store: ReceiptStore = Depends(get_store)):
    points, found = store.get(receipt_id)
    if not found:
        logger.warning("Receipt not found: %s", receipt_id)
        raise HTTPException(status_code=404, detail="Receipt ID not found")
    return PointsResponse(points=points)
