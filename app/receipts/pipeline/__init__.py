"""
Receipt scoring pipeline.

Scores a parsed receipt and wraps the result with a fresh identifier.
"""
import logging
import uuid

from app.receipts.schemas import Receipt, ScoredReceipt
from app.receipts.pipeline.rules import calculate_points, loggable_points

logger = logging.getLogger(__name__)


def score_receipt(receipt: Receipt) -> ScoredReceipt:
    """Compute the points for *receipt* and assign it a new identifier."""
    points = calculate_points(receipt)
    scored = ScoredReceipt(id=str(uuid.uuid4()), points=points)
    logger.info(
        "Scored receipt %s: retailer=%r items=%d points=%s",
        scored.id, receipt.retailer, len(receipt.items), loggable_points(points),
    )
    return scored
