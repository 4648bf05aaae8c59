from app.receipts.schemas.base import (  # noqa: F401
    Item,
    PointsResponse,
    ProcessResponse,
    Receipt,
    ScoredReceipt,
)
