from receipt_processor.schemas.receipt import (
    Item,
    PointsResponse,
    ProcessReceiptResponse,
    Receipt,
    to_cents,
)

__all__ = [
    "Item",
    "PointsResponse",
    "ProcessReceiptResponse",
    "Receipt",
    "to_cents",
]
