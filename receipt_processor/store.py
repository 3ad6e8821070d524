"""
In-memory receipt store.

Append-only and lock protected. One instance lives for the lifetime of the
application; nothing is written to disk, so a restart starts empty.
"""
from __future__ import annotations

import logging
import threading
import uuid
from typing import Callable, Optional

from fastapi import Request

from receipt_processor.schemas import Receipt

logger = logging.getLogger(__name__)


def new_receipt_id() -> str:
    return str(uuid.uuid4())


class ReceiptStore:
    def __init__(self, id_factory: Callable[[], str] = new_receipt_id):
        self._id_factory = id_factory
        self._receipts: dict[str, Receipt] = {}
        self._lock = threading.Lock()

    def insert(self, receipt: Receipt) -> str:
        """Store ``receipt`` under a freshly drawn id and return the id."""
        with self._lock:
            receipt_id = self._id_factory()
            while receipt_id in self._receipts:
                logger.warning("Receipt id collision on %s, drawing again", receipt_id)
                receipt_id = self._id_factory()
            self._receipts[receipt_id] = receipt
        return receipt_id

    def get(self, receipt_id: str) -> Optional[Receipt]:
        with self._lock:
            return self._receipts.get(receipt_id)

    def __contains__(self, receipt_id: object) -> bool:
        with self._lock:
            return receipt_id in self._receipts

    def __len__(self) -> int:
        with self._lock:
            return len(self._receipts)


def get_receipt_store(request: Request) -> ReceiptStore:
    """Receipt store dependency"""
    return request.app.state.receipt_store
