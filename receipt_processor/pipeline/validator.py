"""
Rule-based receipt validation.

Checks run in a fixed order and stop at the first failure. Each field rule is
a named predicate so it can be exercised on its own; ``validate_receipt``
composes them and raises ``ReceiptValidationError`` with the failing reason.
"""
from __future__ import annotations

import re
from datetime import date, datetime, time
from typing import Any

from receipt_processor.errors import ReceiptValidationError
from receipt_processor.schemas import Item, Receipt

# ASCII classes: \w is [A-Za-z0-9_] and \s is [ \t\n\r\f\v]
RETAILER_PATTERN = re.compile(r"[\w\s\-&]+", re.ASCII)
DESCRIPTION_PATTERN = re.compile(r"[\w\s\-]+", re.ASCII)
AMOUNT_PATTERN = re.compile(r"\d+\.\d{2}", re.ASCII)
# Upper bound on amount strings, point and cents included
MAX_AMOUNT_LENGTH = 32
DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
TIME_PATTERN = re.compile(r"\d{2}:\d{2}", re.ASCII)

RECEIPT_FIELDS = ("retailer", "purchaseDate", "purchaseTime", "items", "total")
ITEM_FIELDS = ("shortDescription", "price")


# ---------------------------------------------------------------------------
# Field predicates
# ---------------------------------------------------------------------------

def is_valid_retailer(value: str) -> bool:
    return RETAILER_PATTERN.fullmatch(value) is not None


def is_valid_description(value: str) -> bool:
    return DESCRIPTION_PATTERN.fullmatch(value) is not None


def is_valid_price(value: str) -> bool:
    """Non-negative amount with exactly two decimals, no sign or separators."""
    return len(value) <= MAX_AMOUNT_LENGTH and AMOUNT_PATTERN.fullmatch(value) is not None


def parse_purchase_date(value: str) -> date | None:
    """Return the calendar date for an exact ``YYYY-MM-DD`` string, else None."""
    if DATE_PATTERN.fullmatch(value) is None:
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        return None


def parse_purchase_time(value: str) -> time | None:
    """Return the time of day for an exact 24-hour ``HH:MM`` string, else None."""
    if TIME_PATTERN.fullmatch(value) is None:
        return None
    try:
        return datetime.strptime(value, "%H:%M").time()
    except ValueError:
        return None


def is_valid_purchase_date(value: str) -> bool:
    return parse_purchase_date(value) is not None


def is_valid_purchase_time(value: str) -> bool:
    return parse_purchase_time(value) is not None


# ---------------------------------------------------------------------------
# Receipt validation
# ---------------------------------------------------------------------------

def _has_fields(raw: Any, names: tuple[str, ...]) -> bool:
    return isinstance(raw, dict) and all(raw.get(name) is not None for name in names)


def _has_string_fields(raw: dict, names: tuple[str, ...]) -> bool:
    return all(isinstance(raw[name], str) for name in names)


def _validate_item(raw_item: Any) -> Item:
    if not _has_fields(raw_item, ITEM_FIELDS) or not _has_string_fields(raw_item, ITEM_FIELDS):
        raise ReceiptValidationError("item_missing_fields")
    if not is_valid_description(raw_item["shortDescription"]):
        raise ReceiptValidationError("invalid_item_description")
    if not is_valid_price(raw_item["price"]):
        raise ReceiptValidationError("invalid_item_price")
    return Item(short_description=raw_item["shortDescription"], price=raw_item["price"])


def validate_receipt(raw: Any) -> Receipt:
    """Validate a decoded JSON payload and return the typed ``Receipt``.

    Raises ``ReceiptValidationError`` whose ``reason`` names the first rule
    that failed.
    """
    if not _has_fields(raw, RECEIPT_FIELDS):
        raise ReceiptValidationError("missing_fields")
    if not isinstance(raw["items"], list) or not _has_string_fields(
        raw, ("retailer", "purchaseDate", "purchaseTime", "total")
    ):
        raise ReceiptValidationError("missing_fields")
    if not raw["items"]:
        raise ReceiptValidationError("no_items")

    if not is_valid_retailer(raw["retailer"]):
        raise ReceiptValidationError("invalid_retailer")

    purchase_date = parse_purchase_date(raw["purchaseDate"])
    if purchase_date is None:
        raise ReceiptValidationError("invalid_purchase_date")

    purchase_time = parse_purchase_time(raw["purchaseTime"])
    if purchase_time is None:
        raise ReceiptValidationError("invalid_purchase_time")

    if not is_valid_price(raw["total"]):
        raise ReceiptValidationError("invalid_total")

    items = tuple(_validate_item(raw_item) for raw_item in raw["items"])

    return Receipt(
        retailer=raw["retailer"],
        purchase_date=purchase_date,
        purchase_time=purchase_time,
        items=items,
        total=raw["total"],
    )
