"""
Deterministic points scoring.

Every rule is an independent function of the receipt; the total is their sum.
Rules are evaluated in ``SCORING_RULES`` order so the per-rule breakdown reads
the same in every log line. Currency is handled as integer cents.
"""
from __future__ import annotations

import logging
from datetime import time
from typing import Callable, NamedTuple

from receipt_processor.schemas import Receipt

logger = logging.getLogger(__name__)

AFTERNOON_START = time(14, 0)
AFTERNOON_END = time(16, 0)


class RuleScore(NamedTuple):
    rule: str
    points: int


# ---------------------------------------------------------------------------
# Individual rules
# ---------------------------------------------------------------------------

def points_for_retailer(receipt: Receipt) -> int:
    """One point for every letter or decimal digit in the retailer name."""
    return sum(1 for ch in receipt.retailer if ch.isalpha() or ch.isdecimal())


def points_for_round_total(receipt: Receipt) -> int:
    """50 points if the total is a round dollar amount with no cents."""
    return 50 if receipt.total_cents % 100 == 0 else 0


def points_for_quarter_total(receipt: Receipt) -> int:
    """25 points if the total is a multiple of 0.25."""
    return 25 if receipt.total_cents % 25 == 0 else 0


def points_for_item_pairs(receipt: Receipt) -> int:
    return (len(receipt.items) // 2) * 5


def points_for_descriptions(receipt: Receipt) -> int:
    """ceil(price * 0.2) for each item whose trimmed description length is a multiple of 3."""
    points = 0
    for item in receipt.items:
        length = len(item.short_description.strip())
        if length > 0 and length % 3 == 0:
            # ceil(cents / 100 * 0.2) == ceil(cents / 500)
            points += -(-item.price_cents // 500)
    return points


def points_for_odd_day(receipt: Receipt) -> int:
    return 6 if receipt.purchase_date.day % 2 == 1 else 0


def points_for_afternoon(receipt: Receipt) -> int:
    """10 points for a purchase from 14:00 up to, not including, 16:00."""
    return 10 if AFTERNOON_START <= receipt.purchase_time < AFTERNOON_END else 0


SCORING_RULES: list[tuple[str, Callable[[Receipt], int]]] = [
    ("retailer_alphanumeric", points_for_retailer),
    ("round_dollar_total", points_for_round_total),
    ("quarter_multiple_total", points_for_quarter_total),
    ("item_pairs", points_for_item_pairs),
    ("item_description_length", points_for_descriptions),
    ("odd_purchase_day", points_for_odd_day),
    ("afternoon_purchase", points_for_afternoon),
]


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------

def score_breakdown(receipt: Receipt) -> list[RuleScore]:
    """Return ``(rule, points)`` for every rule, in evaluation order."""
    return [RuleScore(name, rule(receipt)) for name, rule in SCORING_RULES]


def score_receipt(receipt: Receipt) -> int:
    breakdown = score_breakdown(receipt)
    for entry in breakdown:
        logger.debug("Rule %-24s +%d", entry.rule, entry.points)
    total = sum(entry.points for entry in breakdown)
    logger.info("Scored receipt from %r: %d points", receipt.retailer, total)
    return total
