"""
Receipt processing pipeline.

validate (raw JSON → Receipt) and score (Receipt → points).
"""
from receipt_processor.pipeline.scoring import score_breakdown, score_receipt
from receipt_processor.pipeline.validator import validate_receipt

__all__ = ["score_breakdown", "score_receipt", "validate_receipt"]
