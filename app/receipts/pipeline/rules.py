"""
Rule-based loyalty points calculation.

Every rule is a pure function of the receipt returning a non-negative
contribution. Malformed amounts, dates and times contribute zero.
"""
from __future__ import annotations

import logging
import re
from datetime import time
from decimal import ROUND_CEILING, Decimal, localcontext

from app.receipts.pipeline.parsing import (
    is_multiple_of,
    parse_amount,
    parse_date,
    parse_time,
)
from app.receipts.schemas import Receipt

logger = logging.getLogger(__name__)

_ALNUM_RE = re.compile(r"[A-Za-z0-9]")

ROUND_DOLLAR_POINTS = 50
QUARTER_MULTIPLE_POINTS = 25
TOTAL_THRESHOLD = Decimal("10.00")
TOTAL_THRESHOLD_POINTS = 5
ITEM_PAIR_POINTS = 5
DESCRIPTION_MULTIPLE = 3
PRICE_MULTIPLIER = Decimal("0.2")
ODD_DAY_POINTS = 6
AFTERNOON_START = time(14, 0)
AFTERNOON_END = time(16, 0)
AFTERNOON_POINTS = 10

# Totals above this many bits are abbreviated in log output, well under the
# interpreter's int-to-str digit limit.
MAX_LOGGED_POINTS_BITS = 3000


# ---------------------------------------------------------------------------
# Individual rules
# ---------------------------------------------------------------------------

def rule_retailer_alphanumeric(receipt: Receipt) -> int:
    """One point per ASCII letter or digit in the retailer name."""
    return len(_ALNUM_RE.findall(receipt.retailer))


def rule_round_dollar_total(receipt: Receipt) -> int:
    total = parse_amount(receipt.total)
    if total is None:
        logger.debug("Unparseable total: %r", receipt.total)
        return 0
    return ROUND_DOLLAR_POINTS if is_multiple_of(total, 100) else 0


def rule_quarter_multiple_total(receipt: Receipt) -> int:
    total = parse_amount(receipt.total)
    if total is None:
        return 0
    return QUARTER_MULTIPLE_POINTS if is_multiple_of(total, 25) else 0


def rule_total_over_threshold(receipt: Receipt) -> int:
    total = parse_amount(receipt.total)
    if total is None:
        return 0
    return TOTAL_THRESHOLD_POINTS if total > TOTAL_THRESHOLD else 0


def rule_item_pairs(receipt: Receipt) -> int:
    """Five points for every two items; a trailing single item earns nothing."""
    return (len(receipt.items) // 2) * ITEM_PAIR_POINTS


def price_bonus(price: Decimal) -> int:
    """Exact ceil(price * 0.2), with enough precision to keep every digit of *price*."""
    with localcontext() as ctx:
        ctx.prec = len(price.as_tuple().digits) + 2
        return int((price * PRICE_MULTIPLIER).to_integral_value(rounding=ROUND_CEILING))


def rule_item_description_length(receipt: Receipt) -> int:
    """ceil(price * 0.2) for each item whose trimmed description length is a multiple of 3."""
    points = 0
    for item in receipt.items:
        if len(item.short_description.strip()) % DESCRIPTION_MULTIPLE != 0:
            continue
        price = parse_amount(item.price)
        if price is None:
            logger.debug("Unparseable price: %r", item.price)
            continue
        try:
            bonus = price_bonus(price)
        except ArithmeticError:
            logger.debug("Price out of range: %r", item.price)
            continue
        points += max(bonus, 0)
    return points


def rule_odd_purchase_day(receipt: Receipt) -> int:
    purchased = parse_date(receipt.purchase_date)
    if purchased is None:
        logger.debug("Unparseable purchase date: %r", receipt.purchase_date)
        return 0
    return ODD_DAY_POINTS if purchased.day % 2 == 1 else 0


def rule_afternoon_purchase(receipt: Receipt) -> int:
    """Ten points for purchases from 14:00 up to, but not including, 16:00."""
    purchased = parse_time(receipt.purchase_time)
    if purchased is None:
        logger.debug("Unparseable purchase time: %r", receipt.purchase_time)
        return 0
    return AFTERNOON_POINTS if AFTERNOON_START <= purchased < AFTERNOON_END else 0


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

RULES = {
    "retailer_alphanumeric": rule_retailer_alphanumeric,
    "round_dollar_total": rule_round_dollar_total,
    "quarter_multiple_total": rule_quarter_multiple_total,
    "total_over_threshold": rule_total_over_threshold,
    "item_pairs": rule_item_pairs,
    "item_description_length": rule_item_description_length,
    "odd_purchase_day": rule_odd_purchase_day,
    "afternoon_purchase": rule_afternoon_purchase,
}


def score_breakdown(receipt: Receipt) -> dict[str, int]:
    """Run every registered rule and return its contribution, keyed by rule name."""
    return {name: fn(receipt) for name, fn in RULES.items()}


def calculate_points(receipt: Receipt) -> int:
    breakdown = score_breakdown(receipt)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Points breakdown: %s",
            {name: loggable_points(points) for name, points in breakdown.items()},
        )
    return sum(breakdown.values())


def loggable_points(points: int) -> str:
    """Render a points value for log output, abbreviating very large totals."""
    if points.bit_length() > MAX_LOGGED_POINTS_BITS:
        return f"<{points.bit_length()}-bit total>"
    return str(points)
