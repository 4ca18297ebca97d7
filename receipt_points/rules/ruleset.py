# receipt_points/rules/ruleset.py
from __future__ import annotations

import math
import re
import string
from datetime import datetime
from decimal import Decimal
from typing import Callable, List, NamedTuple, Optional, Tuple

from ..schemas import Receipt

# -----------------------------
# Tunables
# -----------------------------
WEIGHTS = {
    "retailer_name": 1,          # per ASCII alphanumeric character
    "round_dollar_total": 50,
    "quarter_multiple_total": 25,
    "item_pairs": 5,             # per two items
    "odd_purchase_day": 6,
    "afternoon_purchase_time": 10,
}

DESCRIPTION_LENGTH_MULTIPLE = 3
DESCRIPTION_PRICE_RATE = Decimal("0.2")
AFTERNOON_START_HOUR = 14   # inclusive
AFTERNOON_END_HOUR = 16     # exclusive

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"
# month, day and minute must be zero-padded, the hour need not be
DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
TIME_RE = re.compile(r"\d{1,2}:\d{2}", re.ASCII)

ALNUM = frozenset(string.ascii_letters + string.digits)
AMOUNT_RE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII)
MAX_AMOUNT_EXPONENT = 308  # beyond float64 range the amount counts as unparseable


class RuleResult(NamedTuple):
    points: int
    reason: Optional[str] = None
    error: Optional[str] = None


Rule = Callable[[Receipt], RuleResult]

# -----------------------------
# Helpers
# -----------------------------
def parse_amount(text: str) -> Optional[Decimal]:
    """
    Parse a textual currency amount ("12.25") into a Decimal.
    Accepts an optional sign and exponent ("1e3"). Returns None for anything
    else, including surrounding whitespace, NaN, Infinity and amounts too
    large for a float.
    """
    if not AMOUNT_RE.fullmatch(text):
        return None
    try:
        amount = Decimal(text)
    except ArithmeticError:
        return None
    if amount and amount.adjusted() > MAX_AMOUNT_EXPONENT:
        return None
    return amount

def _hit(name: str, points: int) -> RuleResult:
    return RuleResult(points, name if points else None)

# -----------------------------
# Rules
# -----------------------------
def retailer_name(receipt: Receipt) -> RuleResult:
    count = sum(1 for ch in receipt.retailer if ch in ALNUM)
    return _hit("retailer_name", count * WEIGHTS["retailer_name"])

def round_dollar_total(receipt: Receipt) -> RuleResult:
    # suffix test on the text, not a numeric comparison
    if receipt.total.endswith(".00"):
        return _hit("round_dollar_total", WEIGHTS["round_dollar_total"])
    return RuleResult(0)

def quarter_multiple_total(receipt: Receipt) -> RuleResult:
    amount = parse_amount(receipt.total)
    if amount is None:
        return RuleResult(0, error=f"Could not parse total {receipt.total!r}")
    cents = int(amount * 100)  # truncates toward zero
    if cents % 25 == 0:
        return _hit("quarter_multiple_total", WEIGHTS["quarter_multiple_total"])
    return RuleResult(0)

def item_pairs(receipt: Receipt) -> RuleResult:
    return _hit("item_pairs", (len(receipt.items) // 2) * WEIGHTS["item_pairs"])

def item_descriptions(receipt: Receipt) -> RuleResult:
    total = 0
    errors: List[str] = []
    for idx, item in enumerate(receipt.items):
        # length in UTF-8 bytes; all-whitespace trims to 0, which qualifies
        if len(item.short_description.strip().encode("utf-8")) % DESCRIPTION_LENGTH_MULTIPLE != 0:
            continue
        price = parse_amount(item.price)
        if price is None:
            errors.append(f"Could not parse price {item.price!r} of item {idx}")
            continue
        total += max(0, math.ceil(price * DESCRIPTION_PRICE_RATE))
    return RuleResult(total, "item_descriptions" if total else None,
                      "; ".join(errors) or None)

def odd_purchase_day(receipt: Receipt) -> RuleResult:
    if not DATE_RE.fullmatch(receipt.purchase_date):
        return RuleResult(0, error=f"Could not parse purchase date {receipt.purchase_date!r}: expected YYYY-MM-DD")
    try:
        day = datetime.strptime(receipt.purchase_date, DATE_FORMAT).day
    except ValueError as e:
        return RuleResult(0, error=f"Could not parse purchase date {receipt.purchase_date!r}: {e}")
    if day % 2 == 1:
        return _hit("odd_purchase_day", WEIGHTS["odd_purchase_day"])
    return RuleResult(0)

def afternoon_purchase_time(receipt: Receipt) -> RuleResult:
    if not TIME_RE.fullmatch(receipt.purchase_time):
        return RuleResult(0, error=f"Could not parse purchase time {receipt.purchase_time!r}: expected HH:MM")
    try:
        hour = datetime.strptime(receipt.purchase_time, TIME_FORMAT).hour
    except ValueError as e:
        return RuleResult(0, error=f"Could not parse purchase time {receipt.purchase_time!r}: {e}")
    if AFTERNOON_START_HOUR <= hour < AFTERNOON_END_HOUR:
        return _hit("afternoon_purchase_time", WEIGHTS["afternoon_purchase_time"])
    return RuleResult(0)


DEFAULT_RULES: Tuple[Tuple[str, Rule], ...] = (
    ("retailer_name", retailer_name),
    ("round_dollar_total", round_dollar_total),
    ("quarter_multiple_total", quarter_multiple_total),
    ("item_pairs", item_pairs),
    ("item_descriptions", item_descriptions),
    ("odd_purchase_day", odd_purchase_day),
    ("afternoon_purchase_time", afternoon_purchase_time),
)
