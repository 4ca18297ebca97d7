# scoring.py
from __future__ import annotations
from typing import Any, Dict, List

from ..rules.ruleset import DEFAULT_RULES
from ..schemas import Receipt
from ..utils.logging import logger

# -----------------------------
# Main entry
# -----------------------------
def evaluate_receipt(receipt: Receipt) -> Dict[str, Any]:
    """
    Returns:
      {
        "points": int (>= 0),
        "rules": {rule_name: int},
        "reasons": [str],        # rules that awarded points, in rule order
        "diagnostics": [str],    # sub-fields that failed to parse
      }
    A sub-field that fails to parse only zeroes its own rule; nothing is raised.
    """
    rules: Dict[str, int] = {}
    reasons: List[str] = []
    diagnostics: List[str] = []

    for name, rule in DEFAULT_RULES:
        result = rule(receipt)
        rules[name] = result.points
        if result.reason:
            reasons.append(result.reason)
        if result.error:
            logger.warning("Rule %s skipped: %s", name, result.error)
            diagnostics.append(result.error)

    return {
        "points": sum(rules.values()),
        "rules": rules,
        "reasons": reasons,
        "diagnostics": diagnostics,
    }

def score_receipt(receipt: Receipt) -> int:
    return evaluate_receipt(receipt)["points"]
