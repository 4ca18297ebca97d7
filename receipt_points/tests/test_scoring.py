# tests/test_scoring.py
import logging

from conftest import CORNER_MARKET_RECEIPT, TARGET_RECEIPT, make_receipt
from receipt_points.schemas import Receipt
from receipt_points.services.scoring import evaluate_receipt, score_receipt

def test_target_receipt_scores_28():
    assert score_receipt(Receipt.model_validate(TARGET_RECEIPT)) == 28

def test_corner_market_receipt_scores_109():
    result = evaluate_receipt(Receipt.model_validate(CORNER_MARKET_RECEIPT))
    assert result["points"] == 109
    assert result["rules"] == {
        "retailer_name": 14,
        "round_dollar_total": 50,
        "quarter_multiple_total": 25,
        "item_pairs": 10,
        "item_descriptions": 0,
        "odd_purchase_day": 0,
        "afternoon_purchase_time": 10,
    }
    assert result["reasons"] == [
        "retailer_name", "round_dollar_total", "quarter_multiple_total",
        "item_pairs", "afternoon_purchase_time",
    ]
    assert result["diagnostics"] == []

def test_scoring_is_idempotent_and_does_not_mutate():
    r = Receipt.model_validate(TARGET_RECEIPT)
    before = r.model_dump()
    assert score_receipt(r) == score_receipt(r)
    assert r.model_dump() == before

def test_everything_malformed_scores_zero_without_raising(caplog):
    r = make_receipt(
        retailer="!!!",
        total="free",
        purchase_date="yesterday",
        purchase_time="noon",
        items=[{"short_description": "abc", "price": "?"}],
    )
    with caplog.at_level(logging.WARNING, logger="receipt_points"):
        result = evaluate_receipt(r)
    assert result["points"] == 0
    assert len(result["diagnostics"]) == 4
    assert "yesterday" in caplog.text
    assert "noon" in caplog.text

def test_empty_receipt_scores_zero():
    assert score_receipt(Receipt()) == 0

def test_score_is_never_negative():
    r = make_receipt(
        total="-10.00",
        items=[{"short_description": "abc", "price": "-99.99"}] * 3,
    )
    assert score_receipt(r) >= 0
