# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from receipt_points.main import app
from receipt_points.schemas import Receipt

TARGET_RECEIPT = {
    "retailer": "Target",
    "purchaseDate": "2022-01-01",
    "purchaseTime": "13:01",
    "items": [
        {"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
        {"shortDescription": "Emils Cheese Pizza", "price": "12.25"},
        {"shortDescription": "Knorr Creamy Chicken", "price": "1.26"},
        {"shortDescription": "Doritos Nacho Cheese", "price": "3.35"},
        {"shortDescription": "   Klarbrunn 12-PK 12 FL OZ  ", "price": "12.00"},
    ],
    "total": "35.35",
}

CORNER_MARKET_RECEIPT = {
    "retailer": "M&M Corner Market",
    "purchaseDate": "2022-03-20",
    "purchaseTime": "14:33",
    "items": [{"shortDescription": "Gatorade", "price": "2.25"}] * 4,
    "total": "9.00",
}

def make_receipt(**overrides) -> Receipt:
    """Receipt that scores 0 unless a field is overridden."""
    fields = {
        "retailer": "",
        "purchase_date": "2022-01-02",
        "purchase_time": "10:00",
        "items": [],
        "total": "0.01",
    }
    fields.update(overrides)
    return Receipt(**fields)

@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
