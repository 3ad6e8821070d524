"""
Shared pytest fixtures — fresh in-memory store + FastAPI TestClient.
"""
import pytest
from fastapi.testclient import TestClient

from receipt_processor.main import app
from receipt_processor.store import ReceiptStore, get_receipt_store


@pytest.fixture()
def store():
    return ReceiptStore()


@pytest.fixture()
def client(store):
    app.dependency_overrides[get_receipt_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def target_receipt() -> dict:
    return {
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


@pytest.fixture()
def corner_market_receipt() -> dict:
    return {
        "retailer": "M&M Corner Market",
        "purchaseDate": "2022-03-20",
        "purchaseTime": "14:33",
        "items": [{"shortDescription": "Gatorade", "price": "2.25"} for _ in range(4)],
        "total": "9.00",
    }
