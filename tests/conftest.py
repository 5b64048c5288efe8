"""Shared fixtures for checkout engine tests."""

from datetime import datetime, timezone

import pytest

from checkout_engine import (
    CartSession,
    Customer,
    CustomerDirectory,
    InventoryLedger,
    LoyaltyAccount,
    Product,
    ProductCatalog,
    Register,
    SalesAggregator,
)

FIXED_NOW = datetime(2024, 3, 15, 10, 30, tzinfo=timezone.utc)


def fixed_clock() -> datetime:
    return FIXED_NOW


@pytest.fixture
def catalog():
    return ProductCatalog([
        Product("P001", "Olive Oil", "Pantry", 1000, on_weekly_offer=True),
        Product("P002", "Bread", "Bakery", 250),
        Product("P003", "Cheese", "Dairy", 5000),
    ])


@pytest.fixture
def ledger():
    return InventoryLedger({"P001": 10, "P002": 2, "P003": 5})


@pytest.fixture
def customer():
    return Customer(
        "6912345678", "Maria", "Papadopoulou",
        loyalty=LoyaltyAccount("6912345678", balance=250),
    )


@pytest.fixture
def directory(customer):
    return CustomerDirectory([customer])


@pytest.fixture
def aggregator():
    return SalesAggregator()


@pytest.fixture
def session(catalog, ledger, aggregator):
    s = CartSession(catalog, ledger, aggregator, clock=fixed_clock)
    s.start("C-100")
    return s


@pytest.fixture
def register(catalog, ledger, directory, aggregator):
    return Register(catalog, ledger, directory, aggregator, clock=fixed_clock)
