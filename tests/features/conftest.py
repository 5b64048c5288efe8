"""Pytest-bdd configuration and shared fixtures for checkout feature tests."""

import pytest

from checkout_engine import (
    CustomerDirectory,
    InventoryLedger,
    ProductCatalog,
    Register,
    SalesAggregator,
)


@pytest.fixture
def context():
    """Shared test context for scenario state."""
    return {"error": None, "line": None, "receipt": None}


@pytest.fixture
def till(context):
    """Register over empty repositories, filled in by Given steps."""
    register = Register(ProductCatalog(), InventoryLedger(), CustomerDirectory(), SalesAggregator())
    context["register"] = register
    return register
