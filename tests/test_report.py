"""Tests for the end-of-day report."""

from checkout_engine import render_report


class TestRenderReport:
    """Tests for render_report."""

    def test_empty_activity(self, ledger, catalog, aggregator, directory) -> None:
        """A fresh run reports stock and empty sections."""
        text = render_report(ledger, catalog, aggregator, directory)

        assert "P001: 10 units (Olive Oil - Pantry)" in text
        assert "No sales recorded" in text
        assert "No customer activity" in text
        assert "Total Sales: 0.00€" in text
        assert "Total Transactions: 0" in text

    def test_after_sales(self, register, ledger, catalog, aggregator, directory) -> None:
        """Sales show up per cashier, per customer and in the summary."""
        register.start_transaction("C-100")
        register.add_item("P003", 1)
        register.set_customer("6912345678")
        register.apply_loyalty_redemption(True)
        register.complete_transaction()

        register.start_transaction("C-200")
        register.add_item("P002", 2)
        register.complete_transaction()

        text = render_report(ledger, catalog, aggregator, directory)

        assert "P003: 4 units (Cheese - Dairy)" in text
        assert "P002: 0 units (Bread - Bakery)" in text
        assert "C-100: 48.00€" in text
        assert "C-200: 5.00€" in text
        assert "Maria Papadopoulou (Phone: 6912345678)" in text
        assert "  Total spent: 48.00€" in text
        assert "  Points earned: 48" in text
        assert "  Points redeemed: 200" in text
        assert "Total Sales: 53.00€" in text
        assert "Total Transactions: 2" in text

    def test_unknown_codes_listed_plainly(self, ledger, catalog, aggregator, directory) -> None:
        """Codes missing from the catalog print without details."""
        ledger.receive("X999", 3)
        text = render_report(ledger, catalog, aggregator, directory, currency="$")

        assert "X999: 3 units" in text
        assert "X999: 3 units (" not in text
        assert "Total Sales: 0.00$" in text
