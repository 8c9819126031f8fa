"""Tests for dashboard aggregation."""

import pytest
from datetime import date, datetime, timedelta, timezone

from bizinvoice.dashboard import is_today, local_date, summarize
from bizinvoice.models.invoice import InvoiceRecord


TODAY = date(2026, 10, 19)


def _record(total_price: float, when: datetime) -> InvoiceRecord:
    return InvoiceRecord.create("Acme", "Widget", 1, total_price, date=when)


class TestIsToday:
    """Tests for the calendar-day comparison."""

    def test_same_calendar_day(self):
        """Test early and late times on the same local day."""
        assert is_today(datetime(2026, 10, 19, 0, 0, 1), TODAY)
        assert is_today(datetime(2026, 10, 19, 23, 59, 59), TODAY)

    def test_previous_day_within_24_hours(self):
        """Test that 'today' is a calendar day, not a rolling window."""
        assert not is_today(datetime(2026, 10, 18, 23, 59, 59), TODAY)

    def test_aware_timestamp_uses_local_date(self):
        """Test that aware timestamps are compared in local time."""
        now = datetime.now(timezone.utc)
        assert is_today(now)
        assert local_date(now) == now.astimezone().date()

    def test_defaults_to_current_date(self):
        """Test the default reference date."""
        assert is_today(datetime.now())
        assert not is_today(datetime.now() - timedelta(days=1))


class TestSummarize:
    """Tests for the four dashboard figures."""

    def test_empty_list(self):
        """Test that an empty list gives zeros, not a division error."""
        summary = summarize([], TODAY)
        assert summary.total_revenue == 0
        assert summary.invoice_count == 0
        assert summary.today_sales == 0
        assert summary.average_invoice == 0

    def test_today_and_yesterday(self):
        """Test that only today's invoices count toward today's sales."""
        records = [
            _record(30, datetime(2026, 10, 19, 10, 0)),
            _record(70, datetime(2026, 10, 18, 10, 0)),
        ]
        summary = summarize(records, TODAY)
        assert summary.total_revenue == 100
        assert summary.invoice_count == 2
        assert summary.today_sales == 30
        assert summary.average_invoice == 50

    def test_totals_match_stored_values(self):
        """Test that revenue is the sum of stored totals."""
        records = [
            InvoiceRecord.create("A", "x", 3, 0.1, date=datetime(2026, 1, 1)),
            InvoiceRecord.create("B", "y", 7, 1.35, date=datetime(2026, 1, 2)),
            InvoiceRecord.create("C", "z", 1, 19.99, date=datetime(2026, 1, 3)),
        ]
        summary = summarize(records, TODAY)
        expected = sum(record.total for record in records)
        assert summary.total_revenue == expected
        assert summary.average_invoice == expected / 3
        assert summary.today_sales == 0

    def test_does_not_recompute_totals(self):
        """Test that stored totals are used as-is."""
        record = InvoiceRecord(
            customer_name="Acme",
            product_service="Widget",
            quantity=2,
            price=10,
            total=25,
            date=datetime(2026, 10, 19, 9, 0),
        )
        assert summarize([record], TODAY).total_revenue == 25


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
