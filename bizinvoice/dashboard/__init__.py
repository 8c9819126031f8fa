"""Dashboard aggregation package."""

from bizinvoice.dashboard.aggregator import is_today, local_date, summarize

__all__ = ["is_today", "local_date", "summarize"]
