"""
BizInvoice - Source Package

A small invoicing and sales tracking log for one user: enter invoice
line items, keep them in local storage, and watch the dashboard totals.

DESIGN PRINCIPLES:
1. Validate everything before anything is saved
2. Records are created and deleted, never edited
3. Dashboard figures are always recomputed, never stored
4. Storage layer is swappable
"""

__version__ = "1.0.0"
__author__ = "BizInvoice Team"
