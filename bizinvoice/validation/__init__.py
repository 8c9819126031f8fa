"""Invoice entry validation package."""

from bizinvoice.validation.validator import (
    InvoiceEntryValidator,
    ValidationError,
    parse_number,
)

__all__ = ["InvoiceEntryValidator", "ValidationError", "parse_number"]
