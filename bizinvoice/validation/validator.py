"""
Invoice Entry Validation

Form input arrives as whatever the UI hands us: strings from text boxes,
numbers from number widgets, or None for fields left untouched.

Rules, checked in this order:
1. Customer name and product/service must be non-empty after trimming
2. Quantity must be a number and at least 1
3. Price must be a number and not negative
4. Quantity times price must be a finite number

All rules are evaluated before anything is decided, so the user sees
every problem at once. Validation NEVER repairs input; it only reports.
"""

import math
from typing import Any, Optional

from bizinvoice.models.invoice import InvoiceEntry, ValidationIssue


MIN_QUANTITY = 1
MIN_PRICE = 0


class ValidationError(Exception):
    """
    Submitted form input is invalid.

    Carries a user-facing message plus the individual issues.
    """

    def __init__(self, message: str, issues: Optional[list[ValidationIssue]] = None):
        super().__init__(message)
        self.message = message
        self.issues = issues or []


def parse_number(value: Any) -> Optional[float]:
    """
    Parse a form value as a finite number.

    Accepts ints, floats and numeric strings (surrounding whitespace is
    ignored). Returns None for anything else, including booleans, blank
    strings, NaN and infinities.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


class InvoiceEntryValidator:
    """Validates invoice form input and produces an InvoiceEntry."""

    def _validate_text(
        self,
        field: str,
        label: str,
        value: Any,
    ) -> list[ValidationIssue]:
        if value is None or not str(value).strip():
            return [ValidationIssue(
                field=field,
                issue_type="missing",
                message=f"{label} is required.",
            )]
        return []

    def _validate_number(
        self,
        field: str,
        label: str,
        value: Any,
        minimum: float,
        range_message: str,
    ) -> tuple[Optional[float], list[ValidationIssue]]:
        if value is None or (isinstance(value, str) and not value.strip()):
            return None, [ValidationIssue(
                field=field,
                issue_type="missing",
                message=f"{label} is required.",
            )]

        number = parse_number(value)
        if number is None:
            return None, [ValidationIssue(
                field=field,
                issue_type="not_a_number",
                message=f"{label} must be a number.",
            )]

        if number < minimum:
            return None, [ValidationIssue(
                field=field,
                issue_type="out_of_range",
                message=range_message,
            )]

        return number, []

    def collect_issues(
        self,
        customer_name: Any,
        product_service: Any,
        quantity: Any,
        price: Any,
    ) -> list[ValidationIssue]:
        """Run every rule and return all issues found, in rule order."""
        issues = []
        issues.extend(self._validate_text("customer_name", "Customer name", customer_name))
        issues.extend(self._validate_text("product_service", "Product/service", product_service))

        quantity_value, quantity_issues = self._validate_number(
            "quantity", "Quantity", quantity, MIN_QUANTITY,
            "Quantity must be at least 1.",
        )
        issues.extend(quantity_issues)

        price_value, price_issues = self._validate_number(
            "price", "Price", price, MIN_PRICE,
            "Price cannot be negative.",
        )
        issues.extend(price_issues)

        if quantity_value is not None and price_value is not None:
            if not math.isfinite(quantity_value * price_value):
                issues.append(ValidationIssue(
                    field="total",
                    issue_type="out_of_range",
                    message="Total is too large.",
                ))

        return issues

    def validate(
        self,
        customer_name: Any,
        product_service: Any,
        quantity: Any,
        price: Any,
    ) -> InvoiceEntry:
        """
        Validate form input.

        Returns:
            The trimmed, parsed entry

        Raises:
            ValidationError: If any rule fails
        """
        issues = self.collect_issues(customer_name, product_service, quantity, price)
        if issues:
            raise ValidationError(self.get_user_friendly_summary(issues), issues)

        return InvoiceEntry(
            customer_name=str(customer_name),
            product_service=str(product_service),
            quantity=parse_number(quantity),
            price=parse_number(price),
        )

    def get_user_friendly_summary(self, issues: list[ValidationIssue]) -> str:
        """One line per issue, in rule order."""
        return "\n".join(issue.message for issue in issues)
