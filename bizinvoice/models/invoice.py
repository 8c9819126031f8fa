"""
Core Data Models for BizInvoice

These models define the schemas for everything that flows through the
system:
1. InvoiceRecord - the one entity we persist
2. InvoiceEntry - validated form input that has not been saved yet
3. DashboardSummary - figures derived from the invoice list
4. ValidationIssue - one problem found in form input
5. RefreshEvent - what collaborators receive after every change

DESIGN DECISION: Persisted keys are camelCase (customerName, productService)
so the stored JSON array keeps its established layout. Python code uses the
snake_case attribute names; the aliases only matter at the storage boundary.
"""

from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    field_validator,
)


def new_invoice_id() -> str:
    """Create a fresh, collision-free invoice identifier."""
    return uuid4().hex


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC timestamp."""
    return datetime.now(timezone.utc)


# =============================================================================
# INVOICE RECORD
# =============================================================================

class InvoiceRecord(BaseModel):
    """
    A single invoice line item as stored.

    CRITICAL: Records are never edited. A record is created once through
    the entry workflow and only ever removed by id afterwards, so the
    model is frozen.

    The total is stored, not recomputed on read. Use create() to build a
    new record so that total == quantity * price holds at creation.
    """
    model_config = ConfigDict(
        str_strip_whitespace=True,
        populate_by_name=True,
        frozen=True,
    )

    id: str = Field(
        default_factory=new_invoice_id,
        min_length=1,
        description="Unique invoice identifier"
    )
    date: datetime = Field(
        default_factory=utc_now,
        description="When the invoice was created"
    )
    customer_name: str = Field(
        ...,
        min_length=1,
        alias="customerName",
        description="Customer the sale was made to"
    )
    product_service: str = Field(
        ...,
        min_length=1,
        alias="productService",
        description="Product or service sold"
    )
    quantity: float = Field(
        ...,
        gt=0,
        allow_inf_nan=False,
        description="Units sold"
    )
    price: float = Field(
        ...,
        ge=0,
        allow_inf_nan=False,
        description="Unit price"
    )
    total: float = Field(
        ...,
        allow_inf_nan=False,
        description="quantity * price, fixed at creation"
    )

    @field_validator('id', mode='before')
    @classmethod
    def coerce_numeric_id(cls, v):
        """Older lists used timestamp numbers as ids."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @classmethod
    def create(
        cls,
        customer_name: str,
        product_service: str,
        quantity: float,
        price: float,
        date: Optional[datetime] = None,
        invoice_id: Optional[str] = None,
    ) -> "InvoiceRecord":
        """Build a new record, computing its total."""
        return cls(
            id=invoice_id or new_invoice_id(),
            date=date or utc_now(),
            customer_name=customer_name,
            product_service=product_service,
            quantity=quantity,
            price=price,
            total=quantity * price,
        )

    def to_storage_dict(self) -> dict:
        """Convert to the JSON-ready dict written to storage."""
        return self.model_dump(mode="json", by_alias=True)


# The persisted blob is exactly one JSON array of records
InvoiceList = TypeAdapter(list[InvoiceRecord])


# =============================================================================
# ENTRY AND DASHBOARD MODELS
# =============================================================================

class InvoiceEntry(BaseModel):
    """
    Form input that passed validation.

    This is PROPOSED data: nothing is persisted until the workflow
    turns it into an InvoiceRecord and appends it to the store.
    """
    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    customer_name: str = Field(..., min_length=1)
    product_service: str = Field(..., min_length=1)
    quantity: float = Field(..., ge=1)
    price: float = Field(..., ge=0)

    @property
    def total(self) -> float:
        return self.quantity * self.price


class DashboardSummary(BaseModel):
    """
    Aggregate figures shown above the invoice table.

    Always derived from the full invoice list, never stored.
    """
    model_config = ConfigDict(frozen=True)

    total_revenue: float = Field(default=0.0)
    invoice_count: int = Field(default=0, ge=0)
    today_sales: float = Field(default=0.0)
    average_invoice: float = Field(default=0.0)


# =============================================================================
# VALIDATION MODELS
# =============================================================================

class ValidationIssue(BaseModel):
    """A single problem found in submitted form input."""

    field: str = Field(
        ...,
        description="Form field with the issue"
    )
    issue_type: str = Field(
        ...,
        description="Type of issue (e.g., 'missing', 'not_a_number', 'out_of_range')"
    )
    message: str = Field(
        ...,
        description="Human-readable description of the issue"
    )
    severity: str = Field(
        default="error",
        pattern="^(error|warning|info)$",
        description="Issue severity"
    )


# =============================================================================
# REFRESH MODELS
# =============================================================================

class RefreshEvent(BaseModel):
    """
    State handed to refresh hooks after every change.

    records is in creation order (oldest first); renderers reverse it
    for newest-first display.
    """
    model_config = ConfigDict(frozen=True)

    records: list[InvoiceRecord] = Field(default_factory=list)
    summary: DashboardSummary = Field(default_factory=DashboardSummary)
