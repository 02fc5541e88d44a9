"""Invoice pydantic models."""

from datetime import date
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from .company import Company


class InvoiceCreate(BaseModel):
    """Model for creating an invoice."""

    comp_code: str
    amt: float


class InvoiceUpdate(BaseModel):
    """Model for updating an invoice.

    ``paid`` only takes effect when it is an actual boolean; any other value
    leaves the paid status and paid date untouched.
    """

    amt: Optional[float] = None
    paid: Any = None


class InvoiceSummary(BaseModel):
    """Invoice listing entry."""

    id: int
    comp_code: str


class Invoice(BaseModel):
    """Complete invoice model."""

    id: int
    comp_code: str
    amt: float
    paid: bool
    add_date: date
    paid_date: Optional[date] = None

    model_config = ConfigDict(from_attributes=True)


class InvoiceDetail(BaseModel):
    """Invoice with its owning company nested."""

    id: int
    amt: float
    paid: bool
    add_date: date
    paid_date: Optional[date] = None
    company: Company
