"""Database models package."""

from .company import (
    Company,
    CompanyBase,
    CompanyCreate,
    CompanyDetail,
    CompanyIndustries,
    CompanySummary,
    CompanyUpdate,
)
from .industry import Industry, IndustryCompanies, IndustryCreate
from .invoice import (
    Invoice,
    InvoiceCreate,
    InvoiceDetail,
    InvoiceSummary,
    InvoiceUpdate,
)

__all__ = [
    "CompanyBase",
    "CompanyCreate",
    "CompanyUpdate",
    "Company",
    "CompanySummary",
    "CompanyDetail",
    "CompanyIndustries",
    "IndustryCreate",
    "Industry",
    "IndustryCompanies",
    "InvoiceCreate",
    "InvoiceUpdate",
    "InvoiceSummary",
    "Invoice",
    "InvoiceDetail",
]
