"""BizTime companies, invoices and industries."""

from .db import BizTimeDatabase
from .models import (
    Company,
    CompanyCreate,
    CompanyDetail,
    CompanyIndustries,
    CompanySummary,
    CompanyUpdate,
    Industry,
    IndustryCompanies,
    IndustryCreate,
    Invoice,
    InvoiceCreate,
    InvoiceDetail,
    InvoiceSummary,
    InvoiceUpdate,
)

__all__ = [
    "BizTimeDatabase",
    "Company",
    "CompanyCreate",
    "CompanyUpdate",
    "CompanySummary",
    "CompanyDetail",
    "CompanyIndustries",
    "Industry",
    "IndustryCreate",
    "IndustryCompanies",
    "Invoice",
    "InvoiceCreate",
    "InvoiceUpdate",
    "InvoiceSummary",
    "InvoiceDetail",
]
