"""Database operations package."""

from .base import DatabaseManager
from .companies import COMPANY_FK, INDUSTRY_FK, CompanyOperations
from .errors import ConstraintViolation, ForeignKeyViolation, UniqueViolation
from .industries import IndustryOperations
from .invoices import InvoiceOperations

__all__ = [
    "BizTimeDatabase",
    "DatabaseManager",
    "CompanyOperations",
    "InvoiceOperations",
    "IndustryOperations",
    "ConstraintViolation",
    "ForeignKeyViolation",
    "UniqueViolation",
    "COMPANY_FK",
    "INDUSTRY_FK",
]


class BizTimeDatabase:
    """Companies, invoices and industries behind one engine.

    Usable as a context manager; leaving the block disposes of the engine.
    ``engine_options`` go straight to ``DatabaseManager``.
    """

    def __init__(self, database_url: str, **engine_options):
        self.manager = DatabaseManager(database_url, **engine_options)
        engine = self.manager.engine
        self.companies = CompanyOperations(engine)
        self.invoices = InvoiceOperations(engine)
        self.industries = IndustryOperations(engine)

    def close(self) -> None:
        self.manager.close()

    def __enter__(self) -> "BizTimeDatabase":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
