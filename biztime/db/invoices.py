"""Invoice database operations."""

import logging
from typing import List, Optional

from sqlalchemy import MetaData, Table, delete, func, insert, select, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from ..models import (
    Company,
    Invoice,
    InvoiceCreate,
    InvoiceDetail,
    InvoiceSummary,
    InvoiceUpdate,
)
from .base import shape_rows
from .errors import translate_integrity_error

logger = logging.getLogger(__name__)


class InvoiceOperations:
    """Invoice database operations."""

    def __init__(self, engine: Engine):
        """Initialize with database engine."""
        self.engine = engine
        # Create table metadata
        metadata = MetaData()
        self.invoices_table = Table("invoices", metadata, autoload_with=engine)
        self.companies_table = Table("companies", metadata, autoload_with=engine)

    def _returning_columns(self):
        table = self.invoices_table
        return (
            table.c.id,
            table.c.comp_code,
            table.c.amt,
            table.c.paid,
            table.c.add_date,
            table.c.paid_date,
        )

    @staticmethod
    def _to_invoice(row) -> Invoice:
        return Invoice(
            id=row.id,
            comp_code=row.comp_code,
            amt=row.amt,
            paid=row.paid,
            add_date=row.add_date,
            paid_date=row.paid_date,
        )

    def list_invoices(self) -> List[InvoiceSummary]:
        """Get all invoices."""
        try:
            with self.engine.connect() as conn:
                stmt = select(
                    self.invoices_table.c.id, self.invoices_table.c.comp_code
                ).order_by(self.invoices_table.c.id)

                result = conn.execute(stmt)
                return [
                    InvoiceSummary(id=row.id, comp_code=row.comp_code)
                    for row in result
                ]

        except SQLAlchemyError as e:
            logger.error(f"Error listing invoices: {e}")
            raise

    def get_invoice(self, invoice_id: int) -> Optional[InvoiceDetail]:
        """Get an invoice with its company nested."""
        try:
            with self.engine.begin() as conn:
                invoices = self.invoices_table
                stmt = select(
                    invoices.c.id,
                    invoices.c.amt,
                    invoices.c.paid,
                    invoices.c.add_date,
                    invoices.c.paid_date,
                ).where(invoices.c.id == invoice_id)

                row = shape_rows(conn.execute(stmt).fetchall())
                if row is None:
                    return None

                companies = self.companies_table
                company_stmt = (
                    select(
                        companies.c.code, companies.c.name, companies.c.description
                    )
                    .select_from(
                        companies.join(
                            invoices, companies.c.code == invoices.c.comp_code
                        )
                    )
                    .where(invoices.c.id == invoice_id)
                )
                company_row = shape_rows(conn.execute(company_stmt).fetchall())

                return InvoiceDetail(
                    id=row.id,
                    amt=row.amt,
                    paid=row.paid,
                    add_date=row.add_date,
                    paid_date=row.paid_date,
                    company=Company(
                        code=company_row.code,
                        name=company_row.name,
                        description=company_row.description,
                    ),
                )

        except SQLAlchemyError as e:
            logger.error(f"Error getting invoice {invoice_id}: {e}")
            raise

    def insert_invoice(self, invoice: InvoiceCreate) -> Invoice:
        """Insert an unpaid invoice dated today."""
        try:
            with self.engine.begin() as conn:
                stmt = (
                    insert(self.invoices_table)
                    .values(comp_code=invoice.comp_code, amt=invoice.amt)
                    .returning(*self._returning_columns())
                )

                row = shape_rows(conn.execute(stmt).fetchall())

            logger.info(f"Inserted invoice {row.id} for company: {row.comp_code}")
            return self._to_invoice(row)

        except IntegrityError as e:
            logger.error(f"Integrity error inserting invoice: {e}")
            raise translate_integrity_error(e) from e
        except SQLAlchemyError as e:
            logger.error(f"Error inserting invoice: {e}")
            raise

    def update_invoice(
        self, invoice_id: int, invoice_update: InvoiceUpdate
    ) -> Optional[Invoice]:
        """Merge an amount and/or paid status into an invoice.

        A boolean ``paid`` sets the paid date to today when true and clears it
        when false. Anything else keeps the current paid status and date. A
        missing ``amt`` keeps the current amount. Returns None if the invoice
        does not exist.
        """
        try:
            with self.engine.begin() as conn:
                invoices = self.invoices_table
                current_stmt = (
                    select(invoices.c.amt, invoices.c.paid, invoices.c.paid_date)
                    .where(invoices.c.id == invoice_id)
                    .with_for_update()
                )
                current = shape_rows(conn.execute(current_stmt).fetchall())
                if current is None:
                    logger.warning(f"Invoice not found for update: {invoice_id}")
                    return None

                amt = (
                    invoice_update.amt
                    if invoice_update.amt is not None
                    else current.amt
                )
                if isinstance(invoice_update.paid, bool):
                    paid = invoice_update.paid
                    paid_date = func.current_date() if paid else None
                else:
                    paid = current.paid
                    paid_date = current.paid_date

                stmt = (
                    update(invoices)
                    .where(invoices.c.id == invoice_id)
                    .values(amt=amt, paid=paid, paid_date=paid_date)
                    .returning(*self._returning_columns())
                )
                row = shape_rows(conn.execute(stmt).fetchall())

            logger.info(f"Updated invoice: {invoice_id}")
            return self._to_invoice(row)

        except IntegrityError as e:
            logger.error(f"Integrity error updating invoice {invoice_id}: {e}")
            raise translate_integrity_error(e) from e
        except SQLAlchemyError as e:
            logger.error(f"Error updating invoice {invoice_id}: {e}")
            raise

    def delete_invoice(self, invoice_id: int) -> bool:
        """Delete an invoice."""
        try:
            with self.engine.begin() as conn:
                stmt = delete(self.invoices_table).where(
                    self.invoices_table.c.id == invoice_id
                )
                result = conn.execute(stmt)
                deleted = result.rowcount > 0

            if deleted:
                logger.info(f"Deleted invoice: {invoice_id}")
            else:
                logger.warning(f"Invoice not found for deletion: {invoice_id}")

            return deleted

        except SQLAlchemyError as e:
            logger.error(f"Error deleting invoice {invoice_id}: {e}")
            raise
