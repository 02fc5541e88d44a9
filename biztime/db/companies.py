"""Company database operations."""

import logging
from typing import List, Optional

from sqlalchemy import MetaData, Table, delete, insert, select, update
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from ..models import (
    Company,
    CompanyCreate,
    CompanyDetail,
    CompanyIndustries,
    CompanySummary,
    CompanyUpdate,
)
from .base import shape_rows, slugify_code
from .errors import translate_integrity_error

logger = logging.getLogger(__name__)

# Foreign keys of the companies_industries join table
COMPANY_FK = "companies_industries_comp_code_fkey"
INDUSTRY_FK = "companies_industries_ind_code_fkey"


class CompanyOperations:
    """Company database operations."""

    def __init__(self, engine: Engine):
        """Initialize with database engine."""
        self.engine = engine
        # Create table metadata
        metadata = MetaData()
        self.companies_table = Table("companies", metadata, autoload_with=engine)
        self.invoices_table = Table("invoices", metadata, autoload_with=engine)
        self.industries_table = Table("industries", metadata, autoload_with=engine)
        self.companies_industries_table = Table(
            "companies_industries", metadata, autoload_with=engine
        )

    def _industry_names(self, conn: Connection, code: str) -> List[str]:
        """Display names of the industries associated with a company."""
        industries = self.industries_table
        joins = self.companies_industries_table
        stmt = (
            select(industries.c.industry)
            .select_from(
                industries.join(joins, industries.c.code == joins.c.ind_code)
            )
            .where(joins.c.comp_code == code)
        )
        return [row.industry for row in conn.execute(stmt)]

    def list_companies(self) -> List[CompanySummary]:
        """Get all companies ordered by name."""
        try:
            with self.engine.connect() as conn:
                stmt = select(
                    self.companies_table.c.code, self.companies_table.c.name
                ).order_by(self.companies_table.c.name)

                result = conn.execute(stmt)
                return [CompanySummary(code=row.code, name=row.name) for row in result]

        except SQLAlchemyError as e:
            logger.error(f"Error listing companies: {e}")
            raise

    def get_company(self, code: str) -> Optional[CompanyDetail]:
        """Get a company with its invoice ids and industry names."""
        try:
            with self.engine.begin() as conn:
                stmt = select(
                    self.companies_table.c.code,
                    self.companies_table.c.name,
                    self.companies_table.c.description,
                ).where(self.companies_table.c.code == code)

                row = shape_rows(conn.execute(stmt).fetchall())
                if row is None:
                    return None

                invoice_stmt = select(self.invoices_table.c.id).where(
                    self.invoices_table.c.comp_code == code
                )
                invoice_ids = [r.id for r in conn.execute(invoice_stmt)]

                return CompanyDetail(
                    code=row.code,
                    name=row.name,
                    description=row.description,
                    invoices=invoice_ids,
                    industries=self._industry_names(conn, code),
                )

        except SQLAlchemyError as e:
            logger.error(f"Error getting company {code}: {e}")
            raise

    def insert_company(self, company: CompanyCreate) -> Company:
        """Insert a new company under the slugified form of its code."""
        code = slugify_code(company.code)
        try:
            with self.engine.begin() as conn:
                stmt = (
                    insert(self.companies_table)
                    .values(
                        code=code,
                        name=company.name,
                        description=company.description,
                    )
                    .returning(
                        self.companies_table.c.code,
                        self.companies_table.c.name,
                        self.companies_table.c.description,
                    )
                )

                row = shape_rows(conn.execute(stmt).fetchall())

            logger.info(f"Inserted company: {row.name} with code: {row.code}")
            return Company(code=row.code, name=row.name, description=row.description)

        except IntegrityError as e:
            logger.error(f"Integrity error inserting company {code}: {e}")
            raise translate_integrity_error(e) from e
        except SQLAlchemyError as e:
            logger.error(f"Error inserting company {code}: {e}")
            raise

    def update_company(
        self, code: str, company_update: CompanyUpdate
    ) -> Optional[Company]:
        """Update name and description of a company. Returns None if missing."""
        try:
            with self.engine.begin() as conn:
                stmt = (
                    update(self.companies_table)
                    .where(self.companies_table.c.code == code)
                    .values(
                        name=company_update.name,
                        description=company_update.description,
                    )
                    .returning(
                        self.companies_table.c.code,
                        self.companies_table.c.name,
                        self.companies_table.c.description,
                    )
                )

                row = shape_rows(conn.execute(stmt).fetchall())

            if row is None:
                logger.warning(f"Company not found for update: {code}")
                return None

            logger.info(f"Updated company: {code}")
            return Company(code=row.code, name=row.name, description=row.description)

        except IntegrityError as e:
            logger.error(f"Integrity error updating company {code}: {e}")
            raise translate_integrity_error(e) from e
        except SQLAlchemyError as e:
            logger.error(f"Error updating company {code}: {e}")
            raise

    def add_industry(self, code: str, ind_code: str) -> CompanyIndustries:
        """Associate an industry with a company.

        Raises ``ForeignKeyViolation`` naming ``COMPANY_FK`` or
        ``INDUSTRY_FK`` when either side is missing, and ``UniqueViolation``
        when the association already exists.
        """
        try:
            with self.engine.begin() as conn:
                conn.execute(
                    insert(self.companies_industries_table).values(
                        comp_code=code, ind_code=ind_code
                    )
                )

                stmt = select(
                    self.companies_table.c.code, self.companies_table.c.name
                ).where(self.companies_table.c.code == code)
                row = shape_rows(conn.execute(stmt).fetchall())

                company = CompanyIndustries(
                    code=row.code,
                    name=row.name,
                    industries=self._industry_names(conn, code),
                )

            logger.info(f"Added industry {ind_code} to company {code}")
            return company

        except IntegrityError as e:
            logger.error(f"Integrity error adding industry {ind_code} to {code}: {e}")
            raise translate_integrity_error(e) from e
        except SQLAlchemyError as e:
            logger.error(f"Error adding industry {ind_code} to {code}: {e}")
            raise

    def delete_company(self, code: str) -> bool:
        """Delete a company along with its invoices and associations."""
        try:
            with self.engine.begin() as conn:
                stmt = delete(self.companies_table).where(
                    self.companies_table.c.code == code
                )
                result = conn.execute(stmt)
                deleted = result.rowcount > 0

            if deleted:
                logger.info(f"Deleted company: {code}")
            else:
                logger.warning(f"Company not found for deletion: {code}")

            return deleted

        except SQLAlchemyError as e:
            logger.error(f"Error deleting company {code}: {e}")
            raise
