"""Industry database operations."""

import logging
from typing import List, Optional

from sqlalchemy import MetaData, Table, delete, insert, select
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from ..models import Industry, IndustryCompanies, IndustryCreate
from .base import shape_rows, slugify_code
from .errors import translate_integrity_error

logger = logging.getLogger(__name__)


class IndustryOperations:
    """Industry database operations."""

    def __init__(self, engine: Engine):
        """Initialize with database engine."""
        self.engine = engine
        # Create table metadata
        metadata = MetaData()
        self.industries_table = Table("industries", metadata, autoload_with=engine)
        self.companies_industries_table = Table(
            "companies_industries", metadata, autoload_with=engine
        )

    def _company_codes(self, conn: Connection, code: str) -> List[str]:
        joins = self.companies_industries_table
        stmt = select(joins.c.comp_code).where(joins.c.ind_code == code)
        return [row.comp_code for row in conn.execute(stmt)]

    def list_industries(self) -> List[IndustryCompanies]:
        """Get every industry code with its associated company codes."""
        try:
            with self.engine.begin() as conn:
                stmt = select(self.industries_table.c.code).order_by(
                    self.industries_table.c.code
                )
                codes = [row.code for row in conn.execute(stmt)]

                return [
                    IndustryCompanies(
                        code=code, companies=self._company_codes(conn, code)
                    )
                    for code in codes
                ]

        except SQLAlchemyError as e:
            logger.error(f"Error listing industries: {e}")
            raise

    def get_industry(self, code: str) -> Optional[IndustryCompanies]:
        """Get an industry code with its associated company codes."""
        try:
            with self.engine.begin() as conn:
                stmt = select(self.industries_table.c.code).where(
                    self.industries_table.c.code == code
                )
                row = shape_rows(conn.execute(stmt).fetchall())
                if row is None:
                    return None

                return IndustryCompanies(
                    code=row.code, companies=self._company_codes(conn, row.code)
                )

        except SQLAlchemyError as e:
            logger.error(f"Error getting industry {code}: {e}")
            raise

    def insert_industry(self, industry: IndustryCreate) -> Industry:
        """Insert a new industry under the slugified form of its code."""
        code = slugify_code(industry.code)
        try:
            with self.engine.begin() as conn:
                stmt = (
                    insert(self.industries_table)
                    .values(code=code, industry=industry.industry)
                    .returning(
                        self.industries_table.c.code,
                        self.industries_table.c.industry,
                    )
                )

                row = shape_rows(conn.execute(stmt).fetchall())

            logger.info(f"Inserted industry: {row.industry} with code: {row.code}")
            return Industry(code=row.code, industry=row.industry)

        except IntegrityError as e:
            logger.error(f"Integrity error inserting industry {code}: {e}")
            raise translate_integrity_error(e) from e
        except SQLAlchemyError as e:
            logger.error(f"Error inserting industry {code}: {e}")
            raise

    def delete_industry(self, code: str) -> bool:
        """Delete an industry along with its company associations."""
        try:
            with self.engine.begin() as conn:
                stmt = delete(self.industries_table).where(
                    self.industries_table.c.code == code
                )
                result = conn.execute(stmt)
                deleted = result.rowcount > 0

            if deleted:
                logger.info(f"Deleted industry: {code}")
            else:
                logger.warning(f"Industry not found for deletion: {code}")

            return deleted

        except SQLAlchemyError as e:
            logger.error(f"Error deleting industry {code}: {e}")
            raise
