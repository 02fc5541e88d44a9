"""Company pydantic models."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class CompanyBase(BaseModel):
    """Base company model."""

    name: str
    description: Optional[str] = None


class CompanyCreate(CompanyBase):
    """Model for creating a company. The code is slugified on insert."""

    code: str


class CompanyUpdate(BaseModel):
    """Model for updating a company. The code itself is never updated."""

    name: Optional[str] = None
    description: Optional[str] = None


class Company(CompanyBase):
    """Complete company model."""

    code: str

    model_config = ConfigDict(from_attributes=True)


class CompanySummary(BaseModel):
    """Company listing entry."""

    code: str
    name: str


class CompanyDetail(Company):
    """Company with its invoice ids and industry names attached."""

    invoices: List[int] = []
    industries: List[str] = []


class CompanyIndustries(CompanySummary):
    """Company with the display names of its associated industries."""

    industries: List[str] = []
