"""Industry pydantic models."""

from typing import List

from pydantic import BaseModel, ConfigDict


class IndustryCreate(BaseModel):
    """Model for creating an industry. The code is slugified on insert."""

    code: str
    industry: str


class Industry(BaseModel):
    """Complete industry model."""

    code: str
    industry: str

    model_config = ConfigDict(from_attributes=True)


class IndustryCompanies(BaseModel):
    """Industry code with the codes of its associated companies."""

    code: str
    companies: List[str] = []
