"""Company endpoints."""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path
from pydantic import BaseModel

from biztime.db import (
    COMPANY_FK,
    INDUSTRY_FK,
    BizTimeDatabase,
    ForeignKeyViolation,
    UniqueViolation,
)
from biztime.models import (
    Company,
    CompanyCreate,
    CompanyDetail,
    CompanyIndustries,
    CompanySummary,
    CompanyUpdate,
)

from .common import StatusResponse, get_biztime_db, not_found

logger = logging.getLogger(__name__)

# Create router for company endpoints
router = APIRouter(prefix="/companies", tags=["companies"])


class CompanyListResponse(BaseModel):
    """API response model for the company listing."""

    companies: List[CompanySummary]


class CompanyResponse(BaseModel):
    """API response model for a created or updated company."""

    company: Company


class CompanyDetailResponse(BaseModel):
    """API response model for a single company with its relations."""

    company: CompanyDetail


class CompanyIndustriesResponse(BaseModel):
    """API response model after adding an industry."""

    company: CompanyIndustries


class AddIndustryRequest(BaseModel):
    """Request model for associating an industry with a company."""

    ind_code: str


@router.get("", response_model=CompanyListResponse)
async def list_companies(
    db: BizTimeDatabase = Depends(get_biztime_db),
) -> CompanyListResponse:
    """List all companies ordered by name."""
    try:
        return CompanyListResponse(companies=db.companies.list_companies())
    except Exception as e:
        logger.error(f"Error listing companies: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/{code}", response_model=CompanyDetailResponse)
async def get_company(
    code: str = Path(..., description="Company code"),
    db: BizTimeDatabase = Depends(get_biztime_db),
) -> CompanyDetailResponse:
    """Retrieve a company with its invoice ids and industry names."""
    try:
        company = db.companies.get_company(code)
        if company is None:
            raise not_found(code)
        return CompanyDetailResponse(company=company)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error getting company {code}: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("", response_model=CompanyResponse, status_code=201)
async def create_company(
    company: CompanyCreate,
    db: BizTimeDatabase = Depends(get_biztime_db),
) -> CompanyResponse:
    """Create a company. Its code is stored in slug form."""
    try:
        return CompanyResponse(company=db.companies.insert_company(company))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error creating company {company.code}: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.put("/{code}", response_model=CompanyResponse)
async def update_company(
    code: str = Path(..., description="Company code"),
    company_update: Optional[CompanyUpdate] = None,
    db: BizTimeDatabase = Depends(get_biztime_db),
) -> CompanyResponse:
    """Replace the name and description of a company."""
    try:
        company = db.companies.update_company(code, company_update or CompanyUpdate())
        if company is None:
            raise not_found(code)
        return CompanyResponse(company=company)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error updating company {code}: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.patch("/{code}/add-industry", response_model=CompanyIndustriesResponse)
async def add_industry(
    request: AddIndustryRequest,
    code: str = Path(..., description="Company code"),
    db: BizTimeDatabase = Depends(get_biztime_db),
) -> CompanyIndustriesResponse:
    """Associate an industry with a company."""
    try:
        company = db.companies.add_industry(code, request.ind_code)
        return CompanyIndustriesResponse(company=company)
    except ForeignKeyViolation as e:
        if e.constraint == INDUSTRY_FK:
            raise HTTPException(status_code=404, detail="Could not find industry")
        if e.constraint == COMPANY_FK:
            raise HTTPException(status_code=404, detail="Could not find company")
        logger.error(f"Unexpected foreign key violation adding industry: {e}")
        raise HTTPException(status_code=500, detail=str(e))
    except UniqueViolation:
        raise HTTPException(
            status_code=400,
            detail="The industry has already been added to this company.",
        )
    except Exception as e:
        logger.error(f"Error adding industry {request.ind_code} to {code}: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.delete("/{code}", response_model=StatusResponse)
async def delete_company(
    code: str = Path(..., description="Company code"),
    db: BizTimeDatabase = Depends(get_biztime_db),
) -> StatusResponse:
    """Delete a company."""
    try:
        if not db.companies.delete_company(code):
            raise not_found(code)
        return StatusResponse(status="deleted")
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error deleting company {code}: {e}")
        raise HTTPException(status_code=500, detail=str(e))
