"""Industry endpoints."""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path
from pydantic import BaseModel

from biztime.db import BizTimeDatabase
from biztime.models import Industry, IndustryCompanies, IndustryCreate

from .common import StatusResponse, get_biztime_db, not_found

logger = logging.getLogger(__name__)

# Create router for industry endpoints
router = APIRouter(prefix="/industries", tags=["industries"])


class IndustryListResponse(BaseModel):
    """API response model for the industry listing."""

    industries: List[IndustryCompanies]


class IndustryCompaniesResponse(BaseModel):
    """API response model for a single industry with its companies."""

    industry: IndustryCompanies


class IndustryResponse(BaseModel):
    """API response model for a created industry."""

    industry: Industry


@router.get("", response_model=IndustryListResponse)
async def list_industries(
    db: BizTimeDatabase = Depends(get_biztime_db),
) -> IndustryListResponse:
    """List every industry with the codes of its companies."""
    try:
        return IndustryListResponse(industries=db.industries.list_industries())
    except Exception as e:
        logger.error(f"Error listing industries: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/{code}", response_model=IndustryCompaniesResponse)
async def get_industry(
    code: str = Path(..., description="Industry code"),
    db: BizTimeDatabase = Depends(get_biztime_db),
) -> IndustryCompaniesResponse:
    """Retrieve an industry with the codes of its companies."""
    try:
        industry = db.industries.get_industry(code)
        if industry is None:
            raise not_found(code)
        return IndustryCompaniesResponse(industry=industry)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error getting industry {code}: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("", response_model=IndustryResponse, status_code=201)
async def create_industry(
    industry: IndustryCreate,
    db: BizTimeDatabase = Depends(get_biztime_db),
) -> IndustryResponse:
    """Create an industry. Its code is stored in slug form."""
    try:
        return IndustryResponse(industry=db.industries.insert_industry(industry))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error creating industry {industry.code}: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.delete("/{code}", response_model=StatusResponse)
async def delete_industry(
    code: str = Path(..., description="Industry code"),
    db: BizTimeDatabase = Depends(get_biztime_db),
) -> StatusResponse:
    """Delete an industry."""
    try:
        if not db.industries.delete_industry(code):
            raise not_found(code)
        return StatusResponse(status="deleted")
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error deleting industry {code}: {e}")
        raise HTTPException(status_code=500, detail=str(e))
