"""Invoice endpoints."""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path
from pydantic import BaseModel

from biztime.db import BizTimeDatabase
from biztime.models import (
    Invoice,
    InvoiceCreate,
    InvoiceDetail,
    InvoiceSummary,
    InvoiceUpdate,
)

from .common import StatusResponse, get_biztime_db, not_found

logger = logging.getLogger(__name__)

# Create router for invoice endpoints
router = APIRouter(prefix="/invoices", tags=["invoices"])


class InvoiceListResponse(BaseModel):
    """API response model for the invoice listing."""

    invoices: List[InvoiceSummary]


class InvoiceResponse(BaseModel):
    """API response model for a created or updated invoice."""

    invoice: Invoice


class InvoiceDetailResponse(BaseModel):
    """API response model for a single invoice with its company."""

    invoice: InvoiceDetail


@router.get("", response_model=InvoiceListResponse)
async def list_invoices(
    db: BizTimeDatabase = Depends(get_biztime_db),
) -> InvoiceListResponse:
    """List all invoices."""
    try:
        return InvoiceListResponse(invoices=db.invoices.list_invoices())
    except Exception as e:
        logger.error(f"Error listing invoices: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/{invoice_id}", response_model=InvoiceDetailResponse)
async def get_invoice(
    invoice_id: int = Path(..., description="Invoice id"),
    db: BizTimeDatabase = Depends(get_biztime_db),
) -> InvoiceDetailResponse:
    """Retrieve an invoice with its company."""
    try:
        invoice = db.invoices.get_invoice(invoice_id)
        if invoice is None:
            raise not_found(invoice_id)
        return InvoiceDetailResponse(invoice=invoice)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error getting invoice {invoice_id}: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("", response_model=InvoiceResponse, status_code=201)
async def create_invoice(
    invoice: InvoiceCreate,
    db: BizTimeDatabase = Depends(get_biztime_db),
) -> InvoiceResponse:
    """Create an unpaid invoice for a company."""
    try:
        return InvoiceResponse(invoice=db.invoices.insert_invoice(invoice))
    except Exception as e:
        logger.error(f"Error creating invoice for {invoice.comp_code}: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.patch("/{invoice_id}", response_model=InvoiceResponse)
async def update_invoice(
    invoice_update: InvoiceUpdate,
    invoice_id: int = Path(..., description="Invoice id"),
    db: BizTimeDatabase = Depends(get_biztime_db),
) -> InvoiceResponse:
    """Update the amount and/or paid status of an invoice."""
    try:
        invoice = db.invoices.update_invoice(invoice_id, invoice_update)
        if invoice is None:
            raise not_found(invoice_id)
        return InvoiceResponse(invoice=invoice)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error updating invoice {invoice_id}: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.delete("/{invoice_id}", response_model=StatusResponse)
async def delete_invoice(
    invoice_id: int = Path(..., description="Invoice id"),
    db: BizTimeDatabase = Depends(get_biztime_db),
) -> StatusResponse:
    """Delete an invoice."""
    try:
        if not db.invoices.delete_invoice(invoice_id):
            raise not_found(invoice_id)
        return StatusResponse(status="deleted")
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error deleting invoice {invoice_id}: {e}")
        raise HTTPException(status_code=500, detail=str(e))
