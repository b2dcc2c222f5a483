from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
import logging

from biztime.db import get_db
from biztime.core.errors import BizTimeError, InternalError, NotFoundError
from biztime.models.company import Company
from biztime.models.invoice import Invoice
from biztime.schemas.common import StatusResponse
from biztime.schemas.company import CompanyOut
from biztime.schemas.invoice import (
    InvoiceBrief,
    InvoiceCreate,
    InvoiceDetail,
    InvoiceDetailResponse,
    InvoiceListResponse,
    InvoiceOut,
    InvoiceResponse,
    InvoiceUpdate,
    InvoiceUpdateResponse,
)

router = APIRouter(prefix="/invoices", tags=["invoices"])

logger = logging.getLogger(__name__)


def _store_error(db: Session, action: str, invoice_id: int | None = None) -> InternalError:
    db.rollback()
    logger.exception("DB error on %s invoice id=%s", action, invoice_id)
    return InternalError("Database error")


@router.get("", response_model=InvoiceListResponse)
def list_invoices(db: Session = Depends(get_db)):
    try:
        rows = db.scalars(select(Invoice).order_by(Invoice.id))
        return {"invoices": [InvoiceBrief.model_validate(i) for i in rows]}
    except SQLAlchemyError:
        raise _store_error(db, "list")


@router.get("/{invoice_id}", response_model=InvoiceDetailResponse)
def get_invoice(invoice_id: int, db: Session = Depends(get_db)):
    """
    Invoice com a empresa embutida no lugar de comp_code.
    Duas queries sem transação: se a empresa sumir no meio, company = null.
    """
    try:
        inv = db.get(Invoice, invoice_id)
        if not inv:
            raise NotFoundError("Invoice Not Found")

        company = db.scalar(select(Company).where(Company.code == inv.comp_code))

        return {
            "invoice": InvoiceDetail(
                id=inv.id,
                amt=inv.amt,
                paid=inv.paid,
                add_date=inv.add_date,
                paid_date=inv.paid_date,
                company=CompanyOut.model_validate(company) if company else None,
            )
        }

    except BizTimeError:
        raise

    except SQLAlchemyError:
        raise _store_error(db, "get", invoice_id)


@router.post("", response_model=InvoiceResponse, status_code=201)
def create_invoice(payload: InvoiceCreate, db: Session = Depends(get_db)):
    # comp_code inexistente estoura na FK (500), nada é gravado
    try:
        inv = Invoice(comp_code=payload.comp_code, amt=payload.amt)
        db.add(inv)
        db.commit()
        db.refresh(inv)
        return {"invoice": InvoiceOut.model_validate(inv)}
    except SQLAlchemyError:
        raise _store_error(db, "create")


@router.put("/{invoice_id}", response_model=InvoiceUpdateResponse)
def update_invoice(invoice_id: int, payload: InvoiceUpdate, db: Session = Depends(get_db)):
    # só amt muda; paid/paid_date não são recalculados
    try:
        inv = db.get(Invoice, invoice_id)
        if not inv:
            logger.info("PUT on missing invoice id=%s", invoice_id)
            return {"invoice": None}

        inv.amt = payload.amt
        db.commit()
        db.refresh(inv)
        return {"invoice": InvoiceOut.model_validate(inv)}
    except SQLAlchemyError:
        raise _store_error(db, "update", invoice_id)


@router.delete("/{invoice_id}", response_model=StatusResponse)
def delete_invoice(invoice_id: int, db: Session = Depends(get_db)):
    try:
        inv = db.get(Invoice, invoice_id)
        if not inv:
            raise NotFoundError("Invoice Not Found")

        db.delete(inv)
        db.commit()
        return {"status": "deleted"}

    except BizTimeError:
        raise

    except SQLAlchemyError:
        raise _store_error(db, "delete", invoice_id)
