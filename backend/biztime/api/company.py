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
from biztime.schemas.company import (
    CompanyBrief,
    CompanyCreate,
    CompanyDetail,
    CompanyDetailResponse,
    CompanyListResponse,
    CompanyOut,
    CompanyResponse,
    CompanyUpdate,
    CompanyUpdateResponse,
)

router = APIRouter(prefix="/companies", tags=["companies"])

logger = logging.getLogger(__name__)


def _store_error(db: Session, action: str, code: str | None = None) -> InternalError:
    db.rollback()
    logger.exception("DB error on %s company code=%s", action, code)
    return InternalError("Database error")


@router.get("", response_model=CompanyListResponse)
def list_companies(db: Session = Depends(get_db)):
    try:
        rows = db.scalars(select(Company).order_by(Company.code))
        return {"companies": [CompanyBrief.model_validate(c) for c in rows]}
    except SQLAlchemyError:
        raise _store_error(db, "list")


@router.get("/{code}", response_model=CompanyDetailResponse)
def get_company(code: str, db: Session = Depends(get_db)):
    try:
        c = db.get(Company, code)
        if not c:
            raise NotFoundError("Company Not Found")

        invoice_ids = list(db.scalars(select(Invoice.id).where(Invoice.comp_code == code).order_by(Invoice.id)))

        out = CompanyOut.model_validate(c)
        return {"company": CompanyDetail(**out.model_dump(), invoices=invoice_ids)}

    except BizTimeError:
        raise

    except SQLAlchemyError:
        raise _store_error(db, "get", code)


@router.post("", response_model=CompanyResponse, status_code=201)
def create_company(payload: CompanyCreate, db: Session = Depends(get_db)):
    # code duplicado estoura na PK e vira 500 genérico
    try:
        c = Company(code=payload.code, name=payload.name, description=payload.description)
        db.add(c)
        db.commit()
        db.refresh(c)
        return {"company": CompanyOut.model_validate(c)}
    except SQLAlchemyError:
        raise _store_error(db, "create", payload.code)


@router.put("/{code}", response_model=CompanyUpdateResponse)
def update_company(code: str, payload: CompanyUpdate, db: Session = Depends(get_db)):
    try:
        c = db.get(Company, code)
        if not c:
            logger.info("PUT on missing company code=%s", code)
            return {"company": None}

        c.name = payload.name
        c.description = payload.description
        db.commit()
        db.refresh(c)
        return {"company": CompanyOut.model_validate(c)}
    except SQLAlchemyError:
        raise _store_error(db, "update", code)


@router.delete("/{code}", response_model=StatusResponse)
def delete_company(code: str, db: Session = Depends(get_db)):
    try:
        c = db.get(Company, code)
        if not c:
            raise NotFoundError("Company Not Found")

        db.delete(c)
        db.commit()
        return {"status": "deleted"}

    except BizTimeError:
        raise

    except SQLAlchemyError:
        raise _store_error(db, "delete", code)
