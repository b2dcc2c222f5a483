from datetime import date
from pydantic import BaseModel, ConfigDict, Field

from biztime.schemas.company import CompanyOut


class InvoiceCreate(BaseModel):
    comp_code: str
    amt: float = Field(allow_inf_nan=False)


class InvoiceUpdate(BaseModel):
    amt: float = Field(allow_inf_nan=False)


class InvoiceBrief(BaseModel):
    id: int
    comp_code: str

    model_config = ConfigDict(from_attributes=True)


class InvoiceOut(InvoiceBrief):
    amt: float
    paid: bool
    add_date: date
    paid_date: date | None = None


class InvoiceDetail(BaseModel):
    """Single invoice with ``comp_code`` swapped for the embedded company."""

    id: int
    amt: float
    paid: bool
    add_date: date
    paid_date: date | None = None
    company: CompanyOut | None = None

    model_config = ConfigDict(from_attributes=True)


class InvoiceListResponse(BaseModel):
    invoices: list[InvoiceBrief]


class InvoiceResponse(BaseModel):
    invoice: InvoiceOut


class InvoiceDetailResponse(BaseModel):
    invoice: InvoiceDetail


class InvoiceUpdateResponse(BaseModel):
    invoice: InvoiceOut | None = None
