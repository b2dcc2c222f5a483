from pydantic import BaseModel, Field, ConfigDict


class CompanyCreate(BaseModel):
    code: str = Field(min_length=1, max_length=50)
    name: str = Field(min_length=1, max_length=200)
    description: str | None = None


class CompanyUpdate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    description: str | None = None


class CompanyBrief(BaseModel):
    code: str
    name: str

    model_config = ConfigDict(from_attributes=True)


class CompanyOut(CompanyBrief):
    description: str | None = None


class CompanyDetail(CompanyOut):
    invoices: list[int] = Field(default_factory=list)


class CompanyListResponse(BaseModel):
    companies: list[CompanyBrief]


class CompanyResponse(BaseModel):
    company: CompanyOut


class CompanyDetailResponse(BaseModel):
    company: CompanyDetail


class CompanyUpdateResponse(BaseModel):
    # null quando o code não existe (PUT não devolve 404)
    company: CompanyOut | None = None
