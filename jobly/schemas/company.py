# company.py
from typing import Optional

from pydantic import Field

from jobly.schemas.base import CamelModel, StrictCamelModel


class CompanyCreate(StrictCamelModel):
    handle: str = Field(min_length=1, max_length=25, pattern=r"^[a-z0-9-]+$")
    name: str = Field(min_length=1)
    description: str = ""
    num_employees: Optional[int] = Field(default=None, ge=0)
    logo_url: Optional[str] = None


class CompanyUpdate(StrictCamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    num_employees: Optional[int] = Field(default=None, ge=0)
    logo_url: Optional[str] = None


class CompanyRead(CamelModel):
    handle: str
    name: str
    description: Optional[str] = None
    num_employees: Optional[int] = None
    logo_url: Optional[str] = None


class CompanyJob(CamelModel):
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[str] = None


class CompanyDetail(CompanyRead):
    jobs: list[CompanyJob] = []


class CompanyResponse(CamelModel):
    company: CompanyRead


class CompanyDetailResponse(CamelModel):
    company: CompanyDetail


class CompanyListResponse(CamelModel):
    companies: list[CompanyRead]
