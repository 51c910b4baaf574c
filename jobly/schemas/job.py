# job.py
from decimal import Decimal
from typing import Optional

from pydantic import Field

from jobly.schemas.base import CamelModel, StrictCamelModel


class JobCreate(StrictCamelModel):
    title: str = Field(min_length=1)
    salary: Optional[int] = Field(default=None, ge=0)
    # Accepts "0.05" or 0.05; stored as an exact decimal.
    equity: Optional[Decimal] = Field(default=None, ge=0, lt=1)
    company_handle: str = Field(min_length=1, max_length=25)


class JobUpdate(StrictCamelModel):
    title: Optional[str] = Field(default=None, min_length=1)
    salary: Optional[int] = Field(default=None, ge=0)
    equity: Optional[Decimal] = Field(default=None, ge=0, lt=1)


class JobRead(CamelModel):
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[str] = None
    company_handle: str


class JobDetail(JobRead):
    technologies: list[int] = []


class JobResponse(CamelModel):
    job: JobRead


class JobDetailResponse(CamelModel):
    job: JobDetail


class JobListResponse(CamelModel):
    jobs: list[JobRead]


class RequirementResponse(CamelModel):
    required: int
