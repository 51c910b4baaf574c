# jobs.py
from fastapi import APIRouter, Depends, Query, status
from jobly.database import get_db
from jobly.db.executor import Database
from jobly.routers.dependencies import require_admin
from jobly.schemas.auth import TokenData
from jobly.schemas.job import (
    JobCreate,
    JobDetailResponse,
    JobListResponse,
    JobResponse,
    JobUpdate,
    RequirementResponse,
)
from jobly.services import jobs as job_service


router = APIRouter()


@router.post("", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
def create_job(
    payload: JobCreate,
    db: Database = Depends(get_db),
    _admin: TokenData = Depends(require_admin),
) -> JobResponse:
    job = job_service.create(db, payload.model_dump(by_alias=True))
    return JobResponse(job=job)


@router.get("", response_model=JobListResponse)
def list_jobs(
    title: str | None = Query(default=None, min_length=1, description="Case-insensitive substring search"),
    min_salary: int | None = Query(default=None, alias="minSalary", ge=0),
    has_equity: bool | None = Query(default=None, alias="hasEquity", description="true: only jobs with equity > 0"),
    db: Database = Depends(get_db),
) -> JobListResponse:
    criteria = {
        key: value
        for key, value in (("title", title), ("minSalary", min_salary), ("hasEquity", has_equity))
        if value is not None
    }
    return JobListResponse(jobs=job_service.find_all(db, criteria))


@router.get("/{job_id}", response_model=JobDetailResponse)
def get_job(job_id: int, db: Database = Depends(get_db)) -> JobDetailResponse:
    return JobDetailResponse(job=job_service.get(db, job_id))


@router.patch("/{job_id}", response_model=JobResponse)
def update_job(
    job_id: int,
    payload: JobUpdate,
    db: Database = Depends(get_db),
    _admin: TokenData = Depends(require_admin),
) -> JobResponse:
    job = job_service.update(db, job_id, payload.model_dump(by_alias=True, exclude_unset=True))
    return JobResponse(job=job)


@router.delete("/{job_id}")
def delete_job(
    job_id: int,
    db: Database = Depends(get_db),
    _admin: TokenData = Depends(require_admin),
) -> dict:
    job_service.remove(db, job_id)
    return {"deleted": job_id}


@router.post("/{job_id}/tech/{tech_id}", response_model=RequirementResponse, status_code=status.HTTP_201_CREATED)
def add_job_requirement(
    job_id: int,
    tech_id: int,
    db: Database = Depends(get_db),
    _admin: TokenData = Depends(require_admin),
) -> RequirementResponse:
    job_service.require(db, job_id, tech_id)
    return RequirementResponse(required=tech_id)
