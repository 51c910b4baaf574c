# companies.py
from fastapi import APIRouter, Depends, Query, status
from jobly.database import get_db
from jobly.db.executor import Database
from jobly.routers.dependencies import require_admin
from jobly.schemas.auth import TokenData
from jobly.schemas.company import (
    CompanyCreate,
    CompanyDetailResponse,
    CompanyListResponse,
    CompanyResponse,
    CompanyUpdate,
)
from jobly.services import companies as company_service


router = APIRouter()


@router.post("", response_model=CompanyResponse, status_code=status.HTTP_201_CREATED)
def create_company(
    payload: CompanyCreate,
    db: Database = Depends(get_db),
    _admin: TokenData = Depends(require_admin),
) -> CompanyResponse:
    company = company_service.create(db, payload.model_dump(by_alias=True))
    return CompanyResponse(company=company)


@router.get("", response_model=CompanyListResponse)
def list_companies(
    min_employees: int | None = Query(default=None, alias="minEmployees", ge=0),
    max_employees: int | None = Query(default=None, alias="maxEmployees", ge=0),
    name: str | None = Query(default=None, min_length=1),
    db: Database = Depends(get_db),
) -> CompanyListResponse:
    # minEmployees > maxEmployees is allowed and simply matches nothing.
    criteria = {
        key: value
        for key, value in (("minEmployees", min_employees), ("maxEmployees", max_employees), ("name", name))
        if value is not None
    }
    return CompanyListResponse(companies=company_service.find_all(db, criteria))


@router.get("/{handle}", response_model=CompanyDetailResponse)
def get_company(handle: str, db: Database = Depends(get_db)) -> CompanyDetailResponse:
    return CompanyDetailResponse(company=company_service.get(db, handle))


@router.patch("/{handle}", response_model=CompanyResponse)
def update_company(
    handle: str,
    payload: CompanyUpdate,
    db: Database = Depends(get_db),
    _admin: TokenData = Depends(require_admin),
) -> CompanyResponse:
    company = company_service.update(db, handle, payload.model_dump(by_alias=True, exclude_unset=True))
    return CompanyResponse(company=company)


@router.delete("/{handle}")
def delete_company(
    handle: str,
    db: Database = Depends(get_db),
    _admin: TokenData = Depends(require_admin),
) -> dict:
    company_service.remove(db, handle)
    return {"deleted": handle}
