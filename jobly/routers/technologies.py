# technologies.py
from fastapi import APIRouter, Depends, status
from jobly.database import get_db
from jobly.db.executor import Database
from jobly.routers.dependencies import require_admin
from jobly.schemas.auth import TokenData
from jobly.schemas.technology import (
    TechnologyCreate,
    TechnologyListResponse,
    TechnologyResponse,
    TechnologyUpdate,
)
from jobly.services import technologies as technology_service


router = APIRouter()


@router.post("", response_model=TechnologyResponse, status_code=status.HTTP_201_CREATED)
def create_technology(
    payload: TechnologyCreate,
    db: Database = Depends(get_db),
    _admin: TokenData = Depends(require_admin),
) -> TechnologyResponse:
    return TechnologyResponse(technology=technology_service.create(db, payload.model_dump()))


@router.get("", response_model=TechnologyListResponse)
def list_technologies(db: Database = Depends(get_db)) -> TechnologyListResponse:
    return TechnologyListResponse(technologies=technology_service.find_all(db))


@router.get("/{tech_id}", response_model=TechnologyResponse)
def get_technology(tech_id: int, db: Database = Depends(get_db)) -> TechnologyResponse:
    return TechnologyResponse(technology=technology_service.get(db, tech_id))


@router.patch("/{tech_id}", response_model=TechnologyResponse)
def update_technology(
    tech_id: int,
    payload: TechnologyUpdate,
    db: Database = Depends(get_db),
    _admin: TokenData = Depends(require_admin),
) -> TechnologyResponse:
    technology = technology_service.update(db, tech_id, payload.model_dump(exclude_unset=True))
    return TechnologyResponse(technology=technology)


@router.delete("/{tech_id}")
def delete_technology(
    tech_id: int,
    db: Database = Depends(get_db),
    _admin: TokenData = Depends(require_admin),
) -> dict:
    technology_service.remove(db, tech_id)
    return {"deleted": tech_id}
