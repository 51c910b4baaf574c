# users.py
from fastapi import APIRouter, Depends, status
from jobly.database import get_db
from jobly.db.executor import Database
from jobly.routers.dependencies import require_admin, require_self_or_admin
from jobly.schemas.auth import TokenData
from jobly.schemas.user import (
    ApplicationResponse,
    MatchingJobsResponse,
    QualificationResponse,
    UserCreate,
    UserCreatedResponse,
    UserDetailResponse,
    UserListResponse,
    UserResponse,
    UserUpdate,
)
from jobly.services import job_matching
from jobly.services import users as user_service
from jobly.utils.jwt_handler import create_user_token
from jobly.utils.password_hash import generate_password


router = APIRouter()


@router.post("", response_model=UserCreatedResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    payload: UserCreate,
    db: Database = Depends(get_db),
    _admin: TokenData = Depends(require_admin),
) -> UserCreatedResponse:
    # The new user sets a real password later using the returned token.
    data = payload.model_dump(by_alias=True)
    data["password"] = generate_password()
    user = user_service.register(db, data)
    return UserCreatedResponse(user=user, token=create_user_token(user))


@router.get("", response_model=UserListResponse)
def list_users(db: Database = Depends(get_db), _admin: TokenData = Depends(require_admin)) -> UserListResponse:
    return UserListResponse(users=user_service.find_all(db))


@router.get("/{username}", response_model=UserDetailResponse)
def get_user(
    username: str,
    db: Database = Depends(get_db),
    _user: TokenData = Depends(require_self_or_admin),
) -> UserDetailResponse:
    return UserDetailResponse(user=user_service.get(db, username))


@router.patch("/{username}", response_model=UserResponse)
def update_user(
    username: str,
    payload: UserUpdate,
    db: Database = Depends(get_db),
    _user: TokenData = Depends(require_self_or_admin),
) -> UserResponse:
    user = user_service.update(db, username, payload.model_dump(by_alias=True, exclude_unset=True))
    return UserResponse(user=user)


@router.delete("/{username}")
def delete_user(
    username: str,
    db: Database = Depends(get_db),
    _user: TokenData = Depends(require_self_or_admin),
) -> dict:
    user_service.remove(db, username)
    return {"deleted": username}


@router.post("/{username}/jobs/{job_id}", response_model=ApplicationResponse, status_code=status.HTTP_201_CREATED)
def apply_to_job(
    username: str,
    job_id: int,
    db: Database = Depends(get_db),
    _user: TokenData = Depends(require_self_or_admin),
) -> ApplicationResponse:
    user_service.apply(db, username, job_id)
    return ApplicationResponse(applied=job_id)


@router.post("/{username}/tech/{tech_id}", response_model=QualificationResponse, status_code=status.HTTP_201_CREATED)
def add_qualification(
    username: str,
    tech_id: int,
    db: Database = Depends(get_db),
    _user: TokenData = Depends(require_self_or_admin),
) -> QualificationResponse:
    user_service.qualify(db, username, tech_id)
    return QualificationResponse(qualified=tech_id)


@router.get("/{username}/jobs", response_model=MatchingJobsResponse)
def get_matching_jobs(
    username: str,
    db: Database = Depends(get_db),
    _user: TokenData = Depends(require_self_or_admin),
) -> MatchingJobsResponse:
    return MatchingJobsResponse(jobs=job_matching.get_matching_jobs(db, username))
