# auth.py
from fastapi import APIRouter, Depends, status
from jobly.database import get_db
from jobly.db.executor import Database
from jobly.schemas.auth import TokenRequest, TokenResponse
from jobly.schemas.user import UserRegister
from jobly.services import users as user_service
from jobly.utils.jwt_handler import create_user_token


router = APIRouter()


@router.post("/token", response_model=TokenResponse)
def get_token(credentials: TokenRequest, db: Database = Depends(get_db)) -> TokenResponse:
    user = user_service.authenticate(db, credentials.username, credentials.password)
    return TokenResponse(token=create_user_token(user))


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
def register_user(user_in: UserRegister, db: Database = Depends(get_db)) -> TokenResponse:
    # Self-registration never grants admin.
    data = user_in.model_dump(by_alias=True)
    data["isAdmin"] = False
    user = user_service.register(db, data)
    return TokenResponse(token=create_user_token(user))
