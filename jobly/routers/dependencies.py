# dependencies.py
from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from pydantic import ValidationError
from jobly.errors import UnauthorizedError
from jobly.schemas.auth import TokenData
from jobly.utils.jwt_handler import decode_access_token


oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/token", auto_error=False)


def get_current_user(token: str | None = Depends(oauth2_scheme)) -> TokenData:
    if not token:
        raise UnauthorizedError("Not authenticated")
    payload = decode_access_token(token)
    username = payload.get("sub") or payload.get("username")
    if not username:
        raise UnauthorizedError("Invalid token payload")
    try:
        return TokenData(username=username, is_admin=bool(payload.get("is_admin", False)))
    except ValidationError as exc:
        raise UnauthorizedError("Invalid token subject") from exc


def require_admin(current_user: TokenData = Depends(get_current_user)) -> TokenData:
    if not current_user.is_admin:
        raise UnauthorizedError("Admin access required")
    return current_user


def require_self_or_admin(username: str, current_user: TokenData = Depends(get_current_user)) -> TokenData:
    # `username` is the path parameter of the route using this dependency.
    if not (current_user.is_admin or current_user.username == username):
        raise UnauthorizedError("Not allowed for this user")
    return current_user
