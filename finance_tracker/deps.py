"""
Shared request dependencies: the authenticated caller.
"""
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from .database import get_db
from .exceptions import AuthError
from .models.user import User
from .security import decode_access_token

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db)
) -> User:
    """Resolve the bearer token to a user, 401 otherwise"""
    if credentials is None or not credentials.credentials:
        raise AuthError("Not authorized, no token", status_code=401)

    user_id = decode_access_token(credentials.credentials)
    if user_id is None:
        raise AuthError("Not authorized, token failed", status_code=401)

    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        raise AuthError("Not authorized, user not found", status_code=401)
    return user
