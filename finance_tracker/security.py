"""
Password hashing (bcrypt), the password policy and signed session tokens (python-jose).
"""
import re
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
from jose import JWTError, jwt

from .config import settings

# At least one lowercase and one uppercase letter; letters, digits, _ and & only
PASSWORD_PATTERN = re.compile(r"(?=.*[a-z])(?=.*[A-Z])[a-zA-Z0-9_&]+")
PASSWORD_POLICY_MESSAGE = (
    "Password must contain at least one uppercase letter, one lowercase letter, "
    "and allowed characters are letters, numbers, _ and &"
)


def password_meets_policy(password: Optional[str]) -> bool:
    if not password:
        return False
    return PASSWORD_PATTERN.fullmatch(password) is not None


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, hashed_password: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        # Malformed stored hash or over-long password
        return False


def create_access_token(user_id: int, expires_delta: Optional[timedelta] = None) -> str:
    """Sign a token carrying the user id; valid TOKEN_EXPIRE_DAYS by default"""
    if expires_delta is None:
        expires_delta = timedelta(days=settings.TOKEN_EXPIRE_DAYS)
    payload = {
        "id": user_id,
        "exp": datetime.now(timezone.utc) + expires_delta,
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> Optional[int]:
    """Return the user id of a valid token, None if the signature or expiry check fails"""
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except JWTError:
        return None
    user_id = payload.get("id")
    if not isinstance(user_id, int):
        return None
    return user_id
