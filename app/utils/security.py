from passlib.context import CryptContext
from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt
from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer
from typing import Optional
from app.config import Settings
from app.schema.auth_schema import TokenData
from app.utils.exceptions import Forbidden, Unauthenticated

# bcrypt with a fixed cost factor
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=10)

oauth2_scheme = OAuth2PasswordBearer(
    tokenUrl="/auth/login",
    auto_error=False  # missing tokens are reported by get_current_user
)


def hash_password(password: str) -> str:
    """Hash a plain password"""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """Verify a plain password against hashed password"""
    if not hashed_password:
        return False
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(data: dict, settings: Settings, expires_delta: Optional[timedelta] = None) -> str:
    """Create a JWT access token"""
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=settings.access_token_expire_minutes)

    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: Settings) -> TokenData:
    """Verify signature and expiry, then extract {id, role}"""
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError:
        raise Forbidden("Invalid token")

    user_id = payload.get("id")
    role = payload.get("role")
    if not isinstance(user_id, int) or not isinstance(role, str):
        raise Forbidden("Invalid token")

    return TokenData(id=user_id, role=role)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_current_user(
    token: Optional[str] = Depends(oauth2_scheme),
    settings: Settings = Depends(get_app_settings),
) -> TokenData:
    """
    Resolve the caller's identity from the bearer token.
    The token alone is trusted; the database is not consulted.
    """
    if not token:
        raise Unauthenticated("Access denied")

    return decode_access_token(token, settings)
