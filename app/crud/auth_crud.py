from typing import Optional
from sqlalchemy.orm import Session
from app.config import Settings
from app.crud import user_crud
from app.models.user import User
from app.utils.exceptions import InvalidCredentialError, NotFoundError
from app.utils.security import create_access_token, verify_password

# ----------------- Registration -----------------
def register(db: Session, name: str, email: str, password: str, role: Optional[str] = None) -> User:
    return user_crud.create_user(db, name=name, email=email, password=password, role=role)

# ----------------- Login -----------------
def login(db: Session, settings: Settings, email: str, password: str) -> dict:
    user = user_crud.get_user_by_email(db, email)
    if not user:
        raise NotFoundError("User not found")
    if not verify_password(password, user.password_hash):
        raise InvalidCredentialError("Incorrect password")

    token = create_access_token({"id": user.id, "role": user.role}, settings)
    return {
        "access_token": token,
        "token_type": "bearer",
        "user": public_user(user),
    }

def public_user(user: User) -> dict:
    return {
        "id": user.id,
        "name": user.name,
        "role": user.role,
        "avatar": user.avatar_url,
    }
