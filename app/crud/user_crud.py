from typing import Optional
from sqlalchemy import func
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from app.models.user import User, UserRole
from app.utils.exceptions import ConflictError, NotFoundError
from app.utils.security import hash_password

def get_user_by_email(db: Session, email: str) -> Optional[User]:
    # emails match regardless of case
    return db.query(User).filter(func.lower(User.email) == email.lower()).first()

def get_user_by_id(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()

def create_user(db: Session, name: str, email: str, password: str, role: Optional[str] = None) -> User:
    if get_user_by_email(db, email):
        raise ConflictError("Email already registered")

    user = User(
        name=name,
        email=email,
        password_hash=hash_password(password),
        role=role or UserRole.FREELANCER.value,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # lost a race against a concurrent registration of the same email
        db.rollback()
        raise ConflictError("Email already registered")
    db.refresh(user)
    return user

def update_profile(db: Session, user_id: int, bio: Optional[str] = None, avatar_url: Optional[str] = None) -> User:
    user = get_user_by_id(db, user_id)
    if not user:
        raise NotFoundError("User not found")

    if bio is None and avatar_url is None:
        return user

    if bio is not None:
        user.bio = bio
    if avatar_url is not None:
        user.avatar_url = avatar_url

    db.commit()
    db.refresh(user)
    return user
