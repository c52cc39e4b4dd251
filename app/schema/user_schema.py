from pydantic import BaseModel, EmailStr, field_validator
from typing import Optional

# ----------------- User creation -----------------
class UserCreate(BaseModel):
    name: str
    email: EmailStr
    password: str
    role: Optional[str] = None  # defaults to freelancer

    @field_validator("name", "password")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Field cannot be empty")
        return v


class UserCreated(BaseModel):
    message: str
    user_id: int

# ----------------- Profile -----------------
class ProfileUpdated(BaseModel):
    message: str
    avatar: Optional[str] = None
