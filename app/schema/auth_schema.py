# app/schema/auth_schema.py
from pydantic import BaseModel, EmailStr
from typing import Optional

# ----------------- Login -----------------
class LoginRequest(BaseModel):
    email: EmailStr
    password: str

class PublicUser(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    name: str
    role: str
    avatar: Optional[str] = None

# ----------------- Tokens -----------------
class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: PublicUser

class TokenData(BaseModel):
    id: int
    role: str
