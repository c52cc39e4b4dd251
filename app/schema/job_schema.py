from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime


class JobCreate(BaseModel):
    title: str
    description: str
    budget: float = Field(..., ge=0)

    @field_validator("title", "description")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        """Validate that string fields are not empty"""
        if not v or not v.strip():
            raise ValueError("Field cannot be empty")
        return v.strip()


class JobCreated(BaseModel):
    message: str
    job_id: int


class JobResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    client_id: int
    client_name: str
    title: str
    description: str
    budget: float
    status: str
    freelancer_id: Optional[int] = None
    created_at: Optional[datetime] = None


class HireResponse(BaseModel):
    message: str
