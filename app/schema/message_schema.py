from pydantic import BaseModel, field_validator
from datetime import datetime
from typing import Optional


class MessageCreate(BaseModel):
    job_id: int
    content: str

    @field_validator("content")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Message cannot be empty")
        return v


class MessageSent(BaseModel):
    message: str


class MessageResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    job_id: int
    sender_id: int
    receiver_id: int
    sender_name: str
    content: str
    created_at: Optional[datetime] = None
