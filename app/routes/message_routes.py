from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from app.database import get_db
from app.crud import message_crud
from app.schema.auth_schema import TokenData
from app.schema.message_schema import MessageCreate, MessageSent, MessageResponse
from app.utils.security import get_current_user

router = APIRouter(prefix="/messages", tags=["messages"])


@router.post("", response_model=MessageSent, status_code=status.HTTP_201_CREATED)
def send_message(
    data: MessageCreate,
    db: Session = Depends(get_db),
    current_user: TokenData = Depends(get_current_user)
):
    message_crud.send_message(db, data.job_id, current_user.id, data.content)
    return {"message": "Message sent"}


@router.get("/{job_id}", response_model=List[MessageResponse])
def list_messages(
    job_id: int,
    db: Session = Depends(get_db),
    current_user: TokenData = Depends(get_current_user)
):
    return message_crud.list_messages(db, job_id, current_user.id)
