from sqlalchemy.orm import Session
from sqlalchemy import or_
from app.models.job import Job
from app.models.message import Message
from app.models.user import User
from app.utils.exceptions import Forbidden, ValidationError
from typing import List

def _get_job_for_participant(db: Session, job_id: int, user_id: int) -> Job:
    job = db.query(Job).filter(
        Job.id == job_id,
        or_(Job.client_id == user_id, Job.freelancer_id == user_id)
    ).first()
    if not job:
        raise Forbidden("You are not a participant of this job")
    return job

def send_message(db: Session, job_id: int, sender_id: int, content: str) -> Message:
    job = _get_job_for_participant(db, job_id, sender_id)

    if job.freelancer_id is None:
        raise ValidationError("Job has no assigned freelancer yet")

    receiver_id = job.freelancer_id if sender_id == job.client_id else job.client_id

    message = Message(
        job_id=job.id,
        sender_id=sender_id,
        receiver_id=receiver_id,
        content=content,
    )
    db.add(message)
    db.commit()
    db.refresh(message)
    return message

def list_messages(db: Session, job_id: int, caller_id: int) -> List[dict]:
    _get_job_for_participant(db, job_id, caller_id)

    rows = (
        db.query(Message, User.name)
        .join(User, Message.sender_id == User.id)
        .filter(Message.job_id == job_id)
        .order_by(Message.created_at.asc(), Message.id.asc())
        .all()
    )
    return [
        {
            "id": message.id,
            "job_id": message.job_id,
            "sender_id": message.sender_id,
            "receiver_id": message.receiver_id,
            "sender_name": sender_name,
            "content": message.content,
            "created_at": message.created_at,
        }
        for message, sender_name in rows
    ]
