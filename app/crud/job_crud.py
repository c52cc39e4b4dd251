from sqlalchemy.orm import Session
from sqlalchemy import update
from app.models.job import Job, JobStatus
from app.models.user import User, UserRole
from app.schema.auth_schema import TokenData
from app.utils.exceptions import Forbidden, NotFoundError
from typing import List, Optional

def create_job(db: Session, caller: TokenData, title: str, description: str, budget: float) -> Job:
    if caller.role != UserRole.CLIENT.value:
        raise Forbidden("Only clients can post jobs")

    job = Job(
        client_id=caller.id,
        title=title,
        description=description,
        budget=budget,
        status=JobStatus.OPEN.value,
    )
    db.add(job)
    db.commit()
    db.refresh(job)
    return job

def get_job_by_id(db: Session, job_id: int) -> Optional[Job]:
    return db.query(Job).filter(Job.id == job_id).first()

def list_open_jobs(db: Session) -> List[dict]:
    rows = (
        db.query(Job, User.name)
        .join(User, Job.client_id == User.id)
        .filter(Job.status == JobStatus.OPEN.value)
        .order_by(Job.created_at.desc(), Job.id.desc())
        .all()
    )
    return [_job_with_client_name(job, client_name) for job, client_name in rows]

def hire(db: Session, job_id: int, caller: TokenData) -> Job:
    """
    Assign the caller to an open job and move it to in_progress.
    The status check and the write are one conditional UPDATE, so only
    one freelancer can ever win a given job.
    """
    if caller.role != UserRole.FREELANCER.value:
        raise Forbidden("Only freelancers can accept jobs")

    result = db.execute(
        update(Job)
        .where(Job.id == job_id, Job.status == JobStatus.OPEN.value)
        .values(freelancer_id=caller.id, status=JobStatus.IN_PROGRESS.value)
    )
    if result.rowcount != 1:
        db.rollback()
        raise NotFoundError("Job not available")
    db.commit()

    return get_job_by_id(db, job_id)

def _job_with_client_name(job: Job, client_name: str) -> dict:
    return {
        "id": job.id,
        "client_id": job.client_id,
        "client_name": client_name,
        "title": job.title,
        "description": job.description,
        "budget": job.budget,
        "status": job.status,
        "freelancer_id": job.freelancer_id,
        "created_at": job.created_at,
    }
