from fastapi import APIRouter, BackgroundTasks, Depends
from sqlalchemy.orm import Session
from typing import List
from app.database import get_db
from app.schema.auth_schema import TokenData
from app.schema.job_schema import JobCreate, JobCreated, JobResponse, HireResponse
from app.crud import job_crud
from app.tasks.notifications import send_job_accepted_email
from app.utils.email import EmailSender, get_email_sender
from app.utils.security import get_current_user


router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.post("", response_model=JobCreated, status_code=201)
def create_job(
    job_data: JobCreate,
    db: Session = Depends(get_db),
    current_user: TokenData = Depends(get_current_user)
):
    """Post a new open job (clients only)"""
    job = job_crud.create_job(
        db,
        current_user,
        title=job_data.title,
        description=job_data.description,
        budget=job_data.budget,
    )
    return {"message": "Job published", "job_id": job.id}


@router.get("", response_model=List[JobResponse])
def list_jobs(db: Session = Depends(get_db)):
    return job_crud.list_open_jobs(db)


@router.post("/{job_id}/hire", response_model=HireResponse)
def hire(
    job_id: int,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
    current_user: TokenData = Depends(get_current_user),
    email_sender: EmailSender = Depends(get_email_sender),
):
    """Freelancer takes an open job; the client is notified by email"""
    job = job_crud.hire(db, job_id, current_user)

    client = job.client
    background_tasks.add_task(send_job_accepted_email, email_sender, client.name, client.email, job.title)

    return {"message": "Job accepted. Chat unlocked."}
