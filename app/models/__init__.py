from app.models.user import User, UserRole
from app.models.job import Job, JobStatus
from app.models.message import Message

__all__ = ["User", "UserRole", "Job", "JobStatus", "Message"]
