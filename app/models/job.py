from typing import Optional
from datetime import datetime
from sqlalchemy import String, ForeignKey, DateTime, Integer, Numeric, Text, Index, func
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.database import Base
import enum

class JobStatus(str, enum.Enum):
    OPEN = "open"
    IN_PROGRESS = "in_progress"

class Job(Base):
    __tablename__ = "jobs"

    __table_args__ = (
        Index('idx_job_status', 'status'),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    client_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id"), nullable=False)

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    budget: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=False)

    # open -> in_progress, set together with freelancer_id on hire
    status: Mapped[str] = mapped_column(String(50), nullable=False, default=JobStatus.OPEN.value)
    freelancer_id: Mapped[Optional[int]] = mapped_column(Integer, ForeignKey("users.id"), nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    client = relationship("User", foreign_keys=[client_id])
