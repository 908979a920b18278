import uuid

from sqlalchemy import Column, String, Text, DateTime, Enum as SAEnum, Uuid, func, ForeignKey, Index
from sqlalchemy.orm import relationship
from sqlalchemy.types import TypeDecorator
from db import Base
from models1.status import JobStatus, DEFAULT_STATUS, coerce_status


class JobStatusType(TypeDecorator):
    """
    job_status column. Native enum on postgres (which refuses unknown values on write),
    plain string elsewhere; values read back go through coerce_status so a bad
    stored value raises UnknownStatus instead of a driver LookupError.
    """
    impl = String(32)
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "postgresql":
            return dialect.type_descriptor(SAEnum(JobStatus, name="job_status"))
        return dialect.type_descriptor(String(32))

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return coerce_status(value).value

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return coerce_status(value)


class Job(Base):
    __tablename__ = "jobs"
    __table_args__ = (
        Index("ix_jobs_user_status_created_at", "user_id", "status", "created_at"),
        Index("ix_jobs_user_created_at", "user_id", "created_at"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey("profiles.id", ondelete="CASCADE"), index=True, nullable=False)

    company = Column(String, nullable=False)
    position = Column(String, nullable=False)
    status = Column(JobStatusType(), default=DEFAULT_STATUS, server_default=DEFAULT_STATUS.value, nullable=False)
    url = Column(Text)
    salary = Column(String)  # display text like "$150k - $200k", not a number
    job_description = Column(Text)
    note = Column(Text)  # markdown

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    owner = relationship("Profile", back_populates="jobs")
