# services/jobs.py
"""
Reads and writes for job records.

Everything that persists a job goes through here; routers only translate
HTTP in and out. Every write is a single commit, so a failure leaves the
previous state as it was.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.orm import Session

from errors import NotFound, ValidationError
from models import Profile  # noqa: F401  (registers the owner side of Job.owner)
from models1.jobs import Job
from models1.status import JobStatus, DEFAULT_STATUS, all_statuses, change_status, coerce_status
from services.base import commit

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("company", "position")
OPTIONAL_FIELDS = ("url", "salary", "job_description", "note")
# never allow these to be overwritten
PROTECTED_FIELDS = ("id", "user_id", "created_at")


def _require_text(name: str, value: Optional[str]) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{name} is required")
    return str(value).strip()


def list_jobs(
    db: Session,
    owner_id: UUID,
    status: Optional[JobStatus] = None,
    limit: Optional[int] = None,
    offset: int = 0,
) -> List[Job]:
    q = db.query(Job).filter(Job.user_id == owner_id)
    if status is not None:
        q = q.filter(Job.status == coerce_status(status))
    q = q.order_by(Job.created_at.desc()).offset(offset)
    if limit is not None:
        q = q.limit(limit)
    return q.all()


def get_job(db: Session, job_id: UUID, requester_id: UUID) -> Job:
    rec = db.query(Job).filter_by(id=job_id, user_id=requester_id).first()
    if not rec:
        raise NotFound(f"Job {job_id} not found")
    return rec


def create_job(
    db: Session,
    owner_id: UUID,
    company: str,
    position: str,
    status: Optional[JobStatus] = None,
    **optional: Any,
) -> Job:
    """
    Quick add. company and position must be non-blank; status defaults to APPLYING.
    Unknown keyword fields are rejected so a typo doesn't silently drop data.
    """
    company = _require_text("company", company)
    position = _require_text("position", position)

    unknown = set(optional) - set(OPTIONAL_FIELDS)
    if unknown:
        raise ValidationError(f"Unknown job fields: {', '.join(sorted(unknown))}")

    data = {k: (str(v) if k == "url" and v is not None else v) for k, v in optional.items()}
    rec = Job(
        user_id=owner_id,
        company=company,
        position=position,
        status=coerce_status(status) if status is not None else DEFAULT_STATUS,
        created_at=datetime.now(timezone.utc),
        **data,
    )
    db.add(rec)
    commit(db, "creating job")
    db.refresh(rec)
    logger.info("Created job %s (%s @ %s) for user %s", rec.id, rec.position, rec.company, owner_id)
    return rec


def update_status(db: Session, job_id: UUID, new_status: JobStatus, requester_id: UUID) -> Job:
    rec = get_job(db, job_id, requester_id)
    old = rec.status
    change_status(rec, new_status)
    commit(db, "updating job status")
    db.refresh(rec)
    logger.info("Job %s moved %s -> %s", rec.id, getattr(old, "value", old), rec.status.value)
    return rec


def update_job(db: Session, job_id: UUID, requester_id: UUID, changes: Dict[str, Any]) -> Job:
    rec = get_job(db, job_id, requester_id)

    data = dict(changes)
    for k in PROTECTED_FIELDS:
        data.pop(k, None)

    # validate everything before touching the record, a rejected patch must leave it clean
    unknown = set(data) - set(REQUIRED_FIELDS + OPTIONAL_FIELDS + ("status",))
    if unknown:
        raise ValidationError(f"Unknown job fields: {', '.join(sorted(unknown))}")
    for k in REQUIRED_FIELDS:
        if k in data:
            data[k] = _require_text(k, data[k])
    if "url" in data and data["url"] is not None:
        data["url"] = str(data["url"])
    new_status = data.pop("status", None)
    if new_status is not None:
        new_status = coerce_status(new_status)

    for k, v in data.items():
        setattr(rec, k, v)
    if new_status is not None:
        change_status(rec, new_status)

    commit(db, "updating job")
    db.refresh(rec)
    return rec


def delete_job(db: Session, job_id: UUID, requester_id: UUID) -> None:
    rec = get_job(db, job_id, requester_id)
    db.delete(rec)
    commit(db, "deleting job")
    logger.info("Deleted job %s for user %s", job_id, requester_id)


def job_summary(db: Session, owner_id: UUID) -> Dict[str, Any]:
    """Counts per status (every status present, zero if unused) plus the dashboard tiles."""
    rows = (
        db.query(Job.status, func.count())
        .filter(Job.user_id == owner_id)
        .group_by(Job.status)
        .all()
    )
    counts = {s: c for s, c in rows}
    by_status = {s.value: counts.get(s, 0) for s in all_statuses()}
    return {
        "total": sum(by_status.values()),
        "interviewing": by_status[JobStatus.INTERVIEWING.value],
        "offers": by_status[JobStatus.OFFER.value],
        "by_status": by_status,
    }
