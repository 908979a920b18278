# api/jobs.py
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from db import get_db
from dependencies import get_current_profile_id
from errors import ValidationError
from models1.status import JobStatus
from schemas.jobs import BoardOut, JobIn, JobOut, JobStatusUpdate, JobUpdate, TableOut
from services import jobs as job_service
from services.kanban import board_columns
from services.table import SortDirection, SortField, sort_jobs

router = APIRouter(prefix="/jobs", tags=["jobs"])

# ---------- LIST (supports /api/jobs and /api/jobs/) ----------
@router.get("", response_model=list[JobOut])
@router.get("/", response_model=list[JobOut])
def list_jobs(
    status: Optional[JobStatus] = Query(default=None, description="one of the pipeline statuses"),
    # paging
    limit: int = Query(default=100, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    db: Session = Depends(get_db),
    uid: UUID = Depends(get_current_profile_id),
):
    return job_service.list_jobs(db, uid, status=status, limit=limit, offset=offset)

# ---------- TABLE VIEW ----------
@router.get("/table", response_model=TableOut)
def jobs_table(
    sort: str = Query(default=SortField.created_at.value, description="company|position|status|created_at"),
    direction: str = Query(default=SortDirection.desc.value, description="asc|desc"),
    db: Session = Depends(get_db),
    uid: UUID = Depends(get_current_profile_id),
):
    try:
        field = SortField(sort)
        order = SortDirection(direction)
    except ValueError as e:
        raise ValidationError(str(e))

    rows = sort_jobs(job_service.list_jobs(db, uid), field, order)
    # empty list is a normal answer, the frontend shows its own empty state
    return {"sort": {"field": field.value, "direction": order.value}, "jobs": rows, "total": len(rows)}

# ---------- KANBAN VIEW ----------
@router.get("/board", response_model=BoardOut)
def jobs_board(
    db: Session = Depends(get_db),
    uid: UUID = Depends(get_current_profile_id),
):
    rows = job_service.list_jobs(db, uid)
    return {"columns": board_columns(rows), "total": len(rows)}

# ---------- CREATE (supports /api/jobs and /api/jobs/) ----------
@router.post("", response_model=JobOut, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=JobOut, status_code=status.HTTP_201_CREATED)
def create_job(
    job_in: JobIn,
    db: Session = Depends(get_db),
    uid: UUID = Depends(get_current_profile_id),
):
    data = job_in.model_dump(exclude_unset=True)
    return job_service.create_job(
        db,
        uid,
        data.pop("company"),
        data.pop("position"),
        status=data.pop("status", None),
        **data,
    )

# ---------- READ ONE ----------
@router.get("/{job_id}", response_model=JobOut)
def get_job(
    job_id: UUID,
    db: Session = Depends(get_db),
    uid: UUID = Depends(get_current_profile_id),
):
    return job_service.get_job(db, job_id, uid)

# ---------- UPDATE ----------
@router.patch("/{job_id}", response_model=JobOut)
def update_job(
    job_id: UUID,
    job_in: JobUpdate,
    db: Session = Depends(get_db),
    uid: UUID = Depends(get_current_profile_id),
):
    return job_service.update_job(db, job_id, uid, job_in.model_dump(exclude_unset=True))

# ---------- STATUS CHANGE (board drag / "Move to ...") ----------
@router.patch("/{job_id}/status", response_model=JobOut)
def update_job_status(
    job_id: UUID,
    body: JobStatusUpdate,
    db: Session = Depends(get_db),
    uid: UUID = Depends(get_current_profile_id),
):
    return job_service.update_status(db, job_id, body.status, uid)

# ---------- DELETE ----------
@router.delete("/{job_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_job(
    job_id: UUID,
    db: Session = Depends(get_db),
    uid: UUID = Depends(get_current_profile_id),
):
    job_service.delete_job(db, job_id, uid)
    return  # 204
