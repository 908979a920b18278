# api/metrics.py
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from db import get_db
from dependencies import get_current_profile_id
from schemas.jobs import SummaryOut
from services.jobs import job_summary

router = APIRouter(prefix="/jobs", tags=["jobs-metrics"])


@router.get("/summary", response_model=SummaryOut)
def jobs_summary(
    db: Session = Depends(get_db),
    uid: UUID = Depends(get_current_profile_id),
):
    # dashboard tiles: total / interviewing / offers, plus every column count
    return job_summary(db, uid)
