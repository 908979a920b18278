# api/statuses.py
from fastapi import APIRouter

from models1.status import STATUS_CONFIG, all_statuses
from schemas.jobs import StatusOut

router = APIRouter(tags=["statuses"])


@router.get("/statuses", response_model=list[StatusOut])
def list_statuses():
    """Pipeline in board order, with what the UI needs to draw each column."""
    return [
        {"status": s, "label": STATUS_CONFIG[s].label, "color": STATUS_CONFIG[s].color}
        for s in all_statuses()
    ]
