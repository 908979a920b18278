# profile.py (router)
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from db import get_db
from dependencies import get_current_profile_id
from schemas.profile import ProfileOut, ProfileUpdate
from services.profiles import get_profile, update_profile

router = APIRouter(tags=["Profile"])


@router.get("/profile", response_model=ProfileOut)
def read_profile(
    db: Session = Depends(get_db),
    uid: UUID = Depends(get_current_profile_id),
):
    return get_profile(db, uid)


@router.patch("/profile", response_model=ProfileOut)
def patch_profile(
    payload: ProfileUpdate,
    db: Session = Depends(get_db),
    uid: UUID = Depends(get_current_profile_id),
):
    return update_profile(db, uid, payload.model_dump(exclude_unset=True))
