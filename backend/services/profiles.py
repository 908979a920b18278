# services/profiles.py
import logging
from typing import Any, Dict
from uuid import UUID

from sqlalchemy.orm import Session

from errors import NotFound, ValidationError
from models import Profile
from services.base import commit

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("display_name", "avatar_url")


def get_profile(db: Session, user_id: UUID) -> Profile:
    profile = db.get(Profile, user_id)
    if not profile:
        raise NotFound("Profile not found")
    return profile


def ensure_profile(db: Session, user_id: UUID) -> Profile:
    """Return the user's profile, creating an empty one the first time we see them."""
    profile = db.get(Profile, user_id)
    if profile:
        return profile
    profile = Profile(id=user_id)
    db.add(profile)
    commit(db, f"creating profile {user_id}")
    db.refresh(profile)
    logger.info("Created profile %s", user_id)
    return profile


def update_profile(db: Session, user_id: UUID, changes: Dict[str, Any]) -> Profile:
    profile = get_profile(db, user_id)
    unknown = set(changes) - set(EDITABLE_FIELDS)
    if unknown:
        raise ValidationError(f"Unknown profile fields: {', '.join(sorted(unknown))}")
    for k, v in changes.items():
        setattr(profile, k, str(v) if v is not None else None)
    commit(db, f"updating profile {user_id}")
    db.refresh(profile)
    return profile
