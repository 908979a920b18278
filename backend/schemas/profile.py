from pydantic import BaseModel, AnyHttpUrl, ConfigDict
from typing import Optional
from datetime import datetime
from uuid import UUID


class ProfileUpdate(BaseModel):  # for PATCH
    display_name: Optional[str] = None
    avatar_url: Optional[AnyHttpUrl] = None
    model_config = ConfigDict(extra="ignore")


class ProfileOut(BaseModel):
    id: UUID
    display_name: Optional[str] = None
    avatar_url: Optional[str] = None
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)
