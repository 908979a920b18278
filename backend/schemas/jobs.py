from pydantic import BaseModel, AnyHttpUrl, ConfigDict, Field, computed_field
from typing import Optional, List
from datetime import datetime
from uuid import UUID

from models1.status import JobStatus, label_of, color_of


class JobIn(BaseModel):   # for POST (quick add)
    company: str
    position: str
    status: Optional[JobStatus] = None   # board column "+" button sends the column status
    url: Optional[AnyHttpUrl] = None
    salary: Optional[str] = None
    job_description: Optional[str] = None
    note: Optional[str] = None
    model_config = ConfigDict(extra="ignore")


class JobUpdate(BaseModel):  # for PATCH
    company: Optional[str] = None
    position: Optional[str] = None
    status: Optional[JobStatus] = None
    url: Optional[AnyHttpUrl] = None
    salary: Optional[str] = None
    job_description: Optional[str] = None
    note: Optional[str] = None
    model_config = ConfigDict(extra="ignore")


class JobStatusUpdate(BaseModel):
    status: JobStatus


class JobOut(BaseModel):
    id: UUID
    company: str
    position: str
    status: JobStatus
    url: Optional[str] = None
    salary: Optional[str] = None
    job_description: Optional[str] = None
    note: Optional[str] = None
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)

    @computed_field
    @property
    def status_label(self) -> str:
        return label_of(self.status)

    @computed_field
    @property
    def status_color(self) -> str:
        return color_of(self.status)


class StatusOut(BaseModel):
    status: JobStatus
    label: str
    color: str


class BoardColumn(StatusOut):
    count: int
    jobs: List[JobOut] = []


class BoardOut(BaseModel):
    columns: List[BoardColumn]
    total: int


class SortOut(BaseModel):
    field: str
    direction: str


class TableOut(BaseModel):
    sort: SortOut
    jobs: List[JobOut]
    total: int


class SummaryOut(BaseModel):
    total: int
    interviewing: int
    offers: int
    by_status: dict = Field(default_factory=dict)
