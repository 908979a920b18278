"""
Job pipeline statuses.

Single place that knows which statuses exist, how they are shown and how a
job moves between them. Any status may move to any other one; the board
lets the user drag cards freely.
"""
import enum
from typing import List, NamedTuple, Union

from errors import UnknownStatus


class JobStatus(str, enum.Enum):
    # declaration order == column order on the board
    APPLYING = "APPLYING"
    APPLIED = "APPLIED"
    FOR_INTERVIEW = "FOR_INTERVIEW"
    INTERVIEWING = "INTERVIEWING"
    OFFER = "OFFER"
    NEGOTIATING = "NEGOTIATING"
    HIRED = "HIRED"
    ON_HOLD = "ON_HOLD"
    REJECTED = "REJECTED"
    NO_RESPONSE = "NO_RESPONSE"
    WITHDRAW = "WITHDRAW"


class StatusMeta(NamedTuple):
    label: str
    color: str


STATUS_CONFIG = {
    JobStatus.APPLYING: StatusMeta("To Apply", "muted"),
    JobStatus.APPLIED: StatusMeta("Applied", "blue"),
    JobStatus.FOR_INTERVIEW: StatusMeta("For Interview", "purple"),
    JobStatus.INTERVIEWING: StatusMeta("Interviewing", "primary"),
    JobStatus.OFFER: StatusMeta("Offer", "secondary"),
    JobStatus.NEGOTIATING: StatusMeta("Negotiating", "yellow"),
    JobStatus.HIRED: StatusMeta("Hired", "green"),
    JobStatus.ON_HOLD: StatusMeta("On Hold", "gray"),
    JobStatus.REJECTED: StatusMeta("Rejected", "red"),
    JobStatus.NO_RESPONSE: StatusMeta("No Response", "orange"),
    JobStatus.WITHDRAW: StatusMeta("Withdrawn", "gray"),
}

DEFAULT_STATUS = JobStatus.APPLYING


def coerce_status(value: Union[JobStatus, str]) -> JobStatus:
    """Turn a persisted/request value into a JobStatus or raise UnknownStatus."""
    if isinstance(value, JobStatus):
        return value
    try:
        return JobStatus(value)
    except ValueError:
        raise UnknownStatus(value)


def label_of(status: Union[JobStatus, str]) -> str:
    return STATUS_CONFIG[coerce_status(status)].label


def color_of(status: Union[JobStatus, str]) -> str:
    return STATUS_CONFIG[coerce_status(status)].color


def all_statuses() -> List[JobStatus]:
    return list(JobStatus)


def change_status(record, new_status: Union[JobStatus, str]):
    """
    Move a job to `new_status` and hand it back.
    Every (old, new) pair is allowed. Persisting is up to the caller.
    """
    record.status = coerce_status(new_status)
    return record
