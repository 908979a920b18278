# services/table.py
"""
Ordering for the table view.

Works on anything exposing company / position / status / created_at
(ORM rows, JobOut, plain objects in tests) and never mutates the input.
"""
import enum
from datetime import datetime
from typing import Iterable, List, NamedTuple, Union


class SortField(str, enum.Enum):
    company = "company"
    position = "position"
    status = "status"
    created_at = "created_at"

    @classmethod
    def _missing_(cls, value):
        # frontend sends camelCase
        if value == "createdAt":
            return cls.created_at
        return None


class SortDirection(str, enum.Enum):
    asc = "asc"
    desc = "desc"


class SortState(NamedTuple):
    field: SortField = SortField.created_at
    direction: SortDirection = SortDirection.desc


DEFAULT_SORT = SortState()


def toggle_sort(state: SortState, field: Union[SortField, str]) -> SortState:
    """Same column flips the direction, a new column starts ascending."""
    field = SortField(field)
    if field == state.field:
        flipped = SortDirection.desc if state.direction == SortDirection.asc else SortDirection.asc
        return SortState(field, flipped)
    return SortState(field, SortDirection.asc)


def _sort_value(job, field: SortField):
    value = getattr(job, field.value, None)
    if value is None or value == "":
        return None
    if field == SortField.created_at:
        if isinstance(value, datetime):
            return value.timestamp()
        return datetime.fromisoformat(str(value)).timestamp()
    # status enums compare by their stored value
    return str(getattr(value, "value", value)).lower()


def sort_jobs(
    jobs: Iterable,
    field: Union[SortField, str] = DEFAULT_SORT.field,
    direction: Union[SortDirection, str] = DEFAULT_SORT.direction,
) -> List:
    """
    Stable sort by one column. Rows missing the value go last, in their
    original order, whichever way the column is sorted.
    """
    field = SortField(field)
    direction = SortDirection(direction)

    present, missing = [], []
    for job in jobs:
        key = _sort_value(job, field)
        if key is None:
            missing.append(job)
        else:
            present.append((key, job))

    # list.sort stays stable with reverse=True
    present.sort(key=lambda pair: pair[0], reverse=direction == SortDirection.desc)
    return [job for _, job in present] + missing
