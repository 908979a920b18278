# services/kanban.py
from typing import Dict, Iterable, List

from models1.status import JobStatus, STATUS_CONFIG, all_statuses, coerce_status


def group_by_status(jobs: Iterable) -> Dict[JobStatus, List]:
    """
    One bucket per status, all of them present (possibly empty), in board order.
    Jobs keep their input order inside a bucket.
    """
    buckets: Dict[JobStatus, List] = {s: [] for s in all_statuses()}
    for job in jobs:
        buckets[coerce_status(job.status)].append(job)
    return buckets


def board_columns(jobs: Iterable) -> List[dict]:
    columns = []
    for status, bucket in group_by_status(jobs).items():
        meta = STATUS_CONFIG[status]
        columns.append({
            "status": status,
            "label": meta.label,
            "color": meta.color,
            "count": len(bucket),
            "jobs": bucket,
        })
    return columns
