"""Domain models for mk."""

from .work_item import WorkItem, WorkKind
from .mk_result import FatalKind, MkResult, MkStatus


__all__ = [
    "WorkItem",
    "WorkKind",
    "FatalKind",
    "MkResult",
    "MkStatus",
]
