"""Outcome of executing a single work item."""

from enum import Enum

from pydantic import BaseModel, Field


class MkStatus(str, Enum):
    SUCCESS = "success"
    FATAL = "fatal"


class FatalKind(str, Enum):
    TARGET_MISSING = "target_missing"            # Link target does not exist
    LINK_PARENT_MISSING = "link_parent_missing"  # Symlink directory does not exist
    OS_ERROR = "os_error"                        # Filesystem call failed


class MkResult(BaseModel):
    """Discriminated result: SUCCESS, or FATAL with a kind and message.

    ``messages`` holds the non-fatal notes in the order they were raised;
    the CLI echoes them to stderr whatever the status.
    """

    status: MkStatus
    fatal_kind: FatalKind | None = None
    error_message: str | None = None
    messages: list[str] = Field(default_factory=list)
    created: list[str] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status == MkStatus.SUCCESS

    @classmethod
    def success(cls, *, messages: list[str] | None = None, created: list[str] | None = None) -> "MkResult":
        return cls(
            status=MkStatus.SUCCESS,
            messages=list(messages or []),
            created=list(created or []),
        )

    @classmethod
    def fatal(cls, kind: FatalKind, message: str, *, messages: list[str] | None = None) -> "MkResult":
        return cls(
            status=MkStatus.FATAL,
            fatal_kind=kind,
            error_message=message,
            messages=list(messages or []),
        )
