from enum import Enum

from pydantic import BaseModel, ConfigDict, model_validator


class WorkKind(str, Enum):
    """What a work item creates."""

    FILE = "file"          # Regular file, or directory when the path ends with a separator
    SYMLINK = "symlink"    # paths = [link, target]
    HARDLINK = "hardlink"  # paths = [link, target]


_PATH_COUNTS: dict[WorkKind, int] = {
    WorkKind.FILE: 1,
    WorkKind.SYMLINK: 2,
    WorkKind.HARDLINK: 2,
}


class WorkItem(BaseModel):
    """One parsed unit of requested filesystem action.

    Built once per invocation from command-line tokens and consumed once
    by the executor.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: WorkKind
    open_after: bool = False
    paths: list[str]

    @model_validator(mode="after")
    def _check_path_count(self) -> "WorkItem":
        expected = _PATH_COUNTS[self.kind]
        if len(self.paths) != expected:
            raise ValueError(
                f"{self.kind.value} work item takes {expected} path(s), got {len(self.paths)}"
            )
        return self

    @property
    def first_path(self) -> str:
        return self.paths[0]
