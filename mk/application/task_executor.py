"""Performs the filesystem effect of one work item.

The executor never exits the process. Every outcome is an MkResult:
SUCCESS (possibly with notes) or FATAL with a FatalKind. The CLI decides
what a FATAL result does to the rest of the run.

Per kind:
- FILE: trailing separator -> ensure directory (and parents). Otherwise
  no-op if anything exists at the path, else ensure parents and create
  an empty file.
- SYMLINK: target must exist, link parent must exist (never created).
  The link stores the absolute target.
- HARDLINK: target must exist. A symlink target is allowed with a note;
  the hard link points at the symlink inode itself.
"""

import errno
import logging
import os
from pathlib import Path
from typing import Protocol

from mk.domain.constants import DEFAULT_DIR_MODE, DEFAULT_FILE_MODE
from mk.domain.models import FatalKind, MkResult, WorkItem, WorkKind
from mk.domain.validation.path_expander import PathExpander

logger = logging.getLogger(__name__)


class Opener(Protocol):
    """Opens a path in an external program; returns a note on failure."""

    def open(self, path: str, is_dir: bool) -> str | None: ...


class TaskExecutor:
    """Executes work items against the filesystem.

    Args:
        expander: Resolves tokens to absolute paths
        opener: Used for ``open_after`` items; None disables opening
        file_mode: Permission bits for new files
        dir_mode: Permission bits for new directories
        command_line: The original invocation, quoted, used in the remedy
            hint of a missing symlink directory
    """

    def __init__(
        self,
        expander: PathExpander,
        opener: Opener | None = None,
        *,
        file_mode: int = DEFAULT_FILE_MODE,
        dir_mode: int = DEFAULT_DIR_MODE,
        command_line: str | None = None,
    ) -> None:
        self.expander = expander
        self.opener = opener
        self.file_mode = file_mode
        self.dir_mode = dir_mode
        self.command_line = command_line

    def execute(self, item: WorkItem) -> MkResult:
        if item.kind == WorkKind.FILE:
            result = self._make_file(item.paths[0])
        elif item.kind == WorkKind.SYMLINK:
            result = self._make_symlink(item.paths[0], item.paths[1])
        elif item.kind == WorkKind.HARDLINK:
            result = self._make_hardlink(item.paths[0], item.paths[1])
        else:  # pragma: no cover
            raise ValueError(f"Unknown work kind: {item.kind}")

        if result.ok and item.open_after:
            result.messages.extend(self._open(item.first_path))
        return result

    # ------------------------------------------------------------------

    def _make_file(self, path: str) -> MkResult:
        target = self.expander.resolve(path)
        try:
            if path.endswith(("/", os.sep)):
                created = self._ensure_dir(target)
                return MkResult.success(created=created)

            if self.expander.inspect(target).exists:
                logger.debug(f"Exists, leaving untouched: {target}")
                return MkResult.success()

            created = self._ensure_dir(os.path.dirname(target))
            Path(target).touch(mode=self.file_mode, exist_ok=False)
        except OSError as e:
            return MkResult.fatal(FatalKind.OS_ERROR, f"failed to create {path!r}: {e}")

        logger.debug(f"Created file: {target}")
        return MkResult.success(created=created + [target])

    def _make_symlink(self, link: str, target: str) -> MkResult:
        abs_target = self.expander.resolve(target)
        abs_link = self.expander.resolve(link)
        try:
            if not self.expander.inspect(abs_target).exists:
                return MkResult.fatal(
                    FatalKind.TARGET_MISSING,
                    f"target file {abs_target!r} does not exist",
                )

            link_dir = os.path.dirname(abs_link)
            if not self.expander.inspect(link_dir).exists:
                return MkResult.fatal(
                    FatalKind.LINK_PARENT_MISSING,
                    f"symlink directory {link_dir!r} doesn't exist\n\t{self._remedy(link_dir)}",
                )

            os.symlink(abs_target, abs_link)
        except OSError as e:
            return MkResult.fatal(
                FatalKind.OS_ERROR,
                f"failed to create symlink {link} -> {abs_target}: {e}",
            )

        logger.debug(f"Created symlink: {abs_link} -> {abs_target}")
        return MkResult.success(created=[abs_link])

    def _make_hardlink(self, link: str, target: str) -> MkResult:
        abs_target = self.expander.resolve(target)
        abs_link = self.expander.resolve(link)
        messages: list[str] = []
        try:
            info = self.expander.inspect(abs_target)
            if not info.exists:
                return MkResult.fatal(
                    FatalKind.TARGET_MISSING,
                    f"target file {abs_target!r} does not exist",
                )
            if info.is_symlink:
                messages.append(f"note: target {target!r} is a symlink")

            os.link(abs_target, abs_link, follow_symlinks=False)
        except OSError as e:
            return MkResult.fatal(
                FatalKind.OS_ERROR,
                f"failed to create hardlink {link} -> {target}: {e}",
                messages=messages,
            )

        logger.debug(f"Created hardlink: {abs_link} -> {abs_target}")
        return MkResult.success(messages=messages, created=[abs_link])

    def _open(self, path: str) -> list[str]:
        abs_path = self.expander.resolve(path)
        messages: list[str] = []
        try:
            info = self.expander.inspect(abs_path)
        except OSError as e:
            return [f"open: cannot stat {abs_path!r}: {e}"]
        if not info.exists:
            messages.append(f"open: target file {abs_path!r} does not exist")

        if self.opener is None:
            return messages
        note = self.opener.open(abs_path, info.is_dir)
        if note:
            messages.append(note)
        return messages

    # ------------------------------------------------------------------

    def _ensure_dir(self, path: str) -> list[str]:
        """Create ``path`` and missing parents, each with ``dir_mode``.

        Returns the directories created, shallowest first.
        """
        missing: list[str] = []
        current = path
        while not os.path.lexists(current):
            missing.append(current)
            parent = os.path.dirname(current)
            if parent == current:
                break
            current = parent

        created: list[str] = []
        for d in reversed(missing):
            try:
                os.mkdir(d, self.dir_mode)
            except FileExistsError:
                if not os.path.isdir(d):
                    raise
                continue
            logger.debug(f"Created directory: {d}")
            created.append(d)

        if not os.path.isdir(path):
            raise FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), path)
        return created

    def _remedy(self, link_dir: str) -> str:
        rel = os.path.relpath(link_dir, self.expander.invoke_dir)
        if rel == os.pardir or rel.startswith(os.pardir + os.sep):
            rel = link_dir
        hint = f"mk {rel}{os.sep}"
        if self.command_line:
            hint += f" && {self.command_line}"
        return hint
