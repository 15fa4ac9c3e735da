"""
Path expansion utilities for mk.

Provides:
- Home directory expansion for a leading ``~`` segment
- Absolutization against the invocation directory
- Non-dereferencing existence checks

Expansion is total: every token maps to an absolute path without an
error branch.
"""

import os
import stat
from dataclasses import dataclass
from pathlib import Path

from mk.domain.errors import StartupError


@dataclass(frozen=True)
class PathInfo:
    """Result of a non-dereferencing stat."""

    exists: bool
    is_dir: bool = False
    is_symlink: bool = False


MISSING = PathInfo(exists=False)


class PathExpander:
    """Expands and absolutizes command-line paths.

    Args:
        home: The current user's home directory
        invoke_dir: Absolute directory mk was invoked from
    """

    def __init__(self, home: str | Path, invoke_dir: str | Path) -> None:
        self.home = str(home)
        self.invoke_dir = str(invoke_dir)
        if not os.path.isabs(self.invoke_dir):
            raise ValueError(f"invoke_dir must be absolute: {self.invoke_dir}")

    @classmethod
    def from_environment(cls) -> "PathExpander":
        """
        Build an expander for the running process.

        Raises:
            StartupError: If the working directory or home directory
                cannot be determined
        """
        try:
            invoke_dir = os.getcwd()
        except OSError as e:
            raise StartupError(f"cannot determine working directory: {e}") from e

        try:
            home = Path.home()
        except (RuntimeError, KeyError) as e:
            raise StartupError(f"cannot determine current user: {e}") from e

        return cls(home=home, invoke_dir=invoke_dir)

    def expand(self, path: str) -> str:
        """
        Replace a leading ``~`` segment with the home directory.

        Only ``~`` itself and paths starting with ``~/`` are rewritten;
        ``~user`` forms pass through unchanged.

        Examples:
            >>> PathExpander("/home/ann", "/tmp").expand("~/notes.md")
            '/home/ann/notes.md'
            >>> PathExpander("/home/ann", "/tmp").expand("~bob/x")
            '~bob/x'
        """
        if path == "~" or path.startswith("~/"):
            rest = path[1:].lstrip("/")
            return os.path.normpath(os.path.join(self.home, rest))
        return path

    def absolutize(self, path: str) -> str:
        """
        Make ``path`` absolute relative to the invocation directory.

        The result is cleaned (``..`` and duplicate separators collapsed,
        trailing separator dropped).
        """
        return os.path.normpath(os.path.join(self.invoke_dir, path))

    def resolve(self, path: str) -> str:
        """Expand then absolutize."""
        return self.absolutize(self.expand(path))

    @staticmethod
    def inspect(path: str) -> PathInfo:
        """
        Stat ``path`` without following a final symlink.

        Returns:
            MISSING when nothing exists at the path (or an ancestor is
            not a directory); otherwise the entry's type flags

        Raises:
            OSError: For failures other than a missing entry
        """
        try:
            st = os.lstat(path)
        except (FileNotFoundError, NotADirectoryError):
            return MISSING
        return PathInfo(
            exists=True,
            is_dir=stat.S_ISDIR(st.st_mode),
            is_symlink=stat.S_ISLNK(st.st_mode),
        )
