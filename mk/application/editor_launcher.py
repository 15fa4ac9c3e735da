"""Opens created paths in an external editor.

The editor command comes from ``$_MK_FILE_EDITOR`` or ``$_MK_DIR_EDITOR``
depending on whether the path is a directory, falling back to the
``file_editor`` / ``dir_editor`` config values. The editor is started
and not waited on: it keeps the terminal (no new session), and the
launcher holds its Popen handle, polling it on later opens. Editors still
running when mk exits are reparented by the OS.

Every failure here is a note: the launcher returns the message instead
of raising, and the caller keeps going.
"""

import logging
import os
import shlex
import shutil
import subprocess
from typing import Callable, Mapping

from mk.domain.constants import DIR_EDITOR_ENV, FILE_EDITOR_ENV

logger = logging.getLogger(__name__)


class EditorLauncher:
    """Default opener used by TaskExecutor for ``-o`` items."""

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        *,
        file_editor: str | None = None,
        dir_editor: str | None = None,
        which: Callable[[str], str | None] = shutil.which,
        spawn: Callable[..., subprocess.Popen] = subprocess.Popen,
    ) -> None:
        self._environ = os.environ if environ is None else environ
        self._fallbacks = {FILE_EDITOR_ENV: file_editor, DIR_EDITOR_ENV: dir_editor}
        self._which = which
        self._spawn = spawn
        # Popen handles of started editors
        self.processes: list[subprocess.Popen] = []

    def editor_command(self, is_dir: bool) -> tuple[str, str | None]:
        """Return (env var name, configured command or None)."""
        env_var = DIR_EDITOR_ENV if is_dir else FILE_EDITOR_ENV
        command = self._environ.get(env_var) or self._fallbacks[env_var]
        return env_var, command or None

    def open(self, path: str, is_dir: bool) -> str | None:
        """Start the editor on ``path``.

        Returns:
            None when the editor was started, else a note describing why not
        """
        env_var, command = self.editor_command(is_dir)
        if command is None:
            return f"don't know which editor to open, set ${env_var}"

        try:
            argv = shlex.split(command)
        except ValueError as e:
            return f"-o: cannot parse ${env_var} {command!r}: {e}"
        if not argv:
            return f"don't know which editor to open, set ${env_var}"

        exe = self._which(argv[0])
        if exe is None:
            return f"-o: could not find command {argv[0]!r}"

        logger.debug(f"Starting editor: {exe} {' '.join(argv[1:] + [path])}")
        self.reap()
        try:
            process = self._spawn([exe, *argv[1:], path])
        except OSError as e:
            return f"-o: could not start editor: {e}"
        self.processes.append(process)
        return None

    def reap(self) -> None:
        """Poll started editors and drop the ones that have exited."""
        self.processes = [p for p in self.processes if p.poll() is None]
