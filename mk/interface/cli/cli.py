import logging
import shlex
from pathlib import Path

import click

from mk.application.config_loader import ConfigLoadError, load_config
from mk.application.editor_launcher import EditorLauncher
from mk.application.task_executor import TaskExecutor
from mk.application.task_parser import parse_tasks, sort_tasks
from mk.domain.constants import USAGE
from mk.domain.errors import MkError
from mk.domain.models import MkResult
from mk.domain.validation.path_expander import PathExpander

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s: %(message)s"


def _emit_notes(result: MkResult) -> None:
    """Emit non-fatal notes to stderr."""
    for msg in result.messages:
        click.echo(f"mk: {msg}", err=True)


def _configure_logging(level: int) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("mk").setLevel(level)


# Every token belongs to the mk grammar: no --help, and unknown "options"
# such as -o, --open, -s- and -h- are passed through in order.
@click.command(
    help="Create files, directories and links.",
    context_settings={
        "ignore_unknown_options": True,
        "help_option_names": [],
    },
)
@click.argument("tokens", nargs=-1, type=click.UNPROCESSED)
def cli(tokens: tuple[str, ...]) -> None:
    if not tokens:
        click.echo(USAGE, nl=False)
        return

    try:
        cfg = load_config(project_root=Path.cwd(), user_home=Path.home())
    except (ConfigLoadError, OSError, RuntimeError) as e:
        raise click.ClickException(str(e)) from e

    _configure_logging(cfg.logging_level)

    try:
        expander = PathExpander.from_environment()
        tasks = sort_tasks(parse_tasks(tokens))
    except MkError as e:
        raise click.ClickException(str(e)) from e

    executor = TaskExecutor(
        expander,
        EditorLauncher(file_editor=cfg.file_editor, dir_editor=cfg.dir_editor),
        file_mode=cfg.file_mode,
        dir_mode=cfg.dir_mode,
        command_line=shlex.join(["mk", *tokens]),
    )

    for task in tasks:
        logger.debug(f"Executing {task.kind.value}: {task.paths}")
        result = executor.execute(task)
        _emit_notes(result)
        if not result.ok:
            raise click.ClickException(result.error_message or "failed")


def main() -> None:
    cli(prog_name="mk")
