"""Domain-level exceptions for mk."""


class MkError(Exception):
    """Base class for errors that abort an mk invocation."""

    pass


class TaskParseError(MkError):
    """Raised when the command-line tokens do not form valid work items."""

    pass


class StartupError(MkError):
    """Raised when the working directory or home directory cannot be determined."""

    pass
