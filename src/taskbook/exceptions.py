"""Error types shared across taskbook."""


class TaskbookError(Exception):
    """Base class for all taskbook failures."""

    pass


class ValidationError(TaskbookError, ValueError):
    """Raised when a value type is constructed from malformed data."""

    pass


class CommandError(TaskbookError):
    """Raised when a command cannot be constructed or executed."""

    pass


class TaskNotFoundError(TaskbookError, LookupError):
    """Raised when a task is not present in the task list."""

    pass
