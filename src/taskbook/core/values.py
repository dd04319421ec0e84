"""Immutable value types that make up a task - no I/O dependencies."""

import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from ..exceptions import ValidationError


class PriorityLevel(Enum):
    """How pressing a task is."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def parse(cls, text: str) -> "PriorityLevel":
        """Parse a priority name, ignoring case."""
        try:
            return cls[text.strip().upper()]
        except KeyError:
            allowed = "/".join(m.value for m in cls)
            raise ValidationError(f"Priority must be one of {allowed}, got '{text}'") from None


class TaskCategoryType(Enum):
    """The area of work a task belongs to."""

    DATABASE = "database"
    FRONTEND = "frontend"
    BACKEND = "backend"
    UIUX = "uiux"
    PRESENTATION = "presentation"
    OTHERS = "others"

    @classmethod
    def parse(cls, text: str) -> "TaskCategoryType":
        """Parse a category name, ignoring case. "ui/ux" and "ui-ux" map to UIUX."""
        key = re.sub(r"[/\-\s]", "", text.strip()).upper()
        try:
            return cls[key]
        except KeyError:
            allowed = "/".join(m.value for m in cls)
            raise ValidationError(f"Category must be one of {allowed}, got '{text}'") from None


def _require_text(value: str, label: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{label} should not be blank")
    return value.strip()


@dataclass(frozen=True)
class TaskName:
    """Name of a task. Never blank."""

    value: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _require_text(self.value, "Task name"))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Description:
    """Free-text description of a task. Never blank."""

    value: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _require_text(self.value, "Description"))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Priority:
    """Priority of a task, compared by its level."""

    level: PriorityLevel

    def __post_init__(self) -> None:
        if not isinstance(self.level, PriorityLevel):
            raise ValidationError(f"Priority level must be a PriorityLevel, got {self.level!r}")

    @classmethod
    def parse(cls, text: str) -> "Priority":
        return cls(PriorityLevel.parse(text))

    def __str__(self) -> str:
        return self.level.name


@dataclass(frozen=True)
class TaskCategory:
    """
    Category of a task: a caller-defined level plus a category type.

    Two categories are equal only when both level and type match. The hash
    covers both fields so it stays consistent with equality.
    """

    level: int
    type: TaskCategoryType

    def __post_init__(self) -> None:
        if isinstance(self.level, bool) or not isinstance(self.level, int):
            raise ValidationError(f"Category level must be an integer, got {self.level!r}")
        if not isinstance(self.type, TaskCategoryType):
            raise ValidationError(f"Category type must be a TaskCategoryType, got {self.type!r}")

    @classmethod
    def parse(cls, text: str, level: int) -> "TaskCategory":
        return cls(level, TaskCategoryType.parse(text))

    def __str__(self) -> str:
        return f"{self.level}{self.type.name}"


@dataclass(frozen=True, order=True)
class TaskDeadline:
    """Calendar date a task is due on."""

    date: date

    def __post_init__(self) -> None:
        if isinstance(self.date, datetime) or not isinstance(self.date, date):
            raise ValidationError(f"Deadline must be a calendar date, got {self.date!r}")

    @classmethod
    def parse(cls, text: str) -> "TaskDeadline":
        """Parse an ISO date (YYYY-MM-DD)."""
        try:
            return cls(date.fromisoformat(text.strip()))
        except ValueError:
            raise ValidationError(f"Deadline should be in YYYY-MM-DD format, got '{text}'") from None

    def is_before(self, other: "TaskDeadline") -> bool:
        return self.date < other.date

    def is_after(self, other: "TaskDeadline") -> bool:
        return self.date > other.date

    def is_equal(self, other: "TaskDeadline") -> bool:
        return self.date == other.date

    def __str__(self) -> str:
        return self.date.isoformat()


# local-part: alphanumerics and +_.- not starting/ending with a special char
# domain: dot-separated labels, final label at least 2 characters
_EMAIL_RE = re.compile(
    r"^[a-zA-Z0-9](?:[a-zA-Z0-9+_.\-]*[a-zA-Z0-9])?"
    r"@(?:[a-zA-Z0-9](?:[a-zA-Z0-9\-]*[a-zA-Z0-9])?\.)*"
    r"[a-zA-Z0-9](?:[a-zA-Z0-9\-]*[a-zA-Z0-9])+$"
)


@dataclass(frozen=True)
class Email:
    """Email address of a contact in the address book."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not _EMAIL_RE.match(self.value.strip()):
            raise ValidationError(f"'{self.value}' is not a valid email address")
        object.__setattr__(self, "value", self.value.strip())

    def __str__(self) -> str:
        return self.value
