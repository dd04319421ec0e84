"""Read-only JSON task file adapter."""

import json
import logging
from pathlib import Path

from ..core.tasks import Task
from ..exceptions import ValidationError

logger = logging.getLogger(__name__)


class JsonTaskSource:
    """
    Loads tasks from a JSON file.

    Implements TaskSource protocol. The file holds either a list of task
    objects or ``{"tasks": [...]}``. A missing file yields no tasks.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def fetch_all(self) -> list[Task]:
        if not self.path.exists():
            logger.info(f"Task file {self.path} not found, starting with an empty list")
            return []

        try:
            data = json.loads(self.path.read_text())
        except json.JSONDecodeError as e:
            raise ValidationError(f"Task file {self.path} is not valid JSON: {e}") from e

        if isinstance(data, dict):
            data = data.get("tasks", [])
        if not isinstance(data, list):
            raise ValidationError(f"Task file {self.path} must contain a list of tasks")

        tasks = [Task.from_dict(item) for item in data]
        logger.debug(f"Loaded {len(tasks)} tasks from {self.path}")
        return tasks
