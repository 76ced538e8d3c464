"""
Registry of named, deferred build actions.

Registering a task never runs it; ``run`` is the only dispatcher.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List

from .config.exceptions import DuplicateTaskException, UnknownTaskException

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegisteredTask:
    """A named zero-argument action."""
    name: str
    action: Callable[[], Any]
    description: str = ""


class TaskRegistry:
    """Maps task names to deferred actions."""

    def __init__(self):
        self._tasks: Dict[str, RegisteredTask] = {}

    def register(self, name: str, action: Callable[[], Any], description: str = "") -> RegisteredTask:
        if name in self._tasks:
            raise DuplicateTaskException(f"Task '{name}' is already registered", task_name=name)
        registered = RegisteredTask(name=name, action=action, description=description)
        self._tasks[name] = registered
        logger.debug(f"Registered task {name}")
        return registered

    def get(self, name: str) -> RegisteredTask:
        try:
            return self._tasks[name]
        except KeyError:
            raise UnknownTaskException(
                f"Unknown task '{name}'", task_name=name, available=self.names()
            ) from None

    def run(self, name: str) -> Any:
        """Invoke a registered task and return whatever its action returns."""
        registered = self.get(name)
        logger.info(f"Running task {name}")
        return registered.action()

    def names(self) -> List[str]:
        return list(self._tasks)

    def __contains__(self, name: str) -> bool:
        return name in self._tasks

    def __len__(self) -> int:
        return len(self._tasks)
