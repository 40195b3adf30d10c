"""
Notifications shown to the user when an import or export fails.
"""

import logging
from enum import Enum
from typing import List, NamedTuple, Optional, Protocol


class Errors(str, Enum):
    IMPORT_ERROR = "Error while importing the OpenAPI file"
    IMPORT_WRONG_VERSION = "Imported file is not a Swagger v2 or OpenAPI v3 specification"
    EXPORT_ERROR = "Error while exporting to an OpenAPI file"


class Notification(NamedTuple):
    severity: str
    message: str


class Notifier(Protocol):
    def warn(self, message: str) -> None:
        ...

    def error(self, message: str) -> None:
        ...


class LoggingNotifier:
    """Sends notifications to a logger."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def warn(self, message: str) -> None:
        self.logger.warning(message)

    def error(self, message: str) -> None:
        self.logger.error(message)


class CollectingNotifier:
    """Keeps notifications in memory so they can be displayed later."""

    def __init__(self):
        self.notifications: List[Notification] = []

    def warn(self, message: str) -> None:
        self.notifications.append(Notification("warning", message))

    def error(self, message: str) -> None:
        self.notifications.append(Notification("error", message))
