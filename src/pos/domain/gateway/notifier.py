"""Port for user-facing notifications (toasts, terminal messages, ...)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum


class NotificationKind(Enum):
    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


class Notifier(ABC):

    @abstractmethod
    def notify(self, kind: NotificationKind, title: str, message: str) -> None:
        """Show a short message to the cashier."""
