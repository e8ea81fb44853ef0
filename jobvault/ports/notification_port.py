from __future__ import annotations

from abc import ABC, abstractmethod

from jobvault.domain.models import Notification


class NotificationPort(ABC):
    @abstractmethod
    def notify(self, notification: Notification) -> None:
        raise NotImplementedError
