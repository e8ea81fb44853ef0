from __future__ import annotations

from jobvault.domain.models import Notification
from jobvault.ports.notification_port import NotificationPort


class InMemoryNotificationSink(NotificationPort):
    def __init__(self) -> None:
        self.notifications: list[Notification] = []

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)

    @property
    def titles(self) -> list[str]:
        return [n.title for n in self.notifications]
