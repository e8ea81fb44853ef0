from __future__ import annotations

from jobvault.domain.models import Notification
from jobvault.ports.notification_port import NotificationPort


class NoopNotificationSink(NotificationPort):
    def notify(self, notification: Notification) -> None:
        _ = notification
