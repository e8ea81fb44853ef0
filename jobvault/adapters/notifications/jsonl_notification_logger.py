from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path

from jobvault.domain.models import Notification
from jobvault.ports.notification_port import NotificationPort


class JsonlNotificationLogger(NotificationPort):
    def __init__(self, log_file: Path) -> None:
        self._log_file = log_file

    def notify(self, notification: Notification) -> None:
        payload = {
            'ts': datetime.now(UTC).isoformat(),
            'level': notification.level,
            'title': notification.title,
            'description': notification.description,
        }
        self._log_file.parent.mkdir(parents=True, exist_ok=True)
        with self._log_file.open('a', encoding='utf-8') as fh:
            fh.write(json.dumps(payload, ensure_ascii=True))
            fh.write('\n')
