from __future__ import annotations

from pathlib import Path

from jobvault.adapters.notifications.in_memory_notification_sink import InMemoryNotificationSink
from jobvault.adapters.notifications.jsonl_notification_logger import JsonlNotificationLogger
from jobvault.adapters.notifications.noop_notification_sink import NoopNotificationSink
from jobvault.ports.notification_port import NotificationPort


def create_notification_sink(*, kind: str, log_file: str) -> NotificationPort:
    normalized = kind.strip().lower()
    if normalized == 'jsonl':
        return JsonlNotificationLogger(Path(log_file))
    if normalized == 'memory':
        return InMemoryNotificationSink()
    if normalized == 'noop':
        return NoopNotificationSink()
    raise ValueError(f'Unsupported notification sink: {kind}')
