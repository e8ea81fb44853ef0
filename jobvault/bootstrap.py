from __future__ import annotations

from typing import Callable

from jobvault.adapters.clock.system_clock_adapter import SystemClockAdapter
from jobvault.adapters.notifications.factory import create_notification_sink
from jobvault.adapters.storage.factory import create_document_store
from jobvault.application.catalog_engine import DocumentCatalogEngine
from jobvault.application.config import AppConfig, load_config
from jobvault.ports.clock_port import ClockPort


def build_catalog_engine(
    cfg: AppConfig | None = None,
    *,
    clock: ClockPort | None = None,
    id_factory: Callable[[], str] | None = None,
) -> DocumentCatalogEngine:
    cfg = cfg or load_config()
    return DocumentCatalogEngine(
        store=create_document_store(
            fmt=cfg.document_store_format,
            path=cfg.document_store_path,
            key=cfg.document_store_key,
        ),
        clock=clock or SystemClockAdapter(),
        notifier=create_notification_sink(
            kind=cfg.notification_sink,
            log_file=cfg.notification_log_file,
        ),
        id_factory=id_factory,
    )
