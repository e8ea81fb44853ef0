from __future__ import annotations

import os
from dataclasses import dataclass


def _env(key: str, default: str) -> str:
    return os.getenv(key, default)


def _env_alias(keys: list[str], default: str) -> str:
    for key in keys:
        value = os.getenv(key)
        if value is not None and value != '':
            return value
    return default


@dataclass(frozen=True)
class AppConfig:
    app_env: str
    document_store_format: str
    document_store_path: str
    document_store_key: str
    notification_sink: str
    notification_log_file: str


def _default_store_path(store_format: str) -> str:
    suffix = 'yaml' if store_format.strip().lower() in {'yaml', 'yml'} else 'json'
    return f'.context/vault/documents.{suffix}'


def load_config() -> AppConfig:
    store_format = _env('DOCUMENT_STORE_FORMAT', 'json')
    return AppConfig(
        app_env=_env('APP_ENV', 'local'),
        document_store_format=store_format,
        document_store_path=_env_alias(
            ['DOCUMENT_STORE_PATH', 'VAULT_DATA_FILE'], _default_store_path(store_format)
        ),
        document_store_key=_env('DOCUMENT_STORE_KEY', 'openJobDocuments'),
        notification_sink=_env('NOTIFICATION_SINK', 'jsonl'),
        notification_log_file=_env(
            'NOTIFICATION_LOG_FILE', '.context/reports/vault_notifications.jsonl'
        ),
    )
