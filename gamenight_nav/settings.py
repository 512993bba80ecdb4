from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


def _resolve_path(value: str) -> Path:
    candidate = Path(value)
    return candidate if candidate.is_absolute() else Path.cwd() / candidate


def _parse_tokens(raw: str) -> dict[str, str]:
    """Parse ``token:role,token:role`` into a mapping; a bare token gets no role."""
    tokens: dict[str, str] = {}
    for chunk in (raw or "").split(","):
        chunk = chunk.strip()
        if not chunk:
            continue
        token, _, role = chunk.partition(":")
        if token.strip():
            tokens[token.strip()] = role.strip()
    return tokens


@dataclass
class Settings:
    store_dir: Path
    admin_tokens: dict[str, str] = field(default_factory=dict)
    backup_keep: int = 5
    log_level: str = "INFO"
    api_url: str = "http://127.0.0.1:5000"
    request_timeout: float = 10.0


def load_settings() -> Settings:
    try:
        backup_keep = int(os.environ.get("NAV_BACKUP_KEEP", "5"))
    except ValueError as exc:
        raise ValueError(f"NAV_BACKUP_KEEP must be an integer: {os.environ.get('NAV_BACKUP_KEEP')}") from exc
    try:
        timeout = float(os.environ.get("NAV_REQUEST_TIMEOUT", "10"))
    except ValueError as exc:
        raise ValueError(f"NAV_REQUEST_TIMEOUT must be a number: {os.environ.get('NAV_REQUEST_TIMEOUT')}") from exc

    return Settings(
        store_dir=_resolve_path(os.environ.get("NAV_STORE_DIR") or "navigation_configs"),
        admin_tokens=_parse_tokens(os.environ.get("NAV_ADMIN_TOKENS", "")),
        backup_keep=max(backup_keep, 0),
        log_level=(os.environ.get("NAV_LOG_LEVEL") or "INFO").upper(),
        api_url=os.environ.get("NAV_API_URL") or "http://127.0.0.1:5000",
        request_timeout=timeout,
    )
