from __future__ import annotations

import json
import logging
import re
from datetime import datetime
from pathlib import Path
from shutil import copy2
from typing import Any

from ruamel.yaml import YAML

logger = logging.getLogger(__name__)

yaml = YAML()
yaml.preserve_quotes = True
yaml.indent(mapping=2, sequence=4, offset=2)
yaml.width = 4096

NAME_RE = re.compile(r"^[A-Za-z0-9_-]{1,64}$")


class StoreError(RuntimeError):
    """Reading or writing a stored document failed."""


class StoreNotInitialized(StoreError):
    """The store directory does not exist yet."""


def is_valid_name(name: str) -> bool:
    return bool(NAME_RE.match(name or ""))


def _now_stamp() -> str:
    return datetime.now().strftime("%Y%m%d-%H%M%S-%f")


def _plain(value: Any) -> Any:
    """Turn ruamel round-trip containers and scalars into plain JSON types."""
    return json.loads(json.dumps(value))


class NavStore:
    """One YAML document per navigation name, replaced wholesale on every write."""

    def __init__(self, root: Path, *, backup_keep: int = 5) -> None:
        self.root = root
        self.backup_keep = backup_keep

    @property
    def backup_dir(self) -> Path:
        return self.root / "backups"

    def exists(self) -> bool:
        return self.root.is_dir()

    def init(self) -> None:
        self.root.mkdir(parents=True, exist_ok=True)

    def path_for(self, name: str) -> Path:
        if not is_valid_name(name):
            raise ValueError(f"Invalid navigation name: {name!r}")
        return self.root / f"{name}.yml"

    def _ensure_root(self) -> None:
        if not self.exists():
            raise StoreNotInitialized(f"Navigation store {self.root} does not exist.")

    def get(self, name: str) -> dict[str, Any] | None:
        """Return the stored document for ``name`` or ``None`` when there is none."""
        path = self.path_for(name)
        self._ensure_root()
        if not path.exists():
            return None
        try:
            with path.open("r", encoding="utf-8") as handle:
                data = yaml.load(handle)
        except Exception as exc:
            raise StoreError(f"Failed to read {path.name}: {exc}") from exc
        if not isinstance(data, dict):
            raise StoreError(f"{path.name} must contain a mapping at the top level.")
        return _plain(data.get("config"))

    def upsert(self, name: str, config: dict[str, Any]) -> dict[str, Any]:
        path = self.path_for(name)
        self._ensure_root()
        backup = self._backup_file(path)
        document = {
            "name": name,
            "updated_at": datetime.now().isoformat(timespec="seconds"),
            "config": config,
        }
        tmp_path = path.with_name(f".{path.name}.tmp")
        try:
            with tmp_path.open("w", encoding="utf-8") as handle:
                yaml.dump(document, handle)
            tmp_path.replace(path)
        except OSError as exc:
            raise StoreError(f"Failed to write {path.name}: {exc}") from exc
        logger.info("Stored navigation %r%s", name, f" (backup {backup.name})" if backup else "")
        return {"name": name, "config": _plain(config)}

    def _backup_file(self, path: Path) -> Path | None:
        if not path.exists() or self.backup_keep <= 0:
            return None
        self.backup_dir.mkdir(parents=True, exist_ok=True)
        backup_path = self.backup_dir / f"{path.name}.bak-{_now_stamp()}"
        copy2(path, backup_path)

        # Keep only the most recent backups.
        backups = sorted(
            self.backup_dir.glob(f"{path.name}.bak-*"),
            key=lambda p: p.name,
            reverse=True,
        )
        for old in backups[self.backup_keep:]:
            try:
                old.unlink()
            except OSError:
                logger.debug("Could not remove old backup %s", old)
        return backup_path
