from __future__ import annotations

import math
import re
from typing import Any

from .models import Group, Item, MegaMenu, NavConfig, PrimaryLink

ICON_KEYS = (
    "leaf",
    "scroll",
    "bracket",
    "guide",
    "tags",
    "users",
    "trophy",
    "controller",
)

TONE_VALUES = ("sage", "mint", "wheat", "sky", "moss", "peach")

UUID_RE = re.compile(r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$")


class NavValidationError(ValueError):
    """Raised when a payload does not match the navigation schema."""

    def __init__(self, issues: list[str]) -> None:
        self.issues = list(issues)
        summary = issues[0] if len(issues) == 1 else f"{issues[0]} (+{len(issues) - 1} more)"
        super().__init__(summary)


class _Checker:
    """Collects every issue found while walking one document."""

    def __init__(self) -> None:
        self.issues: list[str] = []

    def fail(self, path: str, message: str) -> None:
        self.issues.append(f"{path}: {message}")

    def obj(self, value: Any, path: str) -> dict[str, Any] | None:
        if not isinstance(value, dict):
            self.fail(path, "must be an object")
            return None
        return value

    def array(self, data: dict[str, Any], key: str, path: str) -> list[Any]:
        value = data.get(key)
        if not isinstance(value, list):
            self.fail(f"{path}.{key}" if path else key, "must be an array")
            return []
        return value

    def text(self, data: dict[str, Any], key: str, path: str) -> str:
        value = data.get(key)
        where = f"{path}.{key}"
        if not isinstance(value, str):
            self.fail(where, "must be a string")
            return ""
        if not value:
            self.fail(where, f"{key} is required")
        return str(value)

    def uuid(self, data: dict[str, Any], key: str, path: str) -> str:
        value = self.text(data, key, path)
        if value and not UUID_RE.match(value):
            self.fail(f"{path}.{key}", "must be a UUID")
        return value

    def choice(self, data: dict[str, Any], key: str, path: str, allowed: tuple[str, ...]) -> str:
        value = data.get(key)
        if value not in allowed:
            self.fail(f"{path}.{key}", f"must be one of {', '.join(allowed)}")
            return ""
        return str(value)

    def number(self, data: dict[str, Any], key: str, path: str) -> float:
        value = data.get(key)
        if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
            self.fail(f"{path}.{key}", "must be a number")
            return 0
        return value

    def flag(self, data: dict[str, Any], key: str, path: str) -> bool:
        value = data.get(key)
        if not isinstance(value, bool):
            self.fail(f"{path}.{key}", "must be a boolean")
            return False
        return value


def _primary_link(check: _Checker, raw: Any, path: str) -> PrimaryLink | None:
    data = check.obj(raw, path)
    if data is None:
        return None
    return PrimaryLink(
        id=check.uuid(data, "id", path),
        href=check.text(data, "href", path),
        label=check.text(data, "label", path),
        icon=check.text(data, "icon", path),
        sort_order=check.number(data, "sortOrder", path),
        is_visible=check.flag(data, "isVisible", path),
    )


def _item(check: _Checker, raw: Any, path: str) -> Item | None:
    data = check.obj(raw, path)
    if data is None:
        return None
    return Item(
        id=check.uuid(data, "id", path),
        href=check.text(data, "href", path),
        title=check.text(data, "title", path),
        description=check.text(data, "description", path),
        icon=check.choice(data, "icon", path, ICON_KEYS),
        tone=check.choice(data, "tone", path, TONE_VALUES),
        sort_order=check.number(data, "sortOrder", path),
        is_visible=check.flag(data, "isVisible", path),
    )


def _group(check: _Checker, raw: Any, path: str) -> Group | None:
    data = check.obj(raw, path)
    if data is None:
        return None
    items = [_item(check, entry, f"{path}.items[{idx}]") for idx, entry in enumerate(check.array(data, "items", path))]
    return Group(
        id=check.uuid(data, "id", path),
        title=check.text(data, "title", path),
        sort_order=check.number(data, "sortOrder", path),
        is_visible=check.flag(data, "isVisible", path),
        items=[i for i in items if i is not None],
    )


def _mega_menu(check: _Checker, raw: Any, path: str) -> MegaMenu | None:
    data = check.obj(raw, path)
    if data is None:
        return None
    groups = [_group(check, entry, f"{path}.groups[{idx}]") for idx, entry in enumerate(check.array(data, "groups", path))]
    return MegaMenu(
        # Menu ids are free-form (e.g. "admin"), only non-empty.
        id=check.text(data, "id", path),
        label=check.text(data, "label", path),
        sort_order=check.number(data, "sortOrder", path),
        is_visible=check.flag(data, "isVisible", path),
        groups=[g for g in groups if g is not None],
    )


def validate_nav_config(raw: Any) -> NavConfig:
    """Validate a decoded JSON/YAML document and build a :class:`NavConfig`.

    Validation is all-or-nothing: every problem in the document is collected and
    reported together in one :class:`NavValidationError`. Keys the schema does not
    know are dropped.
    """
    check = _Checker()
    data = check.obj(raw, "config")
    if data is None:
        raise NavValidationError(check.issues)

    links = [
        _primary_link(check, entry, f"primaryLinks[{idx}]")
        for idx, entry in enumerate(check.array(data, "primaryLinks", ""))
    ]
    menus = [
        _mega_menu(check, entry, f"megaMenus[{idx}]")
        for idx, entry in enumerate(check.array(data, "megaMenus", ""))
    ]
    if check.issues:
        raise NavValidationError(check.issues)
    return NavConfig(
        primary_links=[link for link in links if link is not None],
        mega_menus=[menu for menu in menus if menu is not None],
    )


def safe_validate(raw: Any) -> tuple[NavConfig | None, NavValidationError | None]:
    try:
        return validate_nav_config(raw), None
    except NavValidationError as exc:
        return None, exc
