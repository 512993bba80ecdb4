from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .models import Group, Item, MegaMenu, NavConfig, PrimaryLink

PRIMARY = "primary"
MENU = "menu"
GROUP = "group"
ITEM = "item"

# Form fields each node kind accepts, keyed by their wire names.
EDITABLE_FIELDS: dict[str, tuple[str, ...]] = {
    PRIMARY: ("label", "href", "icon", "isVisible"),
    MENU: ("label", "isVisible"),
    GROUP: ("title", "isVisible"),
    ITEM: ("title", "description", "href", "icon", "tone", "isVisible"),
}

_ATTRIBUTES = {
    "label": "label",
    "title": "title",
    "href": "href",
    "description": "description",
    "icon": "icon",
    "tone": "tone",
    "isVisible": "is_visible",
}


@dataclass(frozen=True)
class Selection:
    """Reference to one node of the tree, with the parent ids needed to reach it."""

    kind: str
    id: str
    menu_id: str | None = None
    group_id: str | None = None

    @classmethod
    def primary(cls, link_id: str) -> "Selection":
        return cls(PRIMARY, link_id)

    @classmethod
    def menu(cls, menu_id: str) -> "Selection":
        return cls(MENU, menu_id)

    @classmethod
    def group(cls, menu_id: str, group_id: str) -> "Selection":
        return cls(GROUP, group_id, menu_id=menu_id)

    @classmethod
    def item(cls, menu_id: str, group_id: str, item_id: str) -> "Selection":
        return cls(ITEM, item_id, menu_id=menu_id, group_id=group_id)


def resolve(config: NavConfig, selection: Selection | None) -> PrimaryLink | MegaMenu | Group | Item | None:
    """Return the node a selection points at, or ``None`` when it no longer exists."""
    if selection is None:
        return None
    if selection.kind == PRIMARY:
        return next((link for link in config.primary_links if link.id == selection.id), None)
    if selection.kind == MENU:
        return config.find_menu(selection.id)
    if selection.kind == GROUP:
        return config.find_group(selection.menu_id or "", selection.id)
    if selection.kind == ITEM:
        group = config.find_group(selection.menu_id or "", selection.group_id or "")
        if group is None:
            return None
        return next((item for item in group.items if item.id == selection.id), None)
    return None


def form_values(config: NavConfig, selection: Selection | None) -> dict[str, Any]:
    """Current field values of the selected node, empty when nothing resolves."""
    node = resolve(config, selection)
    if node is None:
        return {}
    return {name: getattr(node, _ATTRIBUTES[name]) for name in EDITABLE_FIELDS[selection.kind]}


def apply_values(node: Any, kind: str, values: dict[str, Any]) -> None:
    """Merge the accepted subset of ``values`` into ``node`` in place.

    Keys that are absent, ``None``, not editable for ``kind``, or of the wrong
    type (``isVisible`` takes a bool, every other field a string) are ignored.
    """
    for name in EDITABLE_FIELDS[kind]:
        value = values.get(name)
        if value is None:
            continue
        expected = bool if name == "isVisible" else str
        if not isinstance(value, expected):
            continue
        setattr(node, _ATTRIBUTES[name], value)
