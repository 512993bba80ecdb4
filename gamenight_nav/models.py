from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from typing import Any, TypeVar
from uuid import uuid4


def new_id() -> str:
    """Return a fresh node id, falling back to a time+random string without an entropy source."""
    try:
        return str(uuid4())
    except NotImplementedError:
        return f"id-{int(time.time() * 1000):x}{random.getrandbits(32):08x}"


@dataclass
class PrimaryLink:
    id: str
    href: str
    label: str
    icon: str
    sort_order: float = 0
    is_visible: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "href": self.href,
            "label": self.label,
            "icon": self.icon,
            "sortOrder": self.sort_order,
            "isVisible": self.is_visible,
        }


@dataclass
class Item:
    id: str
    href: str
    title: str
    description: str
    icon: str
    tone: str
    sort_order: float = 0
    is_visible: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "href": self.href,
            "title": self.title,
            "description": self.description,
            "icon": self.icon,
            "tone": self.tone,
            "sortOrder": self.sort_order,
            "isVisible": self.is_visible,
        }


@dataclass
class Group:
    id: str
    title: str
    sort_order: float = 0
    is_visible: bool = True
    items: list[Item] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "sortOrder": self.sort_order,
            "isVisible": self.is_visible,
            "items": [i.to_dict() for i in self.items],
        }


@dataclass
class MegaMenu:
    id: str
    label: str
    sort_order: float = 0
    is_visible: bool = True
    groups: list[Group] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "label": self.label,
            "sortOrder": self.sort_order,
            "isVisible": self.is_visible,
            "groups": [g.to_dict() for g in self.groups],
        }


@dataclass
class NavConfig:
    """Root of one stored navigation document."""

    primary_links: list[PrimaryLink] = field(default_factory=list)
    mega_menus: list[MegaMenu] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "primaryLinks": [link.to_dict() for link in self.primary_links],
            "megaMenus": [menu.to_dict() for menu in self.mega_menus],
        }

    def find_menu(self, menu_id: str) -> MegaMenu | None:
        return next((m for m in self.mega_menus if m.id == menu_id), None)

    def find_group(self, menu_id: str, group_id: str) -> Group | None:
        menu = self.find_menu(menu_id)
        if menu is None:
            return None
        return next((g for g in menu.groups if g.id == group_id), None)


_T = TypeVar("_T")


def sorted_by_order(nodes: list[_T]) -> list[_T]:
    # sorted() is stable, so ties keep their list position.
    return sorted(nodes, key=lambda node: node.sort_order)


def normalize_sort_order(nodes: list[_T]) -> list[_T]:
    """Assign dense 1..N sort orders following the current list order."""
    for index, node in enumerate(nodes, start=1):
        node.sort_order = index
    return nodes


def move_in_list(nodes: list[_T], old_index: int, new_index: int) -> list[_T]:
    """Remove the element at ``old_index`` and reinsert it at ``new_index``."""
    moved = list(nodes)
    moved.insert(new_index, moved.pop(old_index))
    return moved
