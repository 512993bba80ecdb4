"""Translate a finished drag gesture into a tree change.

A drag starts on a :class:`NodeRef` (a row in the editor) and ends either on
another row or on the empty area of a group (:class:`GroupDropZone`). Rows of
the same kind in the same sibling list are reordered; items may also move to
another group, where they are appended. Everything else is ignored.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from .models import NavConfig, move_in_list, normalize_sort_order, sorted_by_order
from .mutations import clone_config
from .selection import GROUP, ITEM, MENU, PRIMARY

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NodeRef:
    kind: str  # "primary" | "menu" | "group" | "item"
    id: str
    menu_id: str | None = None
    group_id: str | None = None


@dataclass(frozen=True)
class GroupDropZone:
    menu_id: str
    group_id: str


DropTarget = Union[NodeRef, GroupDropZone]


def _reorder(nodes: list, active_id: str, over_id: str) -> list | None:
    current = sorted_by_order(nodes)
    ids = [node.id for node in current]
    if active_id not in ids or over_id not in ids:
        return None
    return normalize_sort_order(move_in_list(current, ids.index(active_id), ids.index(over_id)))


def _reorder_top_level(config: NavConfig, dragged: NodeRef, over: NodeRef) -> NavConfig:
    nxt = clone_config(config)
    attr = "primary_links" if dragged.kind == PRIMARY else "mega_menus"
    reordered = _reorder(getattr(nxt, attr), dragged.id, over.id)
    if reordered is None:
        return config
    setattr(nxt, attr, reordered)
    return nxt


def _reorder_groups(config: NavConfig, dragged: NodeRef, over: NodeRef) -> NavConfig:
    if dragged.menu_id != over.menu_id:
        logger.debug("Rejected moving group %s across menus", dragged.id)
        return config
    nxt = clone_config(config)
    menu = nxt.find_menu(dragged.menu_id or "")
    if menu is None:
        return config
    reordered = _reorder(menu.groups, dragged.id, over.id)
    if reordered is None:
        return config
    menu.groups = reordered
    return nxt


def _move_item(config: NavConfig, dragged: NodeRef, target: DropTarget) -> NavConfig:
    nxt = clone_config(config)
    source = nxt.find_group(dragged.menu_id or "", dragged.group_id or "")
    if source is None or not any(i.id == dragged.id for i in source.items):
        return config

    same_group = target.menu_id == dragged.menu_id and target.group_id == dragged.group_id
    if isinstance(target, NodeRef) and same_group:
        reordered = _reorder(source.items, dragged.id, target.id)
        if reordered is None:
            return config
        source.items = reordered
        return nxt

    # Resolve the destination before detaching so a missing group loses nothing.
    destination = nxt.find_group(target.menu_id or "", target.group_id or "")
    if destination is None:
        return config
    if isinstance(target, NodeRef) and not any(i.id == target.id for i in destination.items):
        return config

    current = sorted_by_order(source.items)
    item = next(i for i in current if i.id == dragged.id)
    source.items = normalize_sort_order([i for i in current if i.id != dragged.id])
    destination.items = normalize_sort_order(sorted_by_order(destination.items) + [item])
    return nxt


def on_drop(config: NavConfig, dragged: NodeRef, target: DropTarget | None) -> NavConfig:
    """Apply a drop of ``dragged`` onto ``target`` and return the resulting tree.

    Unsupported combinations (mismatched kinds, groups across menus, stale ids,
    no target at all) return ``config`` unchanged.
    """
    if target is None:
        return config

    if isinstance(target, GroupDropZone):
        if dragged.kind == ITEM:
            return _move_item(config, dragged, target)
        return config

    if dragged.kind != target.kind:
        return config
    if dragged.kind in (PRIMARY, MENU):
        return _reorder_top_level(config, dragged, target)
    if dragged.kind == GROUP:
        return _reorder_groups(config, dragged, target)
    if dragged.kind == ITEM:
        return _move_item(config, dragged, target)
    return config
