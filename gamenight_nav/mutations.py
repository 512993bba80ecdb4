from __future__ import annotations

import copy
import logging
from typing import Any, Callable

from .models import Group, Item, MegaMenu, NavConfig, PrimaryLink, new_id, normalize_sort_order
from .selection import GROUP, ITEM, MENU, PRIMARY, Selection, apply_values, resolve

logger = logging.getLogger(__name__)

Confirm = Callable[[str], bool]

CONFIRM_DELETE_MENU = "Delete this mega menu and all of its groups/items?"
CONFIRM_DELETE_GROUP = "Delete this group and all of its items?"


def clone_config(config: NavConfig) -> NavConfig:
    return copy.deepcopy(config)


def add_primary_link(config: NavConfig) -> tuple[NavConfig, str]:
    nxt = clone_config(config)
    link_id = new_id()
    nxt.primary_links.append(
        PrimaryLink(
            id=link_id,
            href="/new-link",
            label="New link",
            icon="✨",
            sort_order=len(nxt.primary_links) + 1,
            is_visible=True,
        )
    )
    normalize_sort_order(nxt.primary_links)
    return nxt, link_id


def add_mega_menu(config: NavConfig) -> tuple[NavConfig, str]:
    nxt = clone_config(config)
    menu_id = new_id()
    nxt.mega_menus.append(
        MegaMenu(id=menu_id, label="New menu", sort_order=len(nxt.mega_menus) + 1, is_visible=True, groups=[])
    )
    normalize_sort_order(nxt.mega_menus)
    return nxt, menu_id


def add_group(config: NavConfig, menu_id: str) -> tuple[NavConfig, str | None]:
    nxt = clone_config(config)
    menu = nxt.find_menu(menu_id)
    if menu is None:
        logger.debug("add_group: menu %s not found", menu_id)
        return config, None
    group_id = new_id()
    menu.groups.append(
        Group(id=group_id, title="New group", sort_order=len(menu.groups) + 1, is_visible=True, items=[])
    )
    normalize_sort_order(menu.groups)
    return nxt, group_id


def add_item(config: NavConfig, menu_id: str, group_id: str) -> tuple[NavConfig, str | None]:
    nxt = clone_config(config)
    group = nxt.find_group(menu_id, group_id)
    if group is None:
        logger.debug("add_item: group %s/%s not found", menu_id, group_id)
        return config, None
    item_id = new_id()
    group.items.append(
        Item(
            id=item_id,
            href="/admin/new-item",
            title="New item",
            description="Describe this destination.",
            icon="guide",
            tone="sage",
            sort_order=len(group.items) + 1,
            is_visible=True,
        )
    )
    normalize_sort_order(group.items)
    return nxt, item_id


def update_fields(config: NavConfig, selection: Selection | None, values: dict[str, Any]) -> NavConfig:
    """Merge form ``values`` into the selected node; unknown selections leave the tree as is."""
    nxt = clone_config(config)
    node = resolve(nxt, selection)
    if node is None:
        logger.debug("update_fields: stale selection %s", selection)
        return config
    apply_values(node, selection.kind, values)
    return nxt


def delete_node(
    config: NavConfig,
    selection: Selection | None,
    confirm: Confirm | None = None,
) -> tuple[NavConfig, bool]:
    """Remove the selected node and renormalize its siblings.

    Menus that still own groups and groups that still own items are only removed
    when ``confirm`` returns true for the prompt; without a ``confirm`` callable
    such deletes are declined. Returns the new tree and whether a node was removed.
    """
    node = resolve(config, selection)
    if node is None:
        return config, False

    if selection.kind == MENU and node.groups:
        if confirm is None or not confirm(CONFIRM_DELETE_MENU):
            return config, False
    if selection.kind == GROUP and node.items:
        if confirm is None or not confirm(CONFIRM_DELETE_GROUP):
            return config, False

    nxt = clone_config(config)
    if selection.kind == PRIMARY:
        nxt.primary_links = normalize_sort_order([link for link in nxt.primary_links if link.id != selection.id])
    elif selection.kind == MENU:
        nxt.mega_menus = normalize_sort_order([m for m in nxt.mega_menus if m.id != selection.id])
    elif selection.kind == GROUP:
        menu = nxt.find_menu(selection.menu_id or "")
        menu.groups = normalize_sort_order([g for g in menu.groups if g.id != selection.id])
    elif selection.kind == ITEM:
        group = nxt.find_group(selection.menu_id or "", selection.group_id or "")
        group.items = normalize_sort_order([i for i in group.items if i.id != selection.id])
    return nxt, True
