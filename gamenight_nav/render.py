from __future__ import annotations

from typing import Any

from .models import NavConfig, sorted_by_order

ADMIN_MENU_ID = "admin"


def visible_navigation(config: NavConfig, *, show_admin_menu: bool = False) -> dict[str, Any]:
    """Project the config onto what the site header shows.

    Hidden nodes are dropped at every level and siblings are sorted by
    ``sortOrder``. The admin menu only appears when ``show_admin_menu`` is set.
    ``entries`` interleaves links and menus by their sort order, links first on ties.
    """
    links = [
        {"href": link.href, "label": link.label, "icon": link.icon, "sortOrder": link.sort_order}
        for link in sorted_by_order(config.primary_links)
        if link.is_visible
    ]
    menus = []
    for menu in sorted_by_order(config.mega_menus):
        if not menu.is_visible or (menu.id == ADMIN_MENU_ID and not show_admin_menu):
            continue
        groups = []
        for group in sorted_by_order(menu.groups):
            if not group.is_visible:
                continue
            groups.append({
                "title": group.title,
                "items": [
                    {
                        "href": item.href,
                        "title": item.title,
                        "description": item.description,
                        "icon": item.icon,
                        "tone": item.tone,
                    }
                    for item in sorted_by_order(group.items)
                    if item.is_visible
                ],
            })
        menus.append({"id": menu.id, "label": menu.label, "sortOrder": menu.sort_order, "groups": groups})

    entries = [{"type": "link", "sortOrder": link["sortOrder"], "link": link} for link in links]
    entries += [{"type": "menu", "sortOrder": menu["sortOrder"], "menu": menu} for menu in menus]
    entries.sort(key=lambda entry: entry["sortOrder"])
    return {"primaryLinks": links, "megaMenus": menus, "entries": entries}
