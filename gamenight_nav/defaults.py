from __future__ import annotations

from typing import Any

from .models import NavConfig
from .schema import validate_nav_config

DEFAULT_NAME = "main"

# Served whenever the stored document is missing or does not validate.
_DEFAULT_NAV: dict[str, Any] = {
    "primaryLinks": [
        {
            "id": "0b6f8a64-6f0e-4d8c-9d55-1f0c2a7e4b01",
            "href": "/",
            "label": "Pick a game",
            "icon": "🎲",
            "sortOrder": 1,
            "isVisible": True,
        },
        {
            "id": "0b6f8a64-6f0e-4d8c-9d55-1f0c2a7e4b02",
            "href": "/history",
            "label": "History",
            "icon": "📜",
            "sortOrder": 2,
            "isVisible": True,
        },
    ],
    "megaMenus": [
        {
            "id": "play",
            "label": "Play",
            "sortOrder": 1,
            "isVisible": True,
            "groups": [
                {
                    "id": "5a1c3e1e-2b7d-4f4b-8c1e-7d2f6a9b0c01",
                    "title": "Game night",
                    "sortOrder": 1,
                    "isVisible": True,
                    "items": [
                        {
                            "id": "9e3d7c2a-41b6-4a8e-b0f1-3c5d7e9a1b01",
                            "href": "/bracket",
                            "title": "Bracket",
                            "description": "Follow the active tournament bracket.",
                            "icon": "bracket",
                            "tone": "sage",
                            "sortOrder": 1,
                            "isVisible": True,
                        },
                        {
                            "id": "9e3d7c2a-41b6-4a8e-b0f1-3c5d7e9a1b02",
                            "href": "/rules",
                            "title": "House rules",
                            "description": "Rules and variants we play with.",
                            "icon": "scroll",
                            "tone": "wheat",
                            "sortOrder": 2,
                            "isVisible": True,
                        },
                    ],
                },
                {
                    "id": "5a1c3e1e-2b7d-4f4b-8c1e-7d2f6a9b0c02",
                    "title": "People",
                    "sortOrder": 2,
                    "isVisible": True,
                    "items": [
                        {
                            "id": "9e3d7c2a-41b6-4a8e-b0f1-3c5d7e9a1b03",
                            "href": "/players",
                            "title": "Players",
                            "description": "Profiles, cards and season wins.",
                            "icon": "users",
                            "tone": "sky",
                            "sortOrder": 1,
                            "isVisible": True,
                        },
                        {
                            "id": "9e3d7c2a-41b6-4a8e-b0f1-3c5d7e9a1b04",
                            "href": "/game-data",
                            "title": "Win stats",
                            "description": "Who wins what, and how often.",
                            "icon": "trophy",
                            "tone": "peach",
                            "sortOrder": 2,
                            "isVisible": True,
                        },
                    ],
                },
            ],
        },
        {
            "id": "admin",
            "label": "Admin",
            "sortOrder": 2,
            "isVisible": True,
            "groups": [
                {
                    "id": "5a1c3e1e-2b7d-4f4b-8c1e-7d2f6a9b0c03",
                    "title": "Library",
                    "sortOrder": 1,
                    "isVisible": True,
                    "items": [
                        {
                            "id": "9e3d7c2a-41b6-4a8e-b0f1-3c5d7e9a1b05",
                            "href": "/admin/games",
                            "title": "Games",
                            "description": "Add and edit the game library.",
                            "icon": "controller",
                            "tone": "mint",
                            "sortOrder": 1,
                            "isVisible": True,
                        },
                        {
                            "id": "9e3d7c2a-41b6-4a8e-b0f1-3c5d7e9a1b06",
                            "href": "/admin/tags",
                            "title": "Tags",
                            "description": "Organize games with tags.",
                            "icon": "tags",
                            "tone": "moss",
                            "sortOrder": 2,
                            "isVisible": True,
                        },
                        {
                            "id": "9e3d7c2a-41b6-4a8e-b0f1-3c5d7e9a1b07",
                            "href": "/admin/navigation",
                            "title": "Navigation",
                            "description": "Arrange menus and links.",
                            "icon": "guide",
                            "tone": "sage",
                            "sortOrder": 3,
                            "isVisible": True,
                        },
                    ],
                },
            ],
        },
    ],
}


def default_nav_config() -> NavConfig:
    """Return a fresh copy of the built-in navigation."""
    return validate_nav_config(_DEFAULT_NAV)
