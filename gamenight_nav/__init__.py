"""Navigation builder for the game-night site: tree model, editor session and REST API."""

from .dragdrop import GroupDropZone, NodeRef, on_drop
from .editor import NavEditor, SaveResult
from .models import Group, Item, MegaMenu, NavConfig, PrimaryLink
from .schema import NavValidationError, validate_nav_config
from .selection import Selection

__all__ = [
    "Group",
    "GroupDropZone",
    "Item",
    "MegaMenu",
    "NavConfig",
    "NavEditor",
    "NavValidationError",
    "NodeRef",
    "PrimaryLink",
    "SaveResult",
    "Selection",
    "on_drop",
    "validate_nav_config",
]
