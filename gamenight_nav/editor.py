"""Editing session for one named navigation document.

The session holds two trees: the working tree every edit applies to, and the
snapshot last loaded from or saved to the API. The document is dirty whenever
the two differ. Only :meth:`NavEditor.load` and :meth:`NavEditor.save` touch
the network; every other operation is a synchronous tree rewrite.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from . import mutations
from .client import NavigationClient, NavigationClientError
from .defaults import DEFAULT_NAME, default_nav_config
from .dragdrop import DropTarget, NodeRef, on_drop
from .models import NavConfig
from .mutations import Confirm, clone_config
from .schema import NavValidationError, validate_nav_config
from .selection import Selection, form_values, resolve

logger = logging.getLogger(__name__)

LOAD_FALLBACK_WARNING = "Failed to load navigation configuration. Showing the default navigation."


@dataclass
class SaveResult:
    ok: bool
    message: str = ""


class NavEditor:
    def __init__(
        self,
        client: NavigationClient,
        *,
        name: str = DEFAULT_NAME,
        confirm: Confirm | None = None,
    ) -> None:
        self.client = client
        self.name = name
        self.confirm = confirm
        self.config: NavConfig = default_nav_config()
        self.saved: NavConfig = default_nav_config()
        self.selection: Selection | None = None
        self.status = ""
        self.toast = ""
        self.saving = False

    @property
    def is_dirty(self) -> bool:
        return self.config != self.saved

    @property
    def can_save(self) -> bool:
        return self.is_dirty and not self.saving

    @property
    def can_reset(self) -> bool:
        return self.is_dirty

    @property
    def form(self) -> dict[str, Any]:
        return form_values(self.config, self.selection)

    def _adopt(self, config: NavConfig) -> None:
        self.config = config
        self.saved = clone_config(config)
        self.selection = None

    def load(self) -> str:
        """Fetch the document; fall back to the default navigation on any failure.

        Returns the (possibly empty) advisory status message.
        """
        self.status = "Loading navigation..."
        try:
            payload = self.client.load(self.name)
            config = validate_nav_config(payload.get("config"))
        except NavigationClientError as exc:
            logger.warning("Loading navigation %r failed: %s", self.name, exc)
            self._adopt(default_nav_config())
            self.status = str(exc) or LOAD_FALLBACK_WARNING
            return self.status
        except NavValidationError as exc:
            logger.warning("Navigation %r did not validate: %s", self.name, exc)
            self._adopt(default_nav_config())
            self.status = LOAD_FALLBACK_WARNING
            return self.status

        self._adopt(config)
        warning = payload.get("warning")
        self.status = warning if isinstance(warning, str) else ""
        return self.status

    def save(self) -> SaveResult:
        """Send the whole working tree; on failure nothing local changes but ``status``."""
        if self.saving:
            return SaveResult(False, "A save is already in progress.")
        self.saving = True
        self.status = "Saving..."
        snapshot = clone_config(self.config)
        try:
            self.client.save(self.name, snapshot.to_dict())
        except NavigationClientError as exc:
            logger.warning("Saving navigation %r failed: %s", self.name, exc)
            self.status = str(exc) or "Failed to save navigation."
            return SaveResult(False, self.status)
        finally:
            self.saving = False

        self.saved = snapshot
        self.status = ""
        self.toast = "Navigation saved."
        logger.info("Saved navigation %r", self.name)
        return SaveResult(True, self.toast)

    def reset(self) -> None:
        self.config = clone_config(self.saved)
        self.selection = None
        self.toast = "Reverted changes."

    def select(self, selection: Selection | None) -> dict[str, Any]:
        self.selection = selection
        return self.form

    def deselect(self) -> None:
        self.selection = None

    def submit(self, values: dict[str, Any]) -> None:
        if self.selection is None:
            return
        updated = mutations.update_fields(self.config, self.selection, values)
        if updated is self.config:
            return
        self.config = updated
        self.toast = "Updated selection."

    def add_primary_link(self) -> str:
        self.config, link_id = mutations.add_primary_link(self.config)
        self.selection = Selection.primary(link_id)
        return link_id

    def add_mega_menu(self) -> str:
        self.config, menu_id = mutations.add_mega_menu(self.config)
        self.selection = Selection.menu(menu_id)
        return menu_id

    def add_group(self, menu_id: str) -> str | None:
        self.config, group_id = mutations.add_group(self.config, menu_id)
        if group_id is not None:
            self.selection = Selection.group(menu_id, group_id)
        return group_id

    def add_item(self, menu_id: str, group_id: str) -> str | None:
        self.config, item_id = mutations.add_item(self.config, menu_id, group_id)
        if item_id is not None:
            self.selection = Selection.item(menu_id, group_id, item_id)
        return item_id

    def delete(self, selection: Selection | None = None) -> bool:
        target = selection or self.selection
        self.config, removed = mutations.delete_node(self.config, target, self.confirm)
        if removed and resolve(self.config, self.selection) is None:
            self.selection = None
        return removed

    def drop(self, dragged: NodeRef, target: DropTarget | None) -> None:
        self.config = on_drop(self.config, dragged, target)
