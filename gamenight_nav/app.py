# Run locally with: pip install -e . && flask --app gamenight_nav.app:create_app init-store && flask --app gamenight_nav.app:create_app run
from __future__ import annotations

import logging
from typing import Any

import click
from flask import Flask, current_app, jsonify, request

from .auth import StaticTokenVerifier, TokenVerifier, require_admin
from .defaults import DEFAULT_NAME, default_nav_config
from .models import NavConfig
from .render import visible_navigation
from .schema import NavValidationError, safe_validate, validate_nav_config
from .settings import Settings, load_settings
from .store import NavStore, StoreError, StoreNotInitialized, is_valid_name

MISSING_STORE_WARNING = "Navigation store is missing. Run `flask init-store` to persist changes."
MISSING_STORE_SAVE_ERROR = "Navigation store is missing. Run `flask init-store` before saving navigation changes."


def _json_error(message: str, status: int = 400, **extra: Any):
    payload: dict[str, Any] = {"error": message}
    payload.update(extra)
    return jsonify(payload), status


def _store() -> NavStore:
    return current_app.config["NAV_STORE"]


def _requested_name() -> str | None:
    name = request.args.get("name") or DEFAULT_NAME
    return name if is_valid_name(name) else None


def _stored_or_default(name: str) -> NavConfig:
    """Stored config for ``name``; the default on any read or validation problem."""
    try:
        raw = _store().get(name)
    except StoreError as exc:
        current_app.logger.warning("Serving default navigation for %r: %s", name, exc)
        return default_nav_config()
    if raw is None:
        return default_nav_config()
    config, error = safe_validate(raw)
    if error is not None:
        current_app.logger.warning("Stored navigation %r is invalid: %s", name, error)
        return default_nav_config()
    return config


def _authorize():
    verifier: TokenVerifier = current_app.config["TOKEN_VERIFIER"]
    result = require_admin(request.headers, verifier)
    if not result.ok:
        return _json_error(result.message, result.status)
    return None


def _configure_logging(level: str) -> None:
    logging.basicConfig(format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    logging.getLogger("gamenight_nav").setLevel(level)


def create_app(settings: Settings | None = None, *, token_verifier: TokenVerifier | None = None) -> Flask:
    settings = settings or load_settings()
    _configure_logging(settings.log_level)

    app = Flask(__name__)
    app.config["NAV_SETTINGS"] = settings
    app.config["NAV_STORE"] = NavStore(settings.store_dir, backup_keep=settings.backup_keep)
    app.config["TOKEN_VERIFIER"] = token_verifier or StaticTokenVerifier(settings.admin_tokens)

    @app.cli.command("init-store")
    def init_store() -> None:
        """Create the navigation store directory."""
        store = _store()
        store.init()
        click.echo(f"Navigation store ready at {store.root}")

    @app.route("/api/navigation", methods=["GET"])
    def get_navigation():
        name = _requested_name()
        if name is None:
            return _json_error("Invalid navigation name.", 400)
        return jsonify({"name": name, "config": _stored_or_default(name).to_dict()})

    @app.route("/api/navigation/menu", methods=["GET"])
    def get_navigation_menu():
        name = _requested_name()
        if name is None:
            return _json_error("Invalid navigation name.", 400)
        show_admin = request.args.get("admin") in ("1", "true", "yes")
        view = visible_navigation(_stored_or_default(name), show_admin_menu=show_admin)
        return jsonify({"name": name, **view})

    @app.route("/api/admin/navigation", methods=["GET"])
    def admin_get_navigation():
        denied = _authorize()
        if denied:
            return denied
        name = _requested_name()
        if name is None:
            return _json_error("Invalid navigation name.", 400)
        try:
            raw = _store().get(name)
        except StoreNotInitialized:
            return jsonify({"name": name, "config": default_nav_config().to_dict(), "warning": MISSING_STORE_WARNING})
        except StoreError as exc:
            app.logger.error("Failed to read navigation %r: %s", name, exc)
            return _json_error(str(exc), 500)

        config, error = safe_validate(raw) if raw is not None else (None, None)
        if error is not None:
            app.logger.warning("Stored navigation %r is invalid, serving default: %s", name, error)
        return jsonify({"name": name, "config": (config or default_nav_config()).to_dict()})

    @app.route("/api/admin/navigation", methods=["PUT"])
    def admin_save_navigation():
        denied = _authorize()
        if denied:
            return denied
        name = _requested_name()
        if name is None:
            return _json_error("Invalid navigation name.", 400)

        payload = request.get_json(silent=True)
        try:
            config = validate_nav_config(payload)
        except NavValidationError as exc:
            app.logger.info("Rejected navigation %r: %s", name, exc)
            return _json_error(f"Invalid navigation config: {exc}", 400, issues=exc.issues)

        try:
            stored = _store().upsert(name, config.to_dict())
        except StoreNotInitialized:
            return _json_error(MISSING_STORE_SAVE_ERROR, 400)
        except StoreError as exc:
            app.logger.error("Failed to save navigation %r: %s", name, exc)
            return _json_error(str(exc), 500)
        return jsonify(stored)

    @app.route("/health", methods=["GET"])
    def healthcheck():
        store = _store()
        return jsonify({
            "status": "ok",
            "store_dir": str(store.root),
            "exists": store.exists(),
        })

    return app


if __name__ == "__main__":
    create_app().run(debug=True)
