from __future__ import annotations

from flask import Blueprint, current_app, jsonify

from src.errors import StorageError

health_bp = Blueprint("health_bp", __name__)


@health_bp.route("/healthz")
def healthz():
    status = 200
    checks = {}

    try:
        current_app.extensions["album_repository"].ping()
        checks["database"] = "ok"
    except StorageError as exc:
        status = 503
        checks["database"] = f"error: {exc.message}"

    overall = "ok" if status == 200 else "degraded"
    return jsonify({"status": overall, "checks": checks}), status
