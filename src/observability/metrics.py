from __future__ import annotations

from flask import Blueprint, Response
from prometheus_client import REGISTRY, Counter, generate_latest

metrics_blueprint = Blueprint("metrics_bp", __name__)

CONTENT_TYPE_LATEST = "text/plain; version=0.0.4; charset=utf-8"

ALBUM_OPERATIONS = Counter(
    "recordings_album_operations_total",
    "Album gateway calls by operation and outcome.",
    ["operation", "outcome"],
)


def record_album_operation(operation: str, outcome: str = "success") -> None:
    ALBUM_OPERATIONS.labels(operation=operation, outcome=outcome).inc()


def album_operation_count(operation: str, outcome: str = "success") -> float:
    value = REGISTRY.get_sample_value(
        "recordings_album_operations_total",
        {"operation": operation, "outcome": outcome},
    )
    return value or 0.0


@metrics_blueprint.route("/metrics")
def metrics_endpoint() -> Response:
    return Response(generate_latest(), mimetype=CONTENT_TYPE_LATEST)
