"""Route blueprints exposed via Flask."""

from .albums import album_bp
from .health import health_bp

__all__ = [
    "album_bp",
    "health_bp",
]
