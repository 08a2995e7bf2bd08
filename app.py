import os
import sys
import logging
from datetime import datetime
from uuid import uuid4

# --- Flask specific imports ---
from flask import Flask, request, g

# --- Import our configuration and the album components ---
from config import Config
from src.database.db_manager import initialize_database
from src.domain.albums import AlbumRepository
from src.errors import StorageError
from src.interfaces.http.error_handlers import register_error_handlers
from src.interfaces.http.routes import album_bp, health_bp
from src.interfaces.http.views import AlbumViews
from src.observability import configure_structured_logging, metrics_blueprint


logger = logging.getLogger(__name__)

ROOT_DIR = os.path.dirname(os.path.abspath(__file__))
TEMPLATE_DIR = os.path.join(ROOT_DIR, 'templates')
STATIC_DIR = os.path.join(ROOT_DIR, 'static')


def configure_logging(log_dir: str, enable_console: bool = False) -> str:
    """
    Configure root logging with:
      - FileHandler (INFO+) to a new file per run: log-YYYY-MM-DD-HH-MM-SS
      - StreamHandler (WARNING+) to console, only when enabled
      - Werkzeug/Flask loggers routed to root (no extra console spam)

    Returns the path to the created log file.
    """
    os.makedirs(log_dir, exist_ok=True)

    timestamp = datetime.now().strftime("%Y-%m-%d-%H-%M-%S")
    log_path = os.path.join(log_dir, f"log-{timestamp}")

    root = logging.getLogger()
    root.setLevel(logging.INFO)

    # Preserve structured handlers; remove existing FileHandlers to avoid duplicates
    root.handlers = [h for h in root.handlers if not isinstance(h, logging.FileHandler)]

    formatter = logging.Formatter(
        fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    file_handler = logging.FileHandler(log_path, encoding='utf-8')
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(formatter)
    root.addHandler(file_handler)

    if enable_console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    for name in ("werkzeug", "flask.app"):
        _l = logging.getLogger(name)
        _l.setLevel(logging.INFO)
        _l.handlers = []
        _l.propagate = True

    return log_path


def create_app(overrides=None):
    """
    Build the application: connect to the database (failing if it does not
    answer), load the templates, and wire the album gateway and views into
    `app.extensions` for the route handlers.
    """
    app = Flask(__name__, template_folder=TEMPLATE_DIR, static_folder=None)
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)
    configure_structured_logging(app)

    @app.before_request
    def _assign_request_id():
        g.request_id = request.headers.get('X-Request-ID') or uuid4().hex

    @app.after_request
    def _inject_request_id(response):
        if getattr(g, 'request_id', None):
            response.headers.setdefault('X-Request-ID', g.request_id)
        return response

    # Opens the connection and runs the reachability check
    initialize_database(app)

    views = AlbumViews(app.jinja_env, STATIC_DIR)
    app.extensions['album_repository'] = AlbumRepository()
    app.extensions['album_views'] = views

    register_error_handlers(app)

    # --- Register Blueprints ---
    app.register_blueprint(album_bp)
    app.register_blueprint(health_bp)
    app.register_blueprint(metrics_blueprint)

    # --- Anything unrouted is served from the static root ---
    @app.route('/', defaults={'path': ''})
    @app.route('/<path:path>')
    def serve_static(path):
        return views.static_file(path or 'index.html')

    return app


def main() -> int:
    debug_mode = bool(Config.DEBUG)
    # With the reloader, only the child process writes a log file
    if not debug_mode or os.environ.get('WERKZEUG_RUN_MAIN') == 'true':
        log_file_path = configure_logging(Config.LOG_DIR, Config.ENABLE_CONSOLE_LOGS)
        logger.info("File logging initialized at %s", log_file_path)

    missing = Config.missing_credentials()
    if missing:
        logger.critical("Missing database credentials: %s", ", ".join(missing))
        return 1

    try:
        app = create_app()
    except StorageError as e:
        logger.critical("Database unreachable: %s", e)
        return 1
    except Exception:
        logger.critical("Application failed to start", exc_info=True)
        return 1

    # Route app.logger through root handlers, keep levels consistent
    app.logger.handlers = []
    app.logger.setLevel(logging.INFO)
    app.logger.propagate = True
    logger.info("Connected! Listening on %s:%s", Config.HTTP_HOST, Config.HTTP_PORT)
    app.run(debug=debug_mode, host=Config.HTTP_HOST, port=Config.HTTP_PORT, threaded=True)
    return 0


if __name__ == '__main__':
    sys.exit(main())
