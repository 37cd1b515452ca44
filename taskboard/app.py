import logging
import os
from pathlib import Path
from typing import Any, Mapping, Optional

from flask import Flask, jsonify, request, send_from_directory
from flask_cors import CORS
from werkzeug.security import safe_join

from taskboard.errors import StorageError, TaskboardError

logger = logging.getLogger(__name__)


def create_app(config_overrides: Optional[Mapping[str, Any]] = None):
    # Static files are routed by hand below so their folder can come from config
    app = Flask(__name__, static_folder=None)
    app.config.from_object("taskboard.config.Config")
    if config_overrides:
        app.config.update(config_overrides)
    # Responses keep the field order of to_dict()
    app.json.sort_keys = False

    static_dir = Path(app.config["STATIC_DIR"]).resolve()

    # Core extensions
    CORS(
        app,
        resources={r"/*": {"origins": "*"}},
        methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    # Shared database handle and the components built on it
    from taskboard.services import register_task_service
    from taskboard.services.task_service import TaskService
    from taskboard.stores.history_log import HistoryLog
    from taskboard.stores.task_store import TaskStore
    from taskboard.utils.db import init_app as init_db

    database = init_db(app)
    task_store = TaskStore(database)
    register_task_service(
        app,
        TaskService(task_store, HistoryLog(database), history_limit=int(app.config["HISTORY_LIMIT"])),
    )

    # Register blueprints
    from taskboard.routes.history_routes import history_bp
    from taskboard.routes.task_routes import tasks_bp

    app.register_blueprint(tasks_bp, url_prefix="/api/tasks")
    app.register_blueprint(history_bp, url_prefix="/api/history")

    @app.get("/api/health")
    def health():
        return jsonify(status="ok", service="Taskboard API"), 200

    # Serve the front-end bundle; unknown non-API GETs fall back to index.html
    @app.get("/static/<path:filename>")
    def static_files(filename):
        return send_from_directory(static_dir, filename)

    def _spa_fallback():
        path = request.path.lstrip("/")
        if request.method != "GET" or path.split("/", 1)[0] in ("api", "static"):
            return None
        candidate = safe_join(str(static_dir), path) if path else None
        if candidate and os.path.isfile(candidate):
            return send_from_directory(static_dir, path)
        if (static_dir / "index.html").is_file():
            return send_from_directory(static_dir, "index.html")
        return None

    @app.errorhandler(TaskboardError)
    def taskboard_error(exc):
        if isinstance(exc, StorageError):
            logger.exception("Storage failure: %s", exc.message)
        return jsonify(error=exc.message), exc.status_code

    @app.errorhandler(404)
    def not_found(_):
        fallback = _spa_fallback()
        if fallback is not None:
            return fallback
        return jsonify(error="Not Found"), 404

    @app.errorhandler(405)
    def method_not_allowed(_):
        return jsonify(error="Method Not Allowed"), 405

    @app.errorhandler(500)
    def server_error(_):
        return jsonify(error="Internal Server Error"), 500

    logger.info("Taskboard ready tasks=%d static_dir=%s", task_store.count_tasks(), static_dir)
    return app
