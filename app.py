import os

from taskboard.app import create_app
from taskboard.logging_setup import setup_logging


setup_logging(log_dir=os.environ.get("LOG_DIR") or None, console_level=os.environ.get("LOG_LEVEL", "INFO"))

# Expose a module-level `app` for WSGI servers (gunicorn expects `app:app`).
app = create_app()


if __name__ == "__main__":
    # Local development only: run the built-in server.
    app.run(host=app.config["HOST"], port=int(app.config["PORT"]), debug=app.config["DEBUG"])
