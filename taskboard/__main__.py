import logging

from taskboard.app import create_app
from taskboard.config import Config
from taskboard.logging_setup import setup_logging

logger = logging.getLogger("taskboard")


def main() -> None:
    setup_logging(log_dir=Config.LOG_DIR, console_level=Config.LOG_LEVEL)
    app = create_app()
    host = app.config["HOST"]
    port = int(app.config["PORT"])
    logger.info("Server running on port %s", port)
    app.run(host=host, port=port, debug=app.config["DEBUG"])


if __name__ == "__main__":
    main()
