"""Allow running epomo as a module: python -m epomo."""

import logging
import os
import sys

from PyQt6.QtWidgets import QApplication

from .app import EpomoApp

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def log_level_from_env(default: int = logging.WARNING) -> int:
    """Read the log level name from ``EPOMO_LOG`` (e.g. ``debug``)."""
    name = os.environ.get("EPOMO_LOG", "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


def setup_logging(level: int | None = None) -> logging.Logger:
    """Configure logging for the application."""
    logging.basicConfig(
        level=log_level_from_env() if level is None else level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return logging.getLogger("epomo")


def main() -> None:
    logger = setup_logging()

    app = QApplication(sys.argv)
    app.setApplicationName("epomo")
    app.setOrganizationName("epomo")

    window = EpomoApp()
    window.show()
    logger.info("epomo ready")

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
