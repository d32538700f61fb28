from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from PyQt6.QtWidgets import QApplication

from modnote.di.container import Container
from modnote.services.config import build_app_config
from modnote.utils.constants import APP_NAME, APP_ORG
from modnote.utils.logging import setup_logging

LOGGER = logging.getLogger(__name__)


def run_app(argv: Sequence[str]) -> int:
    """
    Loads configuration, configures logging, bootstraps Qt, composes the
    application via the DI container and launches the main window.
    """
    config = build_app_config()
    log_path = setup_logging(config.log_level(), console=config.log_to_console())
    LOGGER.info("Starting %s (config=%s, log=%s)", APP_NAME, config.loaded_from, log_path)
    LOGGER.debug("Configuration: %s", dict(config.as_dict()))

    QApplication.setOrganizationName(APP_ORG)
    QApplication.setApplicationName(APP_NAME)
    app = QApplication(list(argv))

    container = Container.default(config=config)

    # Optional file path to open passed as first CLI argument
    start_path = Path(argv[1]) if len(argv) > 1 else None

    win = container.build_main_window(start_path=start_path, app_title=APP_NAME)
    win.show()

    code = app.exec()
    LOGGER.info("Exiting with code %s", code)
    return code
