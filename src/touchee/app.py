"""Application entry point."""

import logging
import sys
from typing import List, Optional

from PyQt6.QtWidgets import QApplication, QMainWindow

from touchee.config import ToucheeConfig, get_touchee_config
from touchee.protocols import register_notifier
from touchee.views import ToastNotifier, ToucheeController

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_SIZE = (400, 640)  # phone-like portrait window


def setup_logging(config: ToucheeConfig) -> None:
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_main_window(config: Optional[ToucheeConfig] = None) -> QMainWindow:
    """Create the main window with a controller showing the start screen."""
    config = config or get_touchee_config()

    window = QMainWindow()
    window.setWindowTitle(config.window_title)
    window.resize(*DEFAULT_WINDOW_SIZE)

    notifier = ToastNotifier(window, duration_ms=config.notification_duration_ms)
    register_notifier(notifier)

    controller = ToucheeController(window, notifier=notifier, config=config)
    controller.navigate_to_start()
    # keep the controller alive as long as the window
    window.controller = controller
    return window


def main(argv: Optional[List[str]] = None) -> int:
    config = get_touchee_config()
    setup_logging(config)

    app = QApplication.instance() or QApplication(argv if argv is not None else sys.argv)
    window = create_main_window(config)
    window.show()
    logger.info("touchee started")
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
