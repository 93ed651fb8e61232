"""
Application Initialization
==========================
This module constructs the MVC (Model-View-Controller) pieces and starts the
Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Sets up logging before anything else logs.
2. Creates the Qt Application.
3. Instantiates the Main Window, which builds the GameController and hands it
   the canvas and panel as its sinks.
"""
from __future__ import annotations

import logging

import pyqtgraph as pg

from chaosgame import config
from chaosgame.application import create_app
from chaosgame.logging_config import setup_logging
from chaosgame.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def main() -> int:
    """Main entry point for the application."""
    # 1. Setup Logging (set CHAOSGAME_LOG_LEVEL=DEBUG to see every tick)
    setup_logging(level=config.LOG_LEVEL)

    pg.setConfigOption("background", "w")
    pg.setConfigOption("foreground", "k")
    pg.setConfigOptions(antialias=True)

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the Main Window
    window = MainWindow(n=config.DEFAULT_VERTICES)
    window.show()

    # 4. Start Event Loop
    logger.info("Entering event loop.")
    return app.exec()
