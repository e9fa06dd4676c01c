"""
Run with: python -m graphicalcalculator.app.main
"""
from __future__ import annotations

import logging
import sys

from graphicalcalculator.app.application import create_app
from graphicalcalculator.app.state import Store
from graphicalcalculator.app.ui.main_window import MainWindow
from graphicalcalculator.logging_config import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    """Main entry point for the application."""
    setup_logging()

    app = create_app()
    store = Store()
    win = MainWindow(store)
    win.show()
    logger.info("Started with %s", store.expression_text())
    return app.exec()

if __name__ == "__main__":
    sys.exit(main())
