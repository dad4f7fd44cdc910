"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys

from chessai.core.position import Position
from chessai.ui.position_view import PositionBrowser, ViewerSettings

_LOGGER = logging.getLogger(__name__)


def run_application(
    argv: list[str] | None = None, settings: ViewerSettings | None = None
) -> int:
    """Create and run the successor browser on the starting position."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication(sys.argv if argv is None else argv)
    app.setApplicationName("ChessAI")
    app.setStyle("Fusion")

    window = PositionBrowser(Position.initial(), settings)
    window.setWindowTitle("ChessAI")
    window.position_selected.connect(
        lambda pos: _LOGGER.debug("Selected successor, check=%s", pos.is_check)
    )
    window.show()

    return app.exec()


def main() -> None:
    sys.exit(run_application())
