"""Console entry point: print the starting position and all its successors."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator

from chessai.config import DriverSettings
from chessai.core.position import Position

_LOGGER = logging.getLogger(__name__)


def format_successors(position: Position) -> Iterator[str]:
    """Rendered *position* followed by each of its successors."""
    yield position.render()
    count = 0
    for successor in position.possible_moves():
        count += 1
        yield successor.render()
    _LOGGER.debug("Generated %d successor positions", count)


def main(settings: DriverSettings | None = None) -> int:
    """Print every immediate successor of the starting position."""
    settings = settings if settings is not None else DriverSettings.from_env()
    logging.basicConfig(level=settings.numeric_log_level)

    position = Position.initial()
    for block in format_successors(position):
        print(block)
    _LOGGER.info("Starting position in check: %s", position.is_check)

    if settings.wait_for_input:
        try:
            input()
        except EOFError:
            _LOGGER.debug("stdin closed before newline")
    return 0


if __name__ == "__main__":
    sys.exit(main())
