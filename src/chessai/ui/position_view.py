"""PositionBrowser — a position rendered as text plus its successor list."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QPlainTextEdit,
    QVBoxLayout,
    QWidget,
)

from chessai.core.position import Position
from chessai.core.types import BOARD_SIZE, Coordinate


@dataclass
class ViewerSettings:
    """User-configurable display settings."""

    font_family: str = "monospace"
    font_size: int = 13
    use_figurines: bool = False


def describe_move(before: Position, after: Position) -> str:
    """Label *after* by the piece that left *before*, e.g. ``N b0-c2``."""
    origin = next((coord for coord, _ in before if coord not in after), None)
    if origin is None:
        return "?"
    piece = before[origin]
    target = next(
        (coord for coord, moved in after if moved == piece and before[coord] != moved),
        None,
    )
    label = f"{piece.letter} {origin}"
    return f"{label}-{target}" if target is not None else label


def render_figurines(position: Position) -> str:
    """Like :meth:`Position.render` but with Unicode chess symbols."""
    lines: list[str] = []
    for row in range(BOARD_SIZE):
        cells = []
        for col in range(BOARD_SIZE):
            piece = position[Coordinate(row, col)]
            cells.append(f"{piece.symbol} " if piece else "  ")
        lines.append(f"{row} {''.join(cells)}")
    return "\n".join(lines) + "\n"


class PositionBrowser(QWidget):
    """Shows a position and lets the user step into any successor.

    Signals:
        position_selected(Position): Emitted when a successor is picked.
    """

    position_selected = pyqtSignal(object)

    def __init__(
        self,
        position: Position | None = None,
        settings: ViewerSettings | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._settings = settings if settings is not None else ViewerSettings()
        self._position = position if position is not None else Position.initial()
        self._successors: list[Position] = []
        self._setup_ui()
        self.set_position(self._position)

    def _setup_ui(self) -> None:
        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        left = QVBoxLayout()
        self._board_text = QPlainTextEdit()
        self._board_text.setReadOnly(True)
        left.addWidget(self._board_text)

        self._check_label = QLabel()
        self._check_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        left.addWidget(self._check_label)
        layout.addLayout(left, 2)

        self._list = QListWidget()
        self._list.setAlternatingRowColors(True)
        self._list.itemActivated.connect(self._on_item_activated)
        self._list.itemClicked.connect(self._on_item_activated)
        layout.addWidget(self._list, 1)

        self.apply_settings(self._settings)

    # -- Public API ---------------------------------------------------------

    @property
    def position(self) -> Position:
        return self._position

    @property
    def successors(self) -> list[Position]:
        return list(self._successors)

    def apply_settings(self, settings: ViewerSettings) -> None:
        self._settings = settings
        font = QFont(settings.font_family, settings.font_size)
        font.setStyleHint(QFont.StyleHint.Monospace)
        self._board_text.setFont(font)
        self._list.setFont(font)
        if self._successors or self._board_text.toPlainText():
            self._refresh_board()

    def set_position(self, position: Position) -> None:
        self._position = position
        self._successors = list(position.possible_moves())
        self._refresh_board()

        self._list.clear()
        for index, successor in enumerate(self._successors):
            item = QListWidgetItem(describe_move(position, successor))
            item.setData(Qt.ItemDataRole.UserRole, index)
            self._list.addItem(item)

    def select_successor(self, index: int) -> None:
        successor = self._successors[index]
        self.set_position(successor)
        self.position_selected.emit(successor)

    # -- Internals ----------------------------------------------------------

    def _refresh_board(self) -> None:
        if self._settings.use_figurines:
            text = render_figurines(self._position)
        else:
            text = self._position.render()
        self._board_text.setPlainText(text)
        self._check_label.setText("Check" if self._position.is_check else "")

    def _on_item_activated(self, item: QListWidgetItem) -> None:
        self.select_successor(item.data(Qt.ItemDataRole.UserRole))
