from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QRectF
from PySide6.QtGui import QPainter, QColor, QPen, QFont

from ..config import (
    CELL_SIZE, CELL_SPACING, BOARD_BG_COLOR, CELL_COLOR,
    X_COLOR, O_COLOR, HIGHLIGHT_COLOR,
)
from ..game_logic import Player

BOARD_SIDE = 3 * CELL_SIZE + 2 * CELL_SPACING


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int)  # emits cell index 0-8 on click

    def __init__(self, game_state, parent=None):
        super().__init__(parent)
        self.game_state = game_state  # reference, owned by the window
        self.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Fixed)
        self.setFixedSize(QSize(BOARD_SIDE, BOARD_SIDE))

    def sizeHint(self):
        return QSize(BOARD_SIDE, BOARD_SIDE)

    def cell_rect(self, index):
        """
        rect of one cell in widget coords
        """
        row, col = divmod(index, 3)
        step = CELL_SIZE + CELL_SPACING
        return QRectF(col*step, row*step, CELL_SIZE, CELL_SIZE)

    def cell_at(self, x, y):
        """
        map a point to a cell index, None for gaps and outside
        """
        step = CELL_SIZE + CELL_SPACING
        if x < 0 or y < 0:
            return None
        col, cx = divmod(int(x), step)
        row, cy = divmod(int(y), step)
        if row > 2 or col > 2 or cx >= CELL_SIZE or cy >= CELL_SIZE:
            return None
        return row*3 + col

    def paintEvent(self, event):
        """
        draw cells, X/O marks, and highlight winning line
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            painter.fillRect(self.rect(), QColor(BOARD_BG_COLOR))
            line = self.game_state.winning_line() or ()
            font = QFont("Arial", int(CELL_SIZE*0.45), QFont.Bold)
            painter.setFont(font)
            for i, sym in enumerate(self.game_state.board):
                rect = self.cell_rect(i)
                bg = HIGHLIGHT_COLOR if i in line else CELL_COLOR
                painter.setPen(Qt.NoPen)
                painter.setBrush(QColor(bg))
                painter.drawRoundedRect(rect, 6, 6)
                if sym is None: continue
                color = QColor(X_COLOR) if sym is Player.X else QColor(O_COLOR)
                painter.setPen(QPen(color, 4))
                painter.drawText(rect, Qt.AlignCenter, sym.value)
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if event.button() != Qt.LeftButton:
            return
        pos = event.position()
        index = self.cell_at(pos.x(), pos.y())
        if index is not None:
            self.cell_clicked.emit(index)  # notify main window
