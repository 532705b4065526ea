from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

from ..game_logic import CellValue, VictoryLine

BOARD_SIZE = 3                          # fixed 3x3 grid

BACKGROUND_COLOR = "#333"
GRID_COLOR = "#555"
CROSS_COLOR = "#8acaff"
CIRCLE_COLOR = "#ff8a8a"
HIGHLIGHT_COLOR = "#4a6a3a"


def board_square(width, height):
    """
    (offset_x, offset_y, side) of the centered square board
    """
    side = min(width, height)
    return (width - side) / 2, (height - side) / 2, side


def cell_at(x, y, width, height):
    """
    map widget coords to a cell position 1..9, None if outside the grid
    """
    ox, oy, side = board_square(width, height)
    if side <= 0:
        return None
    if not (ox <= x < ox + side and oy <= y < oy + side):
        return None
    cell = side / BOARD_SIZE
    col = int((x - ox) // cell); row = int((y - oy) // cell)
    # clamp against float edge cases
    row = max(0, min(row, BOARD_SIZE - 1)); col = max(0, min(col, BOARD_SIZE - 1))
    return row * BOARD_SIZE + col + 1


def cell_origin(position):
    """
    (row, col) of a 1..9 position
    """
    return divmod(position - 1, BOARD_SIZE)


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int)  # emits position 1..9 on click

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self._board = {}                        # position -> CellValue
        self._victory_line = VictoryLine.NONE
        self._accept_clicks = True              # toggle click handling

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def show_state(self, board, victory_line):
        """
        take a new board snapshot and repaint
        """
        self._board = dict(board)
        self._victory_line = victory_line
        self.update()

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def paintEvent(self, event):
        """
        draw grid, O/X marks, and highlight the winning line
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            offset_x, offset_y, side = board_square(self.width(), self.height())
            painter.fillRect(self.rect(), QColor(BACKGROUND_COLOR))
            cell_size = side / BOARD_SIZE
            # winning cells behind everything else
            for pos in self._victory_line.positions:
                r, c = cell_origin(pos)
                painter.fillRect(
                    QRectF(offset_x + c*cell_size, offset_y + r*cell_size, cell_size, cell_size),
                    QColor(HIGHLIGHT_COLOR),
                )
            # grid lines
            painter.setPen(QPen(QColor(GRID_COLOR), 2))
            for i in range(1, BOARD_SIZE):
                x = offset_x + i*cell_size
                painter.drawLine(int(x), int(offset_y), int(x), int(offset_y+side))
                y = offset_y + i*cell_size
                painter.drawLine(int(offset_x), int(y), int(offset_x+side), int(y))
            # draw marks
            for pos, value in self._board.items():
                if value is CellValue.EMPTY:
                    continue
                r, c = cell_origin(pos)
                cx = offset_x + c*cell_size + cell_size/2
                cy = offset_y + r*cell_size + cell_size/2
                rad = cell_size/2 * 0.7
                if value is CellValue.CROSS:
                    painter.setPen(QPen(QColor(CROSS_COLOR), 4))
                    # two crossing lines
                    painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                    painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
                else:
                    painter.setPen(QPen(QColor(CIRCLE_COLOR), 4))
                    painter.drawEllipse(QPointF(cx, cy), rad, rad)
            # strike through the winning triple
            line = self._victory_line.positions
            if line:
                (r1, c1), (r2, c2) = cell_origin(line[0]), cell_origin(line[-1])
                painter.setPen(QPen(QColor("white"), 6, Qt.SolidLine, Qt.RoundCap))
                painter.drawLine(
                    QPointF(offset_x + (c1 + 0.5)*cell_size, offset_y + (r1 + 0.5)*cell_size),
                    QPointF(offset_x + (c2 + 0.5)*cell_size, offset_y + (r2 + 0.5)*cell_size),
                )
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if not self._accept_clicks:
            return
        pos = cell_at(event.position().x(), event.position().y(),
                      self.width(), self.height())
        if pos is not None:
            self.cell_clicked.emit(pos)  # notify controller
