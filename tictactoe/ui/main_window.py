from ..controller import GameController
from ..game_logic import CellValue
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

WINDOW_TITLE = "Tic-Tac-Toe"


def score_text(state):
    return f"O: {state.circle_wins}   X: {state.cross_wins}   Draws: {state.draws}"


class TicTacToeWindow(QMainWindow):
    """
    main window: board, status, score and play again
    """
    def __init__(self, controller=None):
        """
        init controller, ui widgets, signals
        """
        super().__init__()
        self.controller = controller if controller is not None else GameController(parent=self)
        self.board_widget = BoardWidget(parent=self)

        self._setup_ui()
        self.controller.state_changed.connect(self._on_state_changed)
        self._on_state_changed(self.controller.state)

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(WINDOW_TITLE)
        self.setStyleSheet("QMainWindow { background-color: #222; }")
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self.controller.tap_cell)

        self._create_bottom_controls()     # status + buttons
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        again_action = QAction("Play Again", self)
        again_action.triggered.connect(self.controller.play_again)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(again_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_bottom_controls(self):
        # status label + score + play again
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        self.score_label = QLabel("")
        self.play_again_button = QPushButton("Play Again")
        self.play_again_button.clicked.connect(self.controller.play_again)
        for w in (self.message_label, None, self.score_label, self.play_again_button):
            if w: hl.addWidget(w)
            else: hl.addStretch(1)

    @Slot(object)
    def _on_state_changed(self, state):
        # repaint board + text from the new snapshot
        self.board_widget.show_state(self.controller.board, state.victory_line)
        self.board_widget.set_accept_clicks(state.current_turn is not CellValue.EMPTY)
        style = "color: #eee;"
        if state.has_won:
            style = "color: lime; font-weight: bold;"
        elif state.current_turn is CellValue.CROSS:
            style = "color: #8acaff; font-weight: bold;"
        elif state.current_turn is CellValue.CIRCLE:
            style = "color: #ff8a8a; font-weight: bold;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(state.message)
        self.score_label.setText(score_text(state))

    def closeEvent(self, event):
        # stop signal delivery before widgets go away
        self.controller.detach()
        event.accept()
