import logging

from ..config import (
    WINDOW_TITLE, WINDOW_WIDTH, WINDOW_HEIGHT, OUTER_SPACING,
    HEADING_TEXT, TURN_TEXT, WIN_TEXT, DRAW_TEXT, PLAY_AGAIN_TEXT,
)
from ..game_logic import GameState, Status
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QPushButton, QLabel, QMenuBar, QMenu,
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

logger = logging.getLogger(__name__)


class TicTacToeWindow(QMainWindow):
    """
    main window UI and game flow
    """
    def __init__(self, game_state=None):
        """
        init state, ui widgets, signals
        """
        super().__init__()
        self.game_state = game_state if game_state is not None else GameState()
        self.board_widget = BoardWidget(self.game_state, parent=self)

        self._setup_ui()
        self._refresh()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(WINDOW_TITLE)
        self.setFixedSize(WINDOW_WIDTH, WINDOW_HEIGHT)  # not resizable
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
            QPushButton { padding: 6px 14px; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)
        self.main_layout.setAlignment(Qt.AlignHCenter | Qt.AlignTop)

        self._create_menu_bar()            # top menu
        self.main_layout.addSpacing(OUTER_SPACING)
        self.heading_label = QLabel(HEADING_TEXT)
        f = QFont(); f.setPointSize(16); f.setBold(True); self.heading_label.setFont(f)
        self.heading_label.setAlignment(Qt.AlignCenter)
        self.main_layout.addWidget(self.heading_label)
        self.main_layout.addSpacing(OUTER_SPACING)

        self.main_layout.addWidget(self.board_widget, 0, Qt.AlignHCenter)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)
        self.main_layout.addSpacing(OUTER_SPACING)

        self._create_bottom_controls()     # status + play again

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self.reset_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(new_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_bottom_controls(self):
        # status label + play again button
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignCenter)
        self.message_label.setWordWrap(True)
        self.play_again_button = QPushButton(PLAY_AGAIN_TEXT)
        self.play_again_button.clicked.connect(self.reset_game)
        self.main_layout.addWidget(self.message_label)
        self.main_layout.addWidget(self.play_again_button, 0, Qt.AlignHCenter)

    def _update_message(self, text, is_success=False, is_turn=False):
        # set message text + style
        style = "color: #eee;"
        if is_success: style = "color: lime; font-weight: bold;"
        elif is_turn:  style = "color: #8acaff; font-weight: bold;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    def _refresh(self):
        # re-read everything from the game state
        status = self.game_state.status
        if status is Status.DRAW:
            self._update_message(DRAW_TEXT, is_success=True)
        elif status.winner is not None:
            self._update_message(WIN_TEXT.format(player=status.winner.value), is_success=True)
        else:
            self._update_message(
                TURN_TEXT.format(player=self.game_state.current_player.value), is_turn=True
            )
        # only offer a restart once the game has ended
        self.play_again_button.setVisible(status.is_terminal)
        self.board_widget.update()

    @Slot(int)
    def _on_cell_clicked(self, index):
        # rules live in the game state, just forward the click
        result = self.game_state.attempt_move(index)
        logger.debug("click on cell %d -> %s", index, result.value)
        self._refresh()

    @Slot()
    def reset_game(self):
        # back to fresh state
        self.game_state.reset()
        self._refresh()
