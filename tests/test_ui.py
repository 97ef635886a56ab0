import pytest

from PySide6.QtCore import QPoint, Qt
from PySide6.QtTest import QTest

from velha.config import (
    CELL_SIZE, CELL_SPACING, WINDOW_TITLE, WINDOW_WIDTH, WINDOW_HEIGHT, DRAW_TEXT,
)
from velha.game_logic import GameState, Player, Status
from velha.ui.board_widget import BoardWidget
from velha.ui.main_window import TicTacToeWindow

STEP = CELL_SIZE + CELL_SPACING


@pytest.fixture
def window(qapp):
    win = TicTacToeWindow()
    yield win
    win.close()
    win.deleteLater()


def click(win, *cells):
    for cell in cells:
        win._on_cell_clicked(cell)


def test_window_setup(window):
    assert window.windowTitle() == WINDOW_TITLE
    assert window.width() == WINDOW_WIDTH
    assert window.height() == WINDOW_HEIGHT
    assert window.minimumSize() == window.maximumSize()


def test_initial_banner(window):
    assert window.message_label.text() == "Player X's turn"
    assert window.play_again_button.isHidden()


def test_turn_banner_follows_moves(window):
    click(window, 4)
    assert window.game_state.board[4] is Player.X
    assert window.message_label.text() == "Player O's turn"


def test_win_shows_play_again(window):
    click(window, 0, 3, 1, 4, 2)
    assert window.game_state.status is Status.X_WON
    assert "Player X wins!" in window.message_label.text()
    assert not window.play_again_button.isHidden()


def test_draw_banner(window):
    click(window, 0, 1, 2, 4, 3, 5, 7, 6, 8)
    assert window.message_label.text() == DRAW_TEXT
    assert not window.play_again_button.isHidden()


def test_play_again_resets_same_state(window):
    state = window.game_state
    click(window, 0, 3, 1, 4, 2)
    window.play_again_button.click()
    assert window.game_state is state
    assert state.status is Status.IN_PROGRESS
    assert list(state.board) == [None] * 9
    assert window.message_label.text() == "Player X's turn"
    assert window.play_again_button.isHidden()


def test_clicks_ignored_after_game_over(window):
    click(window, 0, 3, 1, 4, 2)
    click(window, 8)
    assert window.game_state.board[8] is None


def test_window_uses_given_state(qapp):
    state = GameState()
    state.attempt_move(4)
    win = TicTacToeWindow(state)
    assert win.game_state is state
    assert win.board_widget.game_state is state
    assert win.message_label.text() == "Player O's turn"
    win.deleteLater()


def test_cell_at_maps_points(qapp):
    widget = BoardWidget(GameState())
    assert widget.cell_at(0, 0) == 0
    assert widget.cell_at(STEP, 0) == 1
    assert widget.cell_at(0, STEP) == 3
    assert widget.cell_at(2*STEP + CELL_SIZE - 1, 2*STEP + CELL_SIZE - 1) == 8
    # gaps and outside
    assert widget.cell_at(CELL_SIZE + 1, 0) is None
    assert widget.cell_at(-1, 10) is None
    assert widget.cell_at(3*STEP, 0) is None
    widget.deleteLater()


def test_mouse_click_places_mark(window):
    window.show()
    board = window.board_widget
    centre = QPoint(STEP + CELL_SIZE // 2, STEP + CELL_SIZE // 2)
    QTest.mouseClick(board, Qt.LeftButton, Qt.NoModifier, centre)
    assert window.game_state.board[4] is Player.X
    assert window.game_state.current_player is Player.O
