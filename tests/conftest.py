"""
Shared test fixtures.

Qt runs on the offscreen platform so the UI tests need no display.
"""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from velha.game_logic import GameState


@pytest.fixture(scope="session")
def qapp():
    """One QApplication for the whole session."""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def game() -> GameState:
    return GameState()
