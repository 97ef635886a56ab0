"""
Window, text and logging settings.
"""

# -----------------------------------------------------------------------------
# WINDOW
# -----------------------------------------------------------------------------

WINDOW_TITLE = "Tic-Tac-Toe"
WINDOW_WIDTH = 300           # fixed, not resizable
WINDOW_HEIGHT = 400
CELL_SIZE = 60               # each board cell is square
CELL_SPACING = 15            # gap between cells
OUTER_SPACING = 20           # padding above the heading and below the board

# -----------------------------------------------------------------------------
# COLORS
# -----------------------------------------------------------------------------

BOARD_BG_COLOR = "#333"
CELL_COLOR = "#424242"
X_COLOR = "#8acaff"
O_COLOR = "#ff8a8a"
HIGHLIGHT_COLOR = "#2e5d3a"  # cells of the winning line

# -----------------------------------------------------------------------------
# TEXT
# -----------------------------------------------------------------------------

HEADING_TEXT = "Tic-Tac-Toe"
TURN_TEXT = "Player {player}'s turn"
WIN_TEXT = "🎉 Player {player} wins! 🎉"
DRAW_TEXT = "🤝 It's a draw! 🤝"
PLAY_AGAIN_TEXT = "Play Again"

# -----------------------------------------------------------------------------
# LOGGING
# -----------------------------------------------------------------------------

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
