import logging
from enum import Enum

logger = logging.getLogger(__name__)

BOARD_CELLS = 9  # fixed 3x3 grid, row-major

# rows, cols, diags
WINNING_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


class Player(Enum):
    """
    the two marks
    """
    X = 'X'
    O = 'O'

    def opposite(self):
        return Player.O if self is Player.X else Player.X


class Status(Enum):
    """
    every state the game can be in
    """
    IN_PROGRESS = 'in_progress'
    X_WON = 'x_won'
    O_WON = 'o_won'
    DRAW = 'draw'

    @classmethod
    def won(cls, player):
        return cls.X_WON if player is Player.X else cls.O_WON

    @property
    def winner(self):
        if self is Status.X_WON: return Player.X
        if self is Status.O_WON: return Player.O
        return None

    @property
    def is_terminal(self):
        return self is not Status.IN_PROGRESS


class MoveResult(Enum):
    """
    what attempt_move did with a click
    """
    PLACED = 'placed'
    WIN = 'win'
    DRAW = 'draw'
    OCCUPIED = 'occupied'
    GAME_OVER = 'game_over'
    OUT_OF_RANGE = 'out_of_range'

    @property
    def accepted(self):
        return self in (MoveResult.PLACED, MoveResult.WIN, MoveResult.DRAW)


class Board:
    """
    nine cells, None for empty, never resized
    """
    __slots__ = ('_cells',)

    def __init__(self):
        self._cells = [None] * BOARD_CELLS

    @classmethod
    def from_cells(cls, cells):
        """
        build a board from any 9 cell values (None / Player)
        """
        cells = list(cells)
        if len(cells) != BOARD_CELLS:
            raise ValueError(f"board needs {BOARD_CELLS} cells, got {len(cells)}")
        board = cls()
        board._cells[:] = cells
        return board

    def _check(self, index):
        # no negative wrap-around, no slices
        if not isinstance(index, int) or not 0 <= index < BOARD_CELLS:
            raise IndexError(f"cell index out of range: {index!r}")

    def __getitem__(self, index):
        self._check(index)
        return self._cells[index]

    def __setitem__(self, index, value):
        self._check(index)
        self._cells[index] = value

    def __len__(self):
        return BOARD_CELLS

    def __iter__(self):
        return iter(self._cells)

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self):
        marks = ''.join(c.value if c else '.' for c in self._cells)
        return f"Board({marks!r})"

    def is_full(self):
        return all(c is not None for c in self._cells)

    def empty_cells(self):
        return [i for i, c in enumerate(self._cells) if c is None]

    def rows(self):
        # three row tuples, top to bottom
        return [tuple(self._cells[r*3:r*3 + 3]) for r in range(3)]

    def clear(self):
        self._cells[:] = [None] * BOARD_CELLS


def has_won(board, player):
    """
    true if player holds any full winning line
    """
    return any(all(board[i] == player for i in line) for line in WINNING_LINES)


class GameState:
    """
    tic-tac-toe rules and state

    the window owns one instance and forwards raw cell indices to
    attempt_move; everything else is read back from the fields.
    """
    def __init__(self):
        self.board = Board()
        self.current_player = Player.X
        self._status = Status.IN_PROGRESS
        self._move_count = 0

    @property
    def status(self):
        return self._status

    @property
    def move_count(self):
        return self._move_count

    @property
    def is_over(self):
        return self._status.is_terminal

    @property
    def winner(self):
        return self._status.winner

    def attempt_move(self, cell_index) -> MoveResult:
        """
        place current player's mark, check result
        invalid clicks are no-ops; the result says why
        """
        if self._status.is_terminal:
            logger.debug("move at %r ignored, game is over", cell_index)
            return MoveResult.GAME_OVER
        # bool is an int subclass, reject it too
        if isinstance(cell_index, bool) or not isinstance(cell_index, int) \
           or not 0 <= cell_index < BOARD_CELLS:
            logger.debug("move at %r ignored, out of range", cell_index)
            return MoveResult.OUT_OF_RANGE
        if self.board[cell_index] is not None:
            logger.debug("move at %d ignored, cell taken", cell_index)
            return MoveResult.OCCUPIED

        player = self.current_player
        self.board[cell_index] = player
        self._move_count += 1

        # win before draw: a full board that completes a line is a win
        if has_won(self.board, player):
            self._status = Status.won(player)
            logger.info("player %s wins after %d moves", player.value, self._move_count)
            return MoveResult.WIN
        if self.board.is_full():
            self._status = Status.DRAW
            logger.info("draw")
            return MoveResult.DRAW
        self.current_player = player.opposite()
        return MoveResult.PLACED

    def winning_line(self):
        """
        first triple held by the winner, or None
        """
        winner = self.winner
        if winner is None:
            return None
        for line in WINNING_LINES:
            if all(self.board[i] is winner for i in line):
                return line
        return None

    def copy(self):
        snap = GameState()
        snap.board = Board.from_cells(self.board)
        snap.current_player = self.current_player
        snap._status = self._status; snap._move_count = self._move_count
        return snap

    def reset(self):
        """
        clear board and reset flags
        """
        self.board.clear()
        self.current_player = Player.X
        self._status = Status.IN_PROGRESS; self._move_count = 0
        logger.info("game reset")
