import logging
from dataclasses import dataclass, replace
from enum import Enum
from types import MappingProxyType

logger = logging.getLogger(__name__)

POSITIONS = range(1, 10)               # cells 1..9, row-major

MSG_TURN = "Player '{}' turn"
MSG_WON = "Player '{}' Won"
MSG_DRAW = "Game Draw"


class InvalidCellError(ValueError):
    """
    raised for a cell position outside 1..9
    """


class CellValue(Enum):
    EMPTY = ''
    CIRCLE = 'O'
    CROSS = 'X'

    @property
    def symbol(self):
        return self.value

    @property
    def opponent(self):
        # EMPTY has no opponent
        if self is CellValue.CIRCLE:
            return CellValue.CROSS
        if self is CellValue.CROSS:
            return CellValue.CIRCLE
        return CellValue.EMPTY


class VictoryLine(Enum):
    """
    the 8 winning triples, in the order they are checked
    """
    ROW1 = (1, 2, 3)
    ROW2 = (4, 5, 6)
    ROW3 = (7, 8, 9)
    COL1 = (1, 4, 7)
    COL2 = (2, 5, 8)
    COL3 = (3, 6, 9)
    DIAG_MAIN = (1, 5, 9)
    DIAG_ANTI = (3, 5, 7)
    NONE = ()

    @property
    def positions(self):
        return self.value


WIN_LINES = tuple(line for line in VictoryLine if line is not VictoryLine.NONE)


@dataclass(frozen=True)
class GameState:
    """
    immutable snapshot handed to observers; replaced on every transition
    """
    message: str = MSG_TURN.format(CellValue.CIRCLE.symbol)
    current_turn: CellValue = CellValue.CIRCLE
    victory_line: VictoryLine = VictoryLine.NONE
    has_won: bool = False
    circle_wins: int = 0
    cross_wins: int = 0
    draws: int = 0


def check_position(position):
    if isinstance(position, bool) or not isinstance(position, int):
        raise InvalidCellError(f"cell position must be an int, got {position!r}")
    if position not in POSITIONS:
        raise InvalidCellError(f"cell position must be 1..9, got {position}")
    return position


@dataclass(frozen=True)
class CellTapped:
    position: int

    def __post_init__(self):
        # reject bad input here so it never reaches the board
        check_position(self.position)


@dataclass(frozen=True)
class ResetRequested:
    pass


class GameEngine:
    """
    tic-tac-toe rules, board and session score

    All input goes through dispatch(). Each accepted action swaps in a new
    GameState and notifies subscribers; ignored taps change nothing.
    """
    def __init__(self):
        """
        empty board, circle to move, counters at zero
        """
        self._board = {pos: CellValue.EMPTY for pos in POSITIONS}
        self._state = GameState()
        self._observers = []

    @property
    def state(self):
        return self._state

    @property
    def board(self):
        # read-only view, the engine keeps ownership
        return MappingProxyType(self._board)

    def cell(self, position):
        return self._board[check_position(position)]

    def subscribe(self, callback):
        """
        call callback(state) after every state change; returns an unsubscribe func
        """
        self._observers.append(callback)

        def unsubscribe():
            if callback in self._observers:
                self._observers.remove(callback)
        return unsubscribe

    def dispatch(self, action):
        """
        apply one user action and return the resulting state
        """
        if isinstance(action, CellTapped):
            changed = self._add_value_to_board(action.position)
        elif isinstance(action, ResetRequested):
            self._reset_round()
            changed = True
        else:
            raise TypeError(f"unsupported action: {action!r}")

        if changed:
            for callback in list(self._observers):
                callback(self._state)
        return self._state

    def is_board_full(self):
        return CellValue.EMPTY not in self._board.values()

    def winning_positions(self):
        return self._state.victory_line.positions

    def _reset_round(self):
        # clear cells, keep the score
        for pos in self._board:
            self._board[pos] = CellValue.EMPTY
        self._state = replace(
            self._state,
            message=MSG_TURN.format(CellValue.CIRCLE.symbol),
            current_turn=CellValue.CIRCLE,
            victory_line=VictoryLine.NONE,
            has_won=False,
        )
        logger.info("round reset (O %d, X %d, draws %d)",
                    self._state.circle_wins, self._state.cross_wins, self._state.draws)

    def _add_value_to_board(self, position):
        """
        place current symbol at position; False if the tap was ignored
        """
        if self._board[position] is not CellValue.EMPTY:
            logger.debug("cell %d already taken, ignoring", position)
            return False
        player = self._state.current_turn
        if player is CellValue.EMPTY:
            # round was won, wait for reset
            logger.debug("round over, ignoring tap on %d", position)
            return False

        self._board[position] = player
        logger.debug("%s -> cell %d", player.symbol, position)

        line = self._check_for_victory(player)
        if line is not VictoryLine.NONE:
            wins = {}
            if player is CellValue.CIRCLE:
                wins['circle_wins'] = self._state.circle_wins + 1
            else:
                wins['cross_wins'] = self._state.cross_wins + 1
            self._state = replace(
                self._state,
                message=MSG_WON.format(player.symbol),
                current_turn=CellValue.EMPTY,   # blocks further moves
                victory_line=line,
                has_won=True,
                **wins,
            )
            logger.info("player %s won on %s", player.symbol, line.name)
        elif self.is_board_full():
            # turn and has_won stay as they are; the full board blocks play
            self._state = replace(
                self._state,
                message=MSG_DRAW,
                draws=self._state.draws + 1,
            )
            logger.info("game draw")
        else:
            nxt = player.opponent
            self._state = replace(
                self._state,
                message=MSG_TURN.format(nxt.symbol),
                current_turn=nxt,
            )
        return True

    def _check_for_victory(self, player):
        """
        first line fully held by player, else VictoryLine.NONE
        """
        b = self._board
        for line in WIN_LINES:
            if all(b[pos] is player for pos in line.positions):
                return line
        return VictoryLine.NONE
