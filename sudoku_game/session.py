"""
Sudoku Game - Session Module
"""

import time
from typing import Callable

import numpy as np

from .config import GameConfig
from .generator import generate_solution
from .masker import mask_solution
from .outcomes import (
    GameState,
    HintOutcome,
    HintStatus,
    InputOutcome,
    InputStatus,
    RejectReason,
    SessionSnapshot,
    UndoOutcome,
    parse_digit,
)
from .rules import check_cell, is_complete_solution, is_full, is_valid, validate_grid

HistoryEntry = tuple[int, int, int]


class GameSession:
    """
    Mutable state of one Sudoku game.

    Holds the generated solution, the player's grid, the given-cell mask,
    the undo history and the mistake / clock / hint bookkeeping. Every
    operation runs synchronously and reports what happened through an
    outcome object; the session itself never prints or renders.
    """

    def __init__(self, config: GameConfig | None = None,
                 rng: np.random.Generator | None = None,
                 clock: Callable[[], float] = time.time):
        """
        Initialize the session and deal the first puzzle.

        Args:
            config (GameConfig): Reveal probability, hint cooldown and seed
            rng (np.random.Generator): Random source; overrides config.seed
            clock (callable): Returns the current time in seconds
        """
        self.config = config or GameConfig()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self.clock = clock
        self.new_game()

    @classmethod
    def from_puzzle(cls, solution, fixed_mask,
                    config: GameConfig | None = None,
                    rng: np.random.Generator | None = None,
                    clock: Callable[[], float] = time.time) -> "GameSession":
        """
        Build a session around an existing solution and given-cell mask.

        Raises:
            ValueError: if the solution is not a complete valid grid or the mask
                does not match it
        """
        solution = np.array(solution, dtype=int)
        fixed_mask = np.array(fixed_mask, dtype=bool)

        ok, reason = validate_grid(solution)
        if not ok:
            raise ValueError(f"Invalid solution: {reason}")
        if not is_complete_solution(solution):
            raise ValueError("Invalid solution: grid is not complete")
        if fixed_mask.shape != solution.shape:
            raise ValueError(f"Fixed mask has shape {fixed_mask.shape}, expected {solution.shape}")

        session = cls.__new__(cls)
        session.config = config or GameConfig()
        session.rng = rng if rng is not None else np.random.default_rng(session.config.seed)
        session.clock = clock
        session._start(solution, np.where(fixed_mask, solution, 0), fixed_mask)
        return session

    def _start(self, solution: np.ndarray, player_grid: np.ndarray, fixed_mask: np.ndarray):
        self.solution = solution
        self.player_grid = player_grid
        self.fixed_mask = fixed_mask
        self.history: list[HistoryEntry] = []
        self.mistake_count = 0
        self.elapsed_seconds = 0
        self.last_hint_time = 0.0
        self.state = GameState.ACTIVE

    def new_game(self) -> SessionSnapshot:
        """Throw away the current puzzle and deal a fresh one."""
        solution = generate_solution(self.rng)
        player_grid, fixed_mask = mask_solution(solution, self.config.reveal_probability, self.rng)
        self._start(solution, player_grid, fixed_mask)
        return self.snapshot()

    def apply_input(self, row: int, col: int, raw_value) -> InputOutcome:
        """
        Handle text typed into a cell.

        Given cells ignore input. Empty text clears the cell. Text that is not a
        digit 1-9 clears the cell without counting a mistake. A digit that breaks
        a row, column or box rule counts a mistake and clears the cell. Only an
        accepted digit is recorded for undo.
        """
        check_cell(row, col)
        if self.fixed_mask[row, col]:
            return InputOutcome(InputStatus.IGNORED, row, col, int(self.player_grid[row, col]))

        if not raw_value:
            self.player_grid[row, col] = 0
            return InputOutcome(InputStatus.CLEARED, row, col)

        parsed = parse_digit(raw_value)
        if not parsed.ok:
            self.player_grid[row, col] = 0
            return InputOutcome(InputStatus.REJECTED, row, col, reason=RejectReason.FORMAT)

        value = parsed.value
        if not is_valid(self.player_grid, row, col, value):
            self.mistake_count += 1
            self.player_grid[row, col] = 0
            return InputOutcome(InputStatus.REJECTED, row, col, value, reason=RejectReason.RULE)

        self.history.append((row, col, int(self.player_grid[row, col])))
        self.player_grid[row, col] = value
        solved = self._check_win()
        return InputOutcome(InputStatus.ACCEPTED, row, col, value, solved=solved)

    def undo(self) -> UndoOutcome:
        """Revert the most recent recorded change, one step per call."""
        if not self.history:
            return UndoOutcome(applied=False)

        r, c, old_val = self.history.pop()
        self.player_grid[r, c] = old_val
        return UndoOutcome(applied=True, row=r, col=c, value=old_val)

    def request_hint(self) -> HintOutcome:
        """Fill one random empty cell from the solution, at most once per cooldown window."""
        now = self.clock()
        since_last_ms = (now - self.last_hint_time) * 1000.0
        cooldown_ms = self.config.hint_cooldown_ms

        if since_last_ms < cooldown_ms:
            seconds_left = (cooldown_ms - since_last_ms) / 1000.0
            return HintOutcome(HintStatus.COOLDOWN_ACTIVE, seconds_remaining=seconds_left)

        empty_cells = np.argwhere(~self.fixed_mask & (self.player_grid == 0))
        if len(empty_cells) == 0:
            return HintOutcome(HintStatus.NO_EMPTY_CELLS)

        r, c = (int(v) for v in empty_cells[self.rng.integers(len(empty_cells))])
        value = int(self.solution[r, c])

        self.history.append((r, c, int(self.player_grid[r, c])))
        self.player_grid[r, c] = value
        self.last_hint_time = now

        solved = self._check_win()
        return HintOutcome(HintStatus.PROVIDED, row=r, col=c, value=value, solved=solved)

    def is_solved(self) -> bool:
        """True when every cell holds a digit; correctness is already enforced per move."""
        return is_full(self.player_grid)

    def tick(self) -> int:
        """Advance the game clock by one second while the puzzle is unsolved."""
        if self.state is GameState.ACTIVE:
            self.elapsed_seconds += 1
        return self.elapsed_seconds

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            player_grid=self.player_grid.copy(),
            fixed_mask=self.fixed_mask.copy(),
            mistake_count=self.mistake_count,
            elapsed_seconds=self.elapsed_seconds,
            state=self.state,
            history_depth=len(self.history),
        )

    def _check_win(self) -> bool:
        if self.is_solved():
            self.state = GameState.SOLVED
        return self.is_solved()
