"""
Result types returned by the game session to whatever front end drives it.
"""

import re
from dataclasses import dataclass
from enum import Enum

import numpy as np

_INTEGER = re.compile(r"[+-]?\d+")


class GameState(Enum):
    ACTIVE = "active"
    SOLVED = "solved"


class InputStatus(Enum):
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    CLEARED = "cleared"
    IGNORED = "ignored"  # given cell, nothing to edit


class RejectReason(Enum):
    FORMAT = "format"
    RULE = "rule"


class HintStatus(Enum):
    PROVIDED = "provided"
    COOLDOWN_ACTIVE = "cooldown_active"
    NO_EMPTY_CELLS = "no_empty_cells"


@dataclass(frozen=True)
class ParsedDigit:
    """Outcome of parsing raw cell text: a digit 1-9, or a format error."""

    value: int | None = None

    @property
    def ok(self) -> bool:
        return self.value is not None


def parse_digit(text) -> ParsedDigit:
    """Parse cell input; anything that is not an integer 1-9 is a format error."""
    text = str(text)
    if not _INTEGER.fullmatch(text):
        return ParsedDigit()
    value = int(text)
    if value < 1 or value > 9:
        return ParsedDigit()
    return ParsedDigit(value)


@dataclass(frozen=True)
class InputOutcome:
    status: InputStatus
    row: int
    col: int
    value: int = 0
    reason: RejectReason | None = None
    solved: bool = False


@dataclass(frozen=True)
class UndoOutcome:
    applied: bool
    row: int | None = None
    col: int | None = None
    value: int | None = None


@dataclass(frozen=True)
class HintOutcome:
    status: HintStatus
    row: int | None = None
    col: int | None = None
    value: int | None = None
    seconds_remaining: float = 0.0
    solved: bool = False


@dataclass(frozen=True)
class SessionSnapshot:
    """Copy of the session state a front end needs to render the board."""

    player_grid: np.ndarray
    fixed_mask: np.ndarray
    mistake_count: int
    elapsed_seconds: int
    state: GameState
    history_depth: int

    @property
    def solved(self) -> bool:
        return self.state is GameState.SOLVED
