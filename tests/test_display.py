# tests/test_display.py
import numpy as np

from sudoku_game.display import (
    describe_hint,
    describe_input,
    describe_undo,
    format_board,
    format_elapsed,
    format_status,
    format_win_summary,
)
from sudoku_game.outcomes import (
    GameState,
    HintOutcome,
    HintStatus,
    InputOutcome,
    InputStatus,
    RejectReason,
    SessionSnapshot,
    UndoOutcome,
)


def _snapshot(elapsed=0, mistakes=0):
    return SessionSnapshot(
        player_grid=np.zeros((9, 9), dtype=int),
        fixed_mask=np.zeros((9, 9), dtype=bool),
        mistake_count=mistakes,
        elapsed_seconds=elapsed,
        state=GameState.ACTIVE,
        history_depth=0,
    )


def test_format_board_layout(solution):
    solution[0, 1] = 0
    lines = format_board(solution).splitlines()
    assert len(lines) == 11
    assert lines[0] == "5 . 4 | 6 7 8 | 9 1 2"
    assert set(lines[3]) == {"-"}
    assert len(lines[3]) == len(lines[0])


def test_format_board_with_coordinates(solution):
    lines = format_board(solution, with_coordinates=True).splitlines()
    assert lines[0] == "    1 2 3   4 5 6   7 8 9"
    assert lines[1] == "1 | 5 3 4 | 6 7 8 | 9 1 2"
    assert lines[4].startswith("  | ---")
    assert len(lines) == 12


def test_format_elapsed():
    assert format_elapsed(0) == "00:00"
    assert format_elapsed(75) == "01:15"
    assert format_elapsed(3600) == "60:00"


def test_status_and_win_summary():
    snap = _snapshot(elapsed=125, mistakes=3)
    assert format_status(snap) == "Time: 02:05   Mistakes: 3"
    summary = format_win_summary(snap)
    assert summary.startswith("You Won!")
    assert "Time: 02:05" in summary
    assert "Mistakes: 3" in summary


def test_describe_input():
    assert describe_input(InputOutcome(InputStatus.ACCEPTED, 0, 2, 7)) == "Placed 7 at r1c3"
    assert describe_input(InputOutcome(InputStatus.CLEARED, 4, 4)) == "Cleared r5c5"
    assert "given" in describe_input(InputOutcome(InputStatus.IGNORED, 0, 0, 5))
    rule = InputOutcome(InputStatus.REJECTED, 0, 0, 3, reason=RejectReason.RULE)
    assert describe_input(rule).startswith("Invalid move!")
    fmt = InputOutcome(InputStatus.REJECTED, 0, 0, reason=RejectReason.FORMAT)
    assert "1 to 9" in describe_input(fmt)


def test_describe_undo():
    assert describe_undo(UndoOutcome(applied=False)) == "Nothing to undo"
    assert describe_undo(UndoOutcome(True, 1, 1, 0)) == "Restored r2c2 to empty"
    assert describe_undo(UndoOutcome(True, 1, 1, 6)) == "Restored r2c2 to 6"


def test_describe_hint():
    assert describe_hint(HintOutcome(HintStatus.COOLDOWN_ACTIVE, seconds_remaining=1.44)) == "Hint cooldown: 1.4s"
    assert describe_hint(HintOutcome(HintStatus.NO_EMPTY_CELLS)) == "No empty cells!"
    assert describe_hint(HintOutcome(HintStatus.PROVIDED, 8, 0, 4)) == "Hint provided! r9c1 = 4"
