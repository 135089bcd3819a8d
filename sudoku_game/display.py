"""
Text rendering for boards, the game clock and session outcomes.

The session reports what happened; these helpers turn those reports into the
short messages a front end shows to the player.
"""

import numpy as np

from .outcomes import (
    HintOutcome,
    HintStatus,
    InputOutcome,
    InputStatus,
    RejectReason,
    SessionSnapshot,
    UndoOutcome,
)


def _row_parts(values) -> list[str]:
    parts = []
    for c, val in enumerate(values):
        parts.append(val)
        if c in {2, 5}:
            parts.append("|")
    return parts


def format_board(board: np.ndarray, with_coordinates: bool = False) -> str:
    """Render the 9x9 board as a human-friendly string, optionally with 1-based row/column labels."""
    lines = []
    for r, row in enumerate(board):
        line = " ".join(_row_parts(str(val) if val != 0 else "." for val in row))
        lines.append(f"{r + 1} | {line}" if with_coordinates else line)
        if r in {2, 5}:
            sep = "-" * len(line)
            lines.append(f"  | {sep}" if with_coordinates else sep)

    if with_coordinates:
        header = " ".join(_row_parts(str(c + 1) for c in range(9))).replace("|", " ")
        lines.insert(0, f"    {header}")
    return "\n".join(lines)


def format_elapsed(seconds: int) -> str:
    """Format elapsed seconds as MM:SS."""
    return f"{seconds // 60:02d}:{seconds % 60:02d}"


def format_status(snapshot: SessionSnapshot) -> str:
    return f"Time: {format_elapsed(snapshot.elapsed_seconds)}   Mistakes: {snapshot.mistake_count}"


def format_win_summary(snapshot: SessionSnapshot) -> str:
    return (
        "You Won!\n"
        f"Time: {format_elapsed(snapshot.elapsed_seconds)}\n"
        f"Mistakes: {snapshot.mistake_count}\n\n"
        "Great job!"
    )


def describe_input(outcome: InputOutcome) -> str:
    cell = f"r{outcome.row + 1}c{outcome.col + 1}"
    if outcome.status is InputStatus.ACCEPTED:
        return f"Placed {outcome.value} at {cell}"
    if outcome.status is InputStatus.CLEARED:
        return f"Cleared {cell}"
    if outcome.status is InputStatus.IGNORED:
        return f"{cell} is a given and cannot be changed"
    if outcome.reason is RejectReason.RULE:
        return "Invalid move! That number doesn't fit there."
    return "Please enter a single digit from 1 to 9"


def describe_undo(outcome: UndoOutcome) -> str:
    if not outcome.applied:
        return "Nothing to undo"
    shown = str(outcome.value) if outcome.value else "empty"
    return f"Restored r{outcome.row + 1}c{outcome.col + 1} to {shown}"


def describe_hint(outcome: HintOutcome) -> str:
    if outcome.status is HintStatus.COOLDOWN_ACTIVE:
        return f"Hint cooldown: {outcome.seconds_remaining:.1f}s"
    if outcome.status is HintStatus.NO_EMPTY_CELLS:
        return "No empty cells!"
    return f"Hint provided! r{outcome.row + 1}c{outcome.col + 1} = {outcome.value}"
