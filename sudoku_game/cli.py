"""
Sudoku Game - Terminal Front End
"""

import argparse
import sys
import time

from .config import GameConfig, merge_overrides
from .display import (
    describe_hint,
    describe_input,
    describe_undo,
    format_board,
    format_status,
    format_win_summary,
)
from .outcomes import HintStatus, InputStatus
from .session import GameSession

HELP_TEXT = """Commands:
  <row> <col> <value>   Enter a value (rows and columns are 1-9)
  clear <row> <col>     Empty a cell
  undo                  Revert the last change
  hint                  Fill one empty cell
  new                   Start a new game
  show                  Print the board again
  help                  Show this message
  quit                  Leave the game"""


class TerminalGame:
    """
    Line-oriented driver around a GameSession.

    Reads one command per line, forwards it to the session and prints the
    result. Wall-clock time between commands is fed to the session as
    one-second ticks.
    """

    def __init__(self, session: GameSession, out=None, clock=time.monotonic):
        self.session = session
        self.out = out or sys.stdout
        self.clock = clock
        self._last_tick = clock()

    def say(self, text: str = ""):
        print(text, file=self.out)

    def show_board(self):
        snap = self.session.snapshot()
        self.say(format_board(snap.player_grid, with_coordinates=True))
        self.say(format_status(snap))

    def catch_up_clock(self):
        now = self.clock()
        while now - self._last_tick >= 1.0:
            self.session.tick()
            self._last_tick += 1.0

    def handle(self, line: str) -> bool:
        """Run one command. Returns False when the player asks to quit."""
        self.catch_up_clock()
        words = line.split()
        if not words:
            return True

        command = words[0].lower()
        if command in ("quit", "exit", "q"):
            return False
        if command == "help":
            self.say(HELP_TEXT)
        elif command == "show":
            self.show_board()
        elif command == "new":
            self.session.new_game()
            self._last_tick = self.clock()
            self.say("New game started")
            self.show_board()
        elif command == "undo":
            self.say(describe_undo(self.session.undo()))
            self.show_board()
        elif command == "hint":
            outcome = self.session.request_hint()
            self.say(describe_hint(outcome))
            if outcome.status is HintStatus.PROVIDED:
                self.show_board()
                if outcome.solved:
                    self.say(format_win_summary(self.session.snapshot()))
        elif command == "clear" and len(words) == 3:
            self._enter(words[1], words[2], "")
        elif len(words) == 3:
            self._enter(words[0], words[1], words[2])
        else:
            self.say(f"Unknown command: {line.strip()!r} (type 'help')")
        return True

    def _enter(self, row_text: str, col_text: str, value: str):
        try:
            row, col = int(row_text) - 1, int(col_text) - 1
            outcome = self.session.apply_input(row, col, value)
        except ValueError as e:
            self.say(f"Error: {e}")
            return

        self.say(describe_input(outcome))
        if outcome.status in (InputStatus.ACCEPTED, InputStatus.CLEARED):
            self.show_board()
        if outcome.solved:
            self.say(format_win_summary(self.session.snapshot()))

    def run(self, lines) -> int:
        self.say("=" * 40)
        self.say("Sudoku")
        self.say("=" * 40)
        self.show_board()
        self.say("Type 'help' for commands.")

        for line in lines:
            if not self.handle(line):
                break
        self.say("Bye!")
        return 0


def main(argv=None, stdin=None, stdout=None) -> int:
    """
    Main entry point for the terminal game.

    Handles command-line arguments and runs the command loop until quit or end of input.
    """
    parser = argparse.ArgumentParser(
        description='Sudoku Game - play in the terminal',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Start a game:
    python -m sudoku_game

  Reproducible puzzle with more givens:
    python -m sudoku_game --seed 7 --reveal 0.5
        """
    )

    parser.add_argument('--reveal', '-r', type=float, default=None,
                        help='Chance that a cell is given (default: 0.35)')
    parser.add_argument('--cooldown-ms', type=int, default=None,
                        help='Minimum time between hints in ms (default: 2000)')
    parser.add_argument('--seed', '-s', type=int, default=None,
                        help='Random seed for reproducible games')

    args = parser.parse_args(argv)

    try:
        config = merge_overrides(GameConfig(),
                                 reveal_probability=args.reveal,
                                 hint_cooldown_ms=args.cooldown_ms,
                                 seed=args.seed)
    except ValueError as e:
        parser.error(str(e))

    game = TerminalGame(GameSession(config), out=stdout)
    return game.run(stdin if stdin is not None else sys.stdin)


if __name__ == '__main__':
    sys.exit(main())
