"""
Console front end for Super Tris.

Two players share the keyboard:
- Type four numbers "R C r c" to play cell (r, c) of sub-board (R, C),
  all 1-based
- Commands: undo, redo, new, moves, help, quit

Run this script to play Ultimate Tic-Tac-Toe in a terminal!
"""

from typing import Optional, Tuple
from dataclasses import dataclass

from supertris import EngineConfig, UltimateTicTacToe, Mark


HELP_TEXT = """
Commands:
  R C r c   play cell (r, c) of sub-board (R, C), numbers 1-3
  u, undo   take back the last move
  r, redo   replay an undone move
  n, new    start a new game
  m, moves  list the legal moves
  h, help   show this help
  q, quit   leave the game
"""

COMMAND_ALIASES = {
    "u": "undo", "undo": "undo",
    "r": "redo", "redo": "redo",
    "n": "new", "new": "new",
    "m": "moves", "moves": "moves",
    "h": "help", "help": "help", "?": "help",
    "q": "quit", "quit": "quit", "exit": "quit",
}


@dataclass
class Command:
    """A parsed line of user input."""
    name: str                                       # "play", "undo", ... or "invalid"
    move: Optional[Tuple[int, int, int, int]] = None  # 0-based, for "play"
    error: Optional[str] = None                     # for "invalid"


def parse_command(line: str) -> Command:
    """
    Parse one line of user input.

    Four numbers are a move (converted from 1-based to 0-based);
    anything else must be one of the command words.
    """
    words = line.replace(",", " ").split()

    if not words:
        return Command("invalid", error="Empty input. Type 'help' for commands.")

    if len(words) == 1 and words[0].lower() in COMMAND_ALIASES:
        return Command(COMMAND_ALIASES[words[0].lower()])

    if len(words) == 4:
        try:
            numbers = [int(w) for w in words]
        except ValueError:
            return Command("invalid", error="A move is four numbers, e.g. '1 1 2 2'.")
        main_row, main_col, row, col = (n - 1 for n in numbers)
        return Command("play", move=(main_row, main_col, row, col))

    return Command("invalid", error=f"Unknown command '{line.strip()}'. Type 'help'.")


class ConsoleGame:
    """
    Terminal game loop around the engine.

    Only reads PublicState snapshots and forwards commands,
    all rules live in the engine.
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()
        self.game = UltimateTicTacToe(self.config)
        self.is_running = False

    def start(self):
        """Start the game loop."""
        print("\n" + "="*60)
        print("   Super Tris - Ultimate Tic-Tac-Toe")
        print("="*60)
        print(HELP_TEXT)

        self.is_running = True
        self._show()

        while self.is_running:
            try:
                line = input("> ")
            except EOFError:
                break
            self.handle(line)

    def handle(self, line: str):
        """Run one line of user input."""
        command = parse_command(line)

        if command.name == "invalid":
            print(command.error)
        elif command.name == "play":
            self._play(*command.move)
        elif command.name == "undo":
            if self.game.undo():
                self._show()
            else:
                print("Nothing to undo.")
        elif command.name == "redo":
            if self.game.redo():
                self._show()
            else:
                print("Nothing to redo.")
        elif command.name == "new":
            self.game.new_game(self.config.STARTING_PLAYER)
            print("\nNew game!")
            self._show()
        elif command.name == "moves":
            self._show_moves()
        elif command.name == "help":
            print(HELP_TEXT)
        elif command.name == "quit":
            print("\nGame quit by user.")
            self.is_running = False

    def _play(self, main_row: int, main_col: int, row: int, col: int):
        result = self.game.play(main_row, main_col, row, col)

        if not result.ok:
            print(f"Illegal move: {result.reason}")
            return

        self._show()

        if result.event == "win":
            print(f"\n{result.winner.symbol} wins the game! Type 'new' to play again.")
        elif result.event == "draw":
            print("\nThe game is a draw! Type 'new' to play again.")

    def _show(self):
        self.game.print_board()
        state = self.game.get_public_state()
        if state.last_move is not None:
            last = state.last_move
            print(
                f"Last move: {last.player.symbol} at "
                f"{last.main_row + 1} {last.main_col + 1} {last.row + 1} {last.col + 1}"
            )
        print(self.game.get_status_message())

    def _show_moves(self):
        moves = self.game.get_valid_moves()
        if not moves:
            print("No legal moves.")
            return
        print(f"{len(moves)} legal moves:")
        print("  " + ", ".join(
            f"{m.main_row + 1}{m.main_col + 1}{m.row + 1}{m.col + 1}" for m in moves
        ))


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Super Tris - Ultimate Tic-Tac-Toe")
    parser.add_argument(
        "--o-first",
        action="store_true",
        help="Let O make the first move"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print engine trace messages"
    )

    args = parser.parse_args()

    config = EngineConfig()
    if args.o_first:
        config.STARTING_PLAYER = Mark.O.symbol
    config.DEBUG_MODE = args.debug

    game = ConsoleGame(config)

    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
