"""Tic-tac-toe on a 3x3 board with a minimax computer opponent."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Sequence

SIZE = 3
EMPTY = " "
HUMAN = "O"
COMPUTER = "X"
WIN_SCORE = 10

_LINES: tuple[tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


class Board:
    """A 3x3 board; cells hold ``"X"``, ``"O"`` or a blank."""

    def __init__(self, rows: Iterable[str] | None = None) -> None:
        if rows is None:
            self._cells = [EMPTY] * (SIZE * SIZE)
            return
        rows = list(rows)
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise ValueError("a board needs three rows of three cells")
        cells = [cell for row in rows for cell in row]
        if any(cell not in (EMPTY, HUMAN, COMPUTER) for cell in cells):
            raise ValueError("cells must be 'X', 'O' or blank")
        self._cells = cells

    def __getitem__(self, position: tuple[int, int]) -> str:
        row, col = position
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            raise IndexError(f"cell ({row}, {col}) is off the board")
        return self._cells[row * SIZE + col]

    def is_valid_move(self, row: int, col: int) -> bool:
        """Return True when ``(row, col)`` is on the board and empty."""
        return (
            0 <= row < SIZE
            and 0 <= col < SIZE
            and self._cells[row * SIZE + col] == EMPTY
        )

    def place(self, row: int, col: int, player: str) -> None:
        """Put ``player``'s mark on an empty cell."""
        if player not in (HUMAN, COMPUTER):
            raise ValueError(f"unknown player {player!r}")
        if not self.is_valid_move(row, col):
            raise ValueError(f"cell ({row}, {col}) is not available")
        self._cells[row * SIZE + col] = player

    def winner(self) -> str | None:
        """Return the mark that owns a full line, or None."""
        cells = self._cells
        for a, b, c in _LINES:
            if cells[a] != EMPTY and cells[a] == cells[b] == cells[c]:
                return cells[a]
        return None

    def is_full(self) -> bool:
        return EMPTY not in self._cells

    def evaluate(self) -> int:
        """Score the board: +10 when X has won, -10 when O has won, else 0."""
        winner = self.winner()
        if winner == COMPUTER:
            return WIN_SCORE
        if winner == HUMAN:
            return -WIN_SCORE
        return 0

    def minimax(self, depth: int = 0, is_max: bool = True) -> int:
        """Return the minimax value of the board with X maximising.

        Quicker wins and slower losses are preferred through ``depth``.
        """
        score = self.evaluate()
        if score == WIN_SCORE:
            return score - depth
        if score == -WIN_SCORE:
            return score + depth
        if self.is_full():
            return 0
        player, pick = (COMPUTER, max) if is_max else (HUMAN, min)
        best: int | None = None
        for index, cell in enumerate(self._cells):
            if cell != EMPTY:
                continue
            self._cells[index] = player
            value = self.minimax(depth + 1, not is_max)
            self._cells[index] = EMPTY
            best = value if best is None else pick(best, value)
        assert best is not None
        return best

    def best_move(self) -> tuple[int, int] | None:
        """Return the best cell for X, or None when the board is full."""
        best_value: int | None = None
        best: tuple[int, int] | None = None
        for index, cell in enumerate(self._cells):
            if cell != EMPTY:
                continue
            self._cells[index] = COMPUTER
            value = self.minimax(0, False)
            self._cells[index] = EMPTY
            if best_value is None or value > best_value:
                best_value = value
                best = divmod(index, SIZE)
        return best

    def render(self) -> str:
        """Return the board drawn with box characters and coordinates."""
        lines = ["     0   1   2", "   ╔═══╦═══╦═══╗"]
        for row in range(SIZE):
            cells = self._cells[row * SIZE:(row + 1) * SIZE]
            lines.append(f" {row} ║" + "║".join(f" {cell} " for cell in cells) + "║")
            if row < SIZE - 1:
                lines.append("   ╠═══╬═══╬═══╣")
        lines.append("   ╚═══╩═══╩═══╝")
        return "\n".join(lines)


def _read_int(read_line: Callable[[], str]) -> int:
    try:
        return int(read_line().strip())
    except ValueError:
        return -1


def play(
    mode: int,
    read_line: Callable[[], str] = input,
    write: Callable[[str], object] = sys.stdout.write,
) -> str | None:
    """Play one game and return the winning mark, or None for a draw.

    Mode 1 is two humans; mode 2 lets the computer play X. O moves first.
    """
    if mode not in (1, 2):
        raise ValueError("mode must be 1 or 2")
    board = Board()
    current = HUMAN

    write("\nGame Start!\n")
    write("Player O: You\n")
    write("Player X: Computer (AI)\n" if mode == 2 else "Player X: Player 2\n")

    def human_turn(player: str) -> bool:
        write("Enter row (0-2): ")
        row = _read_int(read_line)
        write("Enter col (0-2): ")
        col = _read_int(read_line)
        if board.is_valid_move(row, col):
            board.place(row, col, player)
            return True
        write("Invalid move! Try again.\n")
        return False

    while True:
        write("\n" + board.render() + "\n\n")
        winner = board.winner()
        if winner is not None:
            if winner == HUMAN:
                write("Player O wins!\n")
            elif mode == 2:
                write("Computer wins! Better luck next time!\n")
            else:
                write("Player X wins!\n")
            break
        if board.is_full():
            write("It's a draw!\n")
            break

        if current == HUMAN:
            write("Player O's turn (You)\n")
            if human_turn(HUMAN):
                current = COMPUTER
        elif mode == 2:
            write("Computer's turn...\n")
            move = board.best_move()
            assert move is not None
            write(f"Computer plays: ({move[0]}, {move[1]})\n")
            board.place(move[0], move[1], COMPUTER)
            current = HUMAN
        else:
            write("Player X's turn\n")
            if human_turn(COMPUTER):
                current = HUMAN

    write("\n" + board.render() + "\n\n")
    write("\nThanks for playing!\n")
    return winner


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for a game mode on standard input and play a game."""
    del argv
    out = sys.stdout
    out.write("TIC-TAC-TOE\n\n")
    out.write("Select Game Mode:\n")
    out.write("1. Human vs Human\n")
    out.write("2. Human vs Computer\n")
    out.write("Enter choice (1 or 2): ")
    try:
        choice = _read_int(input)
        if choice not in (1, 2):
            out.write("Invalid choice!\n")
            return 1
        play(choice)
    except EOFError:
        out.write("\n")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())