"""Square type and coordinate helpers.

Board layout follows the on-screen grid, top row first:
    rank 0 is Black's back rank (a8 … h8),
    rank 7 is White's back rank (a1 … h1).
Files run 0–7 from the a-file to the h-file.
"""

from __future__ import annotations

from typing import NamedTuple


class Square(NamedTuple):
    """A (rank, file) coordinate. Not validated; see :func:`is_on_board`."""

    rank: int
    file: int

    def __str__(self) -> str:
        return square_name(self) if is_on_board(self) else f"({self.rank}, {self.file})"


def make_square(rank: int, file: int) -> Square:
    return Square(rank, file)


def is_on_board(sq: Square) -> bool:
    """Whether both coordinates lie in 0..7."""
    return 0 <= sq.rank < 8 and 0 <= sq.file < 8


def square_name(sq: Square) -> str:
    """Algebraic name, e.g. Square(6, 4) → 'e2'."""
    if not is_on_board(sq):
        raise ValueError(f"Square off the board: {tuple(sq)!r}")
    return chr(ord("a") + sq.file) + str(8 - sq.rank)


def parse_square(name: str) -> Square:
    """Parse an algebraic name, e.g. 'e4' → Square(4, 4)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(8 - int(name[1]), ord(name[0]) - ord("a"))


ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(rank, file) for rank in range(8) for file in range(8)
)


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = (Square(0, f) for f in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Square(1, f) for f in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Square(2, f) for f in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Square(3, f) for f in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Square(4, f) for f in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Square(5, f) for f in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Square(6, f) for f in range(8))
A1, B1, C1, D1, E1, F1, G1, H1 = (Square(7, f) for f in range(8))
