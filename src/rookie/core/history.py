"""History — undo stack of committed moves plus the capture log."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rookie.core.move import MoveRecord
    from rookie.core.piece import Piece


class History:
    """LIFO log of committed :class:`MoveRecord` values.

    The capture log moves in lockstep with the record stack: a capturing move
    pushes exactly one piece, and only undoing that same move pops it.
    """

    __slots__ = ("_records", "_captured")

    def __init__(self) -> None:
        self._records: list[MoveRecord] = []
        self._captured: list[Piece] = []

    def push(self, record: MoveRecord) -> None:
        self._records.append(record)
        if record.captured_piece is not None:
            self._captured.append(record.captured_piece)

    def pop(self) -> MoveRecord:
        """Remove and return the most recent record.

        Raises :class:`IndexError` when empty.
        """
        if not self._records:
            raise IndexError("pop from empty move history")
        record = self._records.pop()
        if record.captured_piece is not None:
            self._captured.pop()
        return record

    def clear(self) -> None:
        self._records.clear()
        self._captured.clear()

    @property
    def last(self) -> MoveRecord | None:
        return self._records[-1] if self._records else None

    @property
    def records(self) -> tuple[MoveRecord, ...]:
        return tuple(self._records)

    @property
    def captured(self) -> tuple[Piece, ...]:
        """Captured pieces, oldest first."""
        return tuple(self._captured)

    def __len__(self) -> int:
        return len(self._records)

    def __bool__(self) -> bool:
        return bool(self._records)
