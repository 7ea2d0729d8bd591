"""Move value object (coordinate-pair representation)."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.piece import Piece
from chessrules.core.types import Coordinate


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable record of one applied state transition.

    ``piece`` and ``captured`` are snapshots taken before the move, which is
    everything :meth:`Board.revert` needs to undo it.
    """

    origin: Coordinate
    destination: Coordinate
    piece: Piece
    captured: Piece | None = None

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{self.origin}{self.destination}"
