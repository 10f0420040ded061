"""
Piece and Position records consumed by the evaluators.

A :class:`Position` is nothing more than a flat collection of
:class:`Piece` records.  It is deliberately looser than a
:class:`chess.Board`: no legality checks, no side to move, and duplicate
squares are kept as-is.  Adapters are provided for the three shapes callers
usually hold:

  * a python-chess board         → :meth:`Position.from_board`
  * a FEN string                 → :meth:`Position.from_fen`
  * host piece records           → :meth:`Position.from_records`

Host records look like ``{"type": "b", "color": 1, "square": "c1"}`` where
colour ``1`` is White and ``2`` is Black.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

import chess

# Host colour codes
_HOST_WHITE = 1
_HOST_BLACK = 2

_HOST_COLORS: dict[int, chess.Color] = {
    _HOST_WHITE: chess.WHITE,
    _HOST_BLACK: chess.BLACK,
}


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class Piece:
    kind: chess.PieceType
    color: chess.Color
    square: chess.Square
    promoted: bool = False

    def __post_init__(self) -> None:
        if not _is_int(self.kind) or self.kind not in chess.PIECE_TYPES:
            raise ValueError(f"Unknown piece kind: {self.kind!r}")
        if not isinstance(self.color, bool):
            raise ValueError(f"Unknown piece color: {self.color!r}")
        if not _is_int(self.square) or self.square not in chess.SQUARES:
            raise ValueError(f"Square out of range: {self.square!r}")

    @property
    def file(self) -> str:
        """File letter of the piece, ``'a'`` .. ``'h'``."""
        return chess.FILE_NAMES[chess.square_file(self.square)]

    @property
    def symbol(self) -> str:
        return chess.Piece(self.kind, self.color).symbol()

    def mirror(self) -> Piece:
        """Same piece for the other side, rotated 180° on the board."""
        return Piece(
            kind=self.kind,
            color=not self.color,
            square=chess.square(
                7 - chess.square_file(self.square),
                7 - chess.square_rank(self.square),
            ),
            promoted=self.promoted,
        )

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Piece:
        """Build a piece from a host record (``type``/``color``/``square``)."""
        try:
            kind_letter = record["type"]
            color_code = record["color"]
            square_name = record["square"]
        except KeyError as exc:
            raise ValueError(f"Piece record is missing {exc.args[0]!r}") from exc

        symbol = str(kind_letter).lower()
        if symbol not in chess.PIECE_SYMBOLS[1:]:
            raise ValueError(f"Unknown piece type in record: {kind_letter!r}")
        kind = chess.PIECE_SYMBOLS.index(symbol)

        if color_code not in _HOST_COLORS:
            raise ValueError(f"Unknown color code in record: {color_code!r}")

        try:
            square = chess.parse_square(square_name)
        except ValueError:
            raise ValueError(f"Invalid square in record: {square_name!r}") from None

        return cls(
            kind=kind,
            color=_HOST_COLORS[color_code],
            square=square,
            promoted=bool(record.get("promoted", False)),
        )


@dataclass(frozen=True)
class Position:
    pieces: tuple[Piece, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[Piece]:
        return iter(self.pieces)

    def __len__(self) -> int:
        return len(self.pieces)

    def of_color(self, color: chess.Color) -> list[Piece]:
        return [p for p in self.pieces if p.color == color]

    def count(self, kind: chess.PieceType, color: chess.Color) -> int:
        return sum(1 for p in self.pieces if p.kind == kind and p.color == color)

    def mirror(self) -> Position:
        """
        Colours swapped and every square rotated 180°, so files map
        a↔h, b↔g, c↔f, d↔e and ranks 1↔8, 2↔7, ...
        """
        return Position(tuple(p.mirror() for p in self.pieces))

    @classmethod
    def of(cls, pieces: Iterable[Piece]) -> Position:
        return cls(tuple(pieces))

    @classmethod
    def from_board(cls, board: chess.BaseBoard) -> Position:
        promoted = getattr(board, "promoted", chess.BB_EMPTY)
        return cls(
            tuple(
                Piece(
                    kind=piece.piece_type,
                    color=piece.color,
                    square=sq,
                    promoted=bool(promoted & chess.BB_SQUARES[sq]),
                )
                for sq, piece in sorted(board.piece_map().items())
            )
        )

    @classmethod
    def from_fen(cls, fen: str) -> Position:
        """
        Accept either a full FEN or only its piece-placement field.

        Raises ``ValueError`` if python-chess cannot parse it.
        """
        fen = fen.strip()
        if fen == "startpos":
            return cls.from_board(chess.Board())
        if " " in fen:
            return cls.from_board(chess.Board(fen))
        return cls.from_board(chess.BaseBoard(fen))

    @classmethod
    def from_records(
        cls, records: Mapping[str, Mapping[str, Any]] | Iterable[Mapping[str, Any]]
    ) -> Position:
        """
        Adapt a host piece collection.  A mapping (keyed by anything, usually
        the square) is read through its values.
        """
        if isinstance(records, Mapping):
            records = records.values()
        return cls(tuple(Piece.from_record(r) for r in records))
