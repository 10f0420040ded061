"""
Material summary in the shape host boards report it::

    {
        "white": {"b": 2, "n": 2, "p": 8, "q": 1, "r": 2, "k": 1, "count": 16},
        "black": {...},
        "imbalance": 0.0,
    }

Counts are plain piece counts; only ``imbalance`` comes from the evaluator.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any

import chess

from Kaufman.evaluate import Evaluator, KaufmanEvaluator
from Kaufman.position import Position

# Order the host lists its kinds in
_KINDS: list[chess.PieceType] = [
    chess.BISHOP,
    chess.KNIGHT,
    chess.PAWN,
    chess.QUEEN,
    chess.ROOK,
    chess.KING,
]


@dataclass
class MaterialForColor:
    counts: dict[chess.PieceType, int]

    @property
    def count(self) -> int:
        return sum(self.counts.values())

    def __getitem__(self, kind: chess.PieceType) -> int:
        return self.counts.get(kind, 0)

    def to_dict(self) -> dict[str, int]:
        d = {chess.piece_symbol(kind): self[kind] for kind in _KINDS}
        d["count"] = self.count
        return d

    @classmethod
    def from_position(cls, position: Position, color: chess.Color) -> MaterialForColor:
        return cls({kind: position.count(kind, color) for kind in _KINDS})


@dataclass
class MaterialSummary:
    white: MaterialForColor
    black: MaterialForColor
    imbalance: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "white": self.white.to_dict(),
            "black": self.black.to_dict(),
            "imbalance": self.imbalance,
        }


def material_summary(
    position: Position, evaluator: Evaluator | None = None
) -> MaterialSummary:
    evaluator = evaluator or KaufmanEvaluator()
    return MaterialSummary(
        white=MaterialForColor.from_position(position, chess.WHITE),
        black=MaterialForColor.from_position(position, chess.BLACK),
        imbalance=evaluator.evaluate(position),
    )


def merge_imbalance(
    summary: dict[str, Any], position: Position, evaluator: Evaluator | None = None
) -> dict[str, Any]:
    """
    Return a copy of a host-provided *summary* with ``imbalance`` replaced by
    the evaluator's score.  The input dict is left untouched.
    """
    evaluator = evaluator or KaufmanEvaluator()
    merged = copy.deepcopy(summary)
    merged["imbalance"] = evaluator.evaluate(position)
    return merged
