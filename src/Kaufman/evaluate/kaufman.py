from __future__ import annotations

import chess

from Kaufman.position import Piece, Position

from . import Evaluator
from .profiles import ScoringProfile, base_scores, get_profile

_EDGE_FILES = frozenset({"a", "h"})


class KaufmanEvaluator(Evaluator):
    """Material imbalance after Larry Kaufman, in pawns.

    Each piece is worth its base value, plus the bishop-pair bonus for every
    bishop of a side that holds two or more bishops, plus (lesson profile)
    the edge-pawn penalty for a pawn on the a- or h-file.  White's pieces
    are added, Black's subtracted.

    Usage::

        from Kaufman.evaluate import KaufmanEvaluator, ARTICLE
        from Kaufman.position import Position

        evaluator = KaufmanEvaluator(ARTICLE)
        evaluator.evaluate(Position.from_fen(fen))

    Args:
        profile: :class:`ScoringProfile` or its name.  Defaults to
                 ``SOURCE_OF_TRUTH``.
    """

    def __init__(self, profile: ScoringProfile | str | None = None) -> None:
        super().__init__()
        self._profile = get_profile(profile)
        self._base_scores = base_scores(self._profile)

    @property
    def profile(self) -> ScoringProfile:
        return self._profile

    def evaluate(self, position: Position) -> float:
        pairs = {
            color: self._has_bishop_pair(position, color) for color in chess.COLORS
        }

        imbalance = 0.0
        for piece in position:
            score = self.score_piece(piece, pairs[piece.color])
            imbalance += score if piece.color == chess.WHITE else -score

        return imbalance

    def side_score(self, position: Position, color: chess.Color) -> float:
        has_pair = self._has_bishop_pair(position, color)
        return sum(self.score_piece(p, has_pair) for p in position.of_color(color))

    def score_piece(self, piece: Piece, has_bishop_pair: bool) -> float:
        score = self._base_scores[piece.kind]

        if has_bishop_pair and piece.kind == chess.BISHOP:
            score += self._profile.bishop_pair_bonus

        if piece.kind == chess.PAWN and piece.file in _EDGE_FILES:
            score += self._profile.edge_pawn_penalty

        return score

    @staticmethod
    def _has_bishop_pair(position: Position, color: chess.Color) -> bool:
        return position.count(chess.BISHOP, color) >= 2

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(profile={self._profile.name!r})"


def evaluate(
    position: Position, profile: ScoringProfile | str | None = None
) -> float:
    """Score *position* with a :class:`KaufmanEvaluator` (``SOURCE_OF_TRUTH`` by default)."""
    return KaufmanEvaluator(profile).evaluate(position)
