from abc import ABC, abstractmethod

import chess

from Kaufman.position import Position


class Evaluator(ABC):
    @abstractmethod
    def evaluate(self, position: Position) -> float:
        """
        Evaluate the position from an absolute perspective, in pawns.
        Score > 0 means White is ahead.
        Score < 0 means Black is ahead.
        """
        ...

    def evaluate_board(self, board: chess.BaseBoard) -> float:
        return self.evaluate(Position.from_board(board))


from .profiles import (  # noqa: E402
    ScoringProfile as ScoringProfile,
    ARTICLE as ARTICLE,
    LESSON as LESSON,
    PROFILES as PROFILES,
    SOURCE_OF_TRUTH as SOURCE_OF_TRUTH,
    base_scores as base_scores,
    get_profile as get_profile,
)
from .kaufman import (  # noqa: E402
    KaufmanEvaluator as KaufmanEvaluator,
    evaluate as evaluate,
)
