from Kaufman.evaluate import (
    ARTICLE as ARTICLE,
    LESSON as LESSON,
    KaufmanEvaluator as KaufmanEvaluator,
    ScoringProfile as ScoringProfile,
    evaluate as evaluate,
)
from Kaufman.position import Piece as Piece, Position as Position

VERSION = "0.0.1"
