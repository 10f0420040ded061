"""
Scoring profiles for Kaufman's material evaluation.

Kaufman's article "The Evaluation of Material Imbalances" and his later
chess.com lesson state the same scheme with slightly different numbers:

  Unpaired bishop:
    article: 3.25
    lesson:  3.5

  Rook pawn (a/h file):
    article: 1
    lesson:  0.75

  Bishop pair:
    article: 0.5   (0.25 per bishop)
    lesson:  0.25  (0.125 per bishop, the lesson is ambiguous here)

Every other piece is valued the same by both sources.  Change
``SOURCE_OF_TRUTH`` below to switch the default profile.
"""

from __future__ import annotations

from dataclasses import dataclass

import chess

SOURCE_OF_TRUTH = "lesson"

KNIGHT_VALUE = 3.25
PAWN_VALUE = 1.0
ROOK_VALUE = 5.0
QUEEN_VALUE = 9.75
KING_VALUE = 0.0


@dataclass(frozen=True)
class ScoringProfile:
    name: str
    bishop_base: float
    bishop_pair_bonus: float  # added to each bishop of a side holding the pair
    edge_pawn_penalty: float  # added to each a/h-file pawn, <= 0


ARTICLE = ScoringProfile(
    name="article",
    bishop_base=3.25,
    bishop_pair_bonus=0.25,
    edge_pawn_penalty=0.0,
)

LESSON = ScoringProfile(
    name="lesson",
    bishop_base=3.5,
    bishop_pair_bonus=0.125,
    edge_pawn_penalty=-0.25,
)

PROFILES: dict[str, ScoringProfile] = {p.name: p for p in (ARTICLE, LESSON)}


def get_profile(profile: ScoringProfile | str | None = None) -> ScoringProfile:
    """
    Resolve *profile* to a :class:`ScoringProfile`.

    ``None`` selects ``SOURCE_OF_TRUTH``.  Unknown names raise ``ValueError``.
    """
    if profile is None:
        profile = SOURCE_OF_TRUTH
    if isinstance(profile, ScoringProfile):
        return profile
    try:
        return PROFILES[profile]
    except KeyError:
        raise ValueError(
            f"Unknown scoring profile {profile!r}, expected one of {sorted(PROFILES)}"
        ) from None


def base_scores(profile: ScoringProfile) -> dict[chess.PieceType, float]:
    return {
        chess.BISHOP: profile.bishop_base,
        chess.KNIGHT: KNIGHT_VALUE,
        chess.PAWN: PAWN_VALUE,
        chess.QUEEN: QUEEN_VALUE,
        chess.ROOK: ROOK_VALUE,
        chess.KING: KING_VALUE,
    }
