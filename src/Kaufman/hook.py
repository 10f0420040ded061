"""
Patch a host game object so its material summary reports the Kaufman
imbalance instead of plain point counting.

The host object is expected to provide:

  get_material()  -> dict   {"white": {...}, "black": {...}, "imbalance": n}
  get_pieces()    -> host piece records, as a mapping or an iterable
  reload()        -> None   (optional, re-renders with the new summary)

Each game is patched at most once, whichever hook gets to it first.  The
marker lives on the game itself (``PATCHED_MARKER``), so every caller sees
it and the hook holds no reference to the games it patched.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Protocol

from Kaufman.evaluate import Evaluator, KaufmanEvaluator
from Kaufman.material import merge_imbalance
from Kaufman.position import Position

logger = logging.getLogger(__name__)

PATCHED_MARKER = "_kaufman_patched"


class Game(Protocol):
    def get_material(self) -> dict[str, Any]: ...

    def get_pieces(self) -> Any: ...


def is_patched(game: Any) -> bool:
    return getattr(game, PATCHED_MARKER, False) is True


class ImbalanceHook:
    def __init__(self, evaluator: Evaluator | None = None) -> None:
        self._evaluator = evaluator or KaufmanEvaluator()

    @property
    def evaluator(self) -> Evaluator:
        return self._evaluator

    def is_installed(self, game: Game) -> bool:
        return is_patched(game)

    def install(self, game: Game) -> bool:
        """
        Patch *game* unless any hook already patched it.

        Returns True when the game was patched now, False if it was skipped.
        Raises ``AttributeError`` if *game* has no ``get_material``; the game
        is then left unmarked.
        """
        if is_patched(game):
            logger.debug("Game %r already patched, skipping", game)
            return False

        original_get_material = game.get_material
        evaluator = self._evaluator

        def get_material() -> dict[str, Any]:
            position = Position.from_records(game.get_pieces())
            return merge_imbalance(original_get_material(), position, evaluator)

        game.get_material = get_material  # type: ignore[method-assign]
        setattr(game, PATCHED_MARKER, True)
        logger.debug("Patched get_material on %r with %r", game, evaluator)

        reload = getattr(game, "reload", None)
        if callable(reload):
            reload()

        return True

    def install_all(self, games: Iterable[Game]) -> int:
        """Patch every game in *games*; return how many were newly patched."""
        patched = sum(1 for game in games if self.install(game))
        if patched:
            logger.info("Patched %d game(s)", patched)
        return patched
