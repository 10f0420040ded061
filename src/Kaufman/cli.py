"""
Command-line scorer.

  kaufman <FEN>                   print the imbalance of one position
  kaufman < positions.fen         one FEN per line on stdin
  kaufman --summary startpos      full material summary as JSON
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Iterable
from typing import TextIO

from Kaufman.evaluate import PROFILES, SOURCE_OF_TRUTH, KaufmanEvaluator
from Kaufman.material import material_summary
from Kaufman.position import Position

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_BAD_FEN = 2


class Scorer:
    def __init__(
        self,
        evaluator: KaufmanEvaluator,
        summary: bool = False,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ):
        self._evaluator = evaluator
        self._summary = summary
        self._out = out or sys.stdout
        self._err = err or sys.stderr

    def score(self, fen: str) -> bool:
        """Print the result for *fen*. Returns False if the FEN was rejected."""
        try:
            position = Position.from_fen(fen)
        except ValueError as exc:
            logger.debug("Rejected FEN %r: %s", fen, exc)
            print(f"error: {exc}", file=self._err)
            return False

        if self._summary:
            result = material_summary(position, self._evaluator).to_dict()
            print(json.dumps(result), file=self._out)
        else:
            print(f"{self._evaluator.evaluate(position):g}", file=self._out)
        return True

    def run(self, lines: Iterable[str]) -> int:
        status = EXIT_OK
        for line in lines:
            fen = line.strip()
            if not fen or fen.startswith("#"):
                continue
            if not self.score(fen):
                status = EXIT_BAD_FEN
        return status


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kaufman", description="Kaufman material-imbalance scorer"
    )
    parser.add_argument(
        "fen",
        nargs="?",
        help="Position as FEN, board FEN or 'startpos'. Reads stdin if omitted.",
    )
    parser.add_argument(
        "--profile",
        choices=sorted(PROFILES),
        default=SOURCE_OF_TRUTH,
        help=f"Scoring profile (default: {SOURCE_OF_TRUTH})",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print the material summary as JSON instead of the imbalance",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    evaluator = KaufmanEvaluator(args.profile)
    logger.debug("Using %r", evaluator)

    scorer = Scorer(evaluator, summary=args.summary)
    if args.fen is not None:
        return scorer.run([args.fen])
    return scorer.run(sys.stdin)
