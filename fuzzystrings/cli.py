import argparse
import json
import logging
import sys

from .core import FuzzyStrings
from .errors import FuzzyStringsError
from .formats import match_to_dict
from .options import ByCategory, ByScore, ByUniformMax, CATEGORIES

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fuzzystrings",
        description="Count the edits between a pattern and candidate words",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  fuzzystrings pattern pattren patterned chicken
  fuzzystrings pattern papadums --deletions 1 --substitutions 5
  fuzzystrings pattern pattren --score 1 --use-transpositions --json
        """,
    )

    parser.add_argument("pattern", help="Base pattern to compare against")
    parser.add_argument("candidates", nargs="+", help="Candidate strings")

    parser.add_argument(
        "--no-transpositions",
        action="store_true",
        help="Skip transposition detection",
    )
    parser.add_argument(
        "--use-transpositions",
        action="store_true",
        help="Score with transpositions instead of substitutions",
    )

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--score",
        type=int,
        default=None,
        help="Match when the total score is at most N (default: 3)",
    )
    mode.add_argument(
        "--max",
        type=int,
        default=None,
        help="Match when no single operation count exceeds N",
    )
    for name in CATEGORIES:
        parser.add_argument(
            f"--{name}",
            type=int,
            default=None,
            help=f"Match when {name} are at most N (ignored with --score/--max)",
        )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print one JSON object per candidate",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output (show debug information)",
    )
    return parser


def build_options(args: argparse.Namespace):
    """Translate flags into a MatchOptions variant: score > max > per-category."""
    if args.score is not None:
        return ByScore(args.score, args.use_transpositions)
    if args.max is not None:
        return ByUniformMax(args.max)
    thresholds = {name: getattr(args, name) for name in CATEGORIES}
    if any(v is not None for v in thresholds.values()):
        return ByCategory(**thresholds)
    return ByScore(use_transpositions=args.use_transpositions)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
    else:
        logging.basicConfig(level=logging.INFO, format="%(message)s")

    try:
        options = build_options(args)
    except FuzzyStringsError as e:
        logger.error(f"Error: {e}")
        return 1

    fs = FuzzyStrings(args.pattern)
    status = 0

    for candidate in args.candidates:
        try:
            match = fs.compare(candidate, not args.no_transpositions)
        except FuzzyStringsError as e:
            logger.error(f"Error comparing {candidate!r}: {e}")
            status = 1
            continue

        score = match.score(args.use_transpositions)
        matched = match.is_match(options)

        if args.json:
            record = {"candidate": candidate, **match_to_dict(match),
                      "score": score, "match": matched}
            print(json.dumps(record, ensure_ascii=False))
        else:
            verdict = "match" if matched else "no-match"
            print(f"{candidate}\t{match}\tscore={score}\t{verdict}")

    return status


if __name__ == "__main__":
    sys.exit(main())
