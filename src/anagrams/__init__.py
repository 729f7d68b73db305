"""Multi-word anagram finder.

Finds every combination of dictionary words that uses exactly the letters of a query, and
ranks the combinations so that those built from longer words come first.  Words are kept in
buckets by length; longer combinations are built by pairing entries of shorter buckets,
dropping pairs whose letters do not fit within the query.
"""

import argparse
import sys
from collections.abc import Sequence

from pydantic import ValidationError

from anagrams.errors import CandidateSourceUnavailable, EmptyQuery
from anagrams.solver import solver
from anagrams.solver.config import config as solver_config


def positive_int(value: str) -> int:
    """argparse type for integers >= 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="anagrams",
        description="Find multi-word anagrams of LETTERS, best first.",
    )
    parser.add_argument("letters", help="Letters to find anagrams for (spaces are ignored).")
    parser.add_argument(
        "-d",
        "--dictionary",
        help=f"Dictionary file, one word per line (default: {solver_config.word_list_path}).",
    )
    parser.add_argument(
        "-m",
        "--min-part",
        type=positive_int,
        help="Minimum number of letters in either half of a combination.",
    )
    parser.add_argument(
        "-x",
        "--exhaustive",
        action="store_true",
        help="Allow words of any length (min part 1). Slow for long queries.",
    )
    parser.add_argument(
        "--strategy",
        choices=("heuristic", "estimate"),
        help="How to choose the min part when --min-part is not given.",
    )
    parser.add_argument(
        "--max-iterations",
        type=positive_int,
        help="Iteration budget for the 'estimate' strategy.",
    )
    parser.add_argument(
        "-j",
        "--workers",
        type=positive_int,
        help="Number of worker processes (1 runs serially).",
    )
    parser.add_argument(
        "--fold-case", action="store_true", help="Lower-case the query and the dictionary."
    )
    parser.add_argument("--dump", action="store_true", help="Print bucket sizes after solving.")
    parser.add_argument(
        "--dump-words", action="store_true", help="Print every bucket entry after solving."
    )
    parser.add_argument("--limit", type=positive_int, help="Print at most this many answers.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the anagram finder."""
    args = build_parser().parse_args(argv)

    updates: dict[str, object] = {}
    if args.dictionary is not None:
        updates["word_list_path"] = args.dictionary
    if args.min_part is not None:
        updates["min_part"] = args.min_part
    if args.exhaustive:
        updates["force_exhaustive"] = True
    if args.strategy is not None:
        updates["min_part_strategy"] = args.strategy
    if args.max_iterations is not None:
        updates["max_iterations"] = args.max_iterations
    if args.workers is not None:
        updates["max_workers"] = args.workers
    if args.fold_case:
        updates["fold_case"] = True
    run_config = solver_config.model_copy(update=updates)

    try:
        solver.run(
            args.letters,
            solver_config=run_config,
            dump=args.dump,
            dump_words=args.dump_words,
            limit=args.limit,
        )
    except EmptyQuery as e:
        print(f"EmptyQuery: {e} (dictionary: {run_config.word_list_path})", file=sys.stderr)
        return 1
    except CandidateSourceUnavailable as e:
        print(f"CandidateSourceUnavailable: {e} (query: {args.letters!r})", file=sys.stderr)
        return 1
    except (ValidationError, ValueError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("Solver interrupted by user.", file=sys.stderr)
        return 130
    return 0
