"""Writing diagnostics and results to a text stream."""

from pprint import pprint
from typing import TextIO

from anagrams.models import SolveReport, SolveStats, SplitStats
from anagrams.solver.config import SolverConfig
from anagrams.store import WordStore
from anagrams.util import int_comma, time_str


def write_header(store: WordStore, min_part: int, *, out: TextIO) -> None:
    """Announce the query and the range of lengths that will be combined."""
    query = store.query
    print(
        f"Finding anagram for word '{query}' (letters [{query.letters}]), "
        f"length range [{min_part}-{store.max_length}].",
        file=out,
        flush=True,
    )


def write_config(solver_config: SolverConfig, *, out: TextIO) -> None:
    print("Solver config:", file=out, flush=True)
    pprint(solver_config.model_dump(), stream=out, width=100)


def write_split(split: SplitStats, *, out: TextIO) -> None:
    print(
        f"* permute into list[{split.length}] -> list[{split.left_length}] x "
        f"list[{split.right_length}] = {int_comma(split.left_size)} * "
        f"{int_comma(split.right_size)} = {int_comma(split.pairs)} combinations "
        f"({int_comma(split.accepted)} kept)",
        file=out,
        flush=True,
    )


def write_stats(stats: SolveStats, *, out: TextIO) -> None:
    """Write one line per split followed by the totals."""
    for level in stats.levels:
        for split in level.splits:
            write_split(split, out=out)
    print(f"Total iterations: {int_comma(stats.iterations)}", file=out, flush=True)
    print(f"Time taken: {time_str(stats.elapsed)}", file=out, flush=True)


def write_bucket_counts(store: WordStore, *, out: TextIO, words: bool = False) -> None:
    """Dump the size of every bucket, and optionally its contents."""
    print("Current word list counts:", file=out)
    for length, bucket in enumerate(store.buckets):
        print(f"* Scores[{length}]: {int_comma(len(bucket))}", file=out)
        if words:
            for text in sorted(bucket):
                print(f"  * {text}", file=out)
    out.flush()


def write_results(report: SolveReport, *, out: TextIO, limit: int | None = None) -> None:
    """Write the ranked answers, best first.

    Args:
        report (SolveReport): The finished solve.
        out (TextIO): Destination stream.
        limit (int | None): Write at most this many answers.  If None, write all of them.
    """
    print("", file=out)
    print(f"Found {int_comma(report.candidates)} possible anagrams.", file=out)
    print(f"Found {int_comma(len(report.answers))} answers.", file=out)
    answers = report.answers if limit is None else report.answers[:limit]
    for answer in answers:
        print(f" * {answer.text} [score: {answer.score}]", file=out)
    if limit is not None and len(report.answers) > limit:
        print(f" ... and {int_comma(len(report.answers) - limit)} more", file=out)
    out.flush()
