"""Main solver module: seed the store, expand every level, rank the results."""

import sys
from collections.abc import Iterable
from concurrent.futures import ProcessPoolExecutor
from pathlib import Path
from threading import Event
from time import time
from typing import TextIO

from anagrams.letters import Query
from anagrams.models import SolveReport
from anagrams.report import (
    write_bucket_counts,
    write_config,
    write_header,
    write_results,
    write_stats,
)
from anagrams.solver.config import SolverConfig
from anagrams.solver.config import config as default_config
from anagrams.solver.engine import CombinationEngine
from anagrams.solver.min_part import resolve_min_part
from anagrams.solver.parallel import get_executor
from anagrams.solver.ranking import rank
from anagrams.store import WordStore
from anagrams.util import int_comma, safe_filename, time_str


def solve_store(
    store: WordStore,
    *,
    seeded: int,
    solver_config: SolverConfig | None = None,
    executor: ProcessPoolExecutor | None = None,
    cancel: Event | None = None,
    out: TextIO | None = None,
) -> SolveReport:
    """Expand a seeded store and rank its full-length bucket.

    Args:
        store (WordStore): A store already seeded with dictionary words.
        seeded (int): Number of words accepted while seeding (reported only).
        solver_config (SolverConfig | None): Settings; the module default if None.
        executor (ProcessPoolExecutor | None): Worker pool for parallel expansion.
        cancel (Event | None): Cancellation flag checked between length levels.
        out (TextIO | None): Stream for progress diagnostics.  If None, nothing is written.
    """
    solver_config = solver_config or default_config
    min_part = resolve_min_part(solver_config, store)
    if out is not None:
        write_header(store, min_part, out=out)

    engine = CombinationEngine(
        store,
        min_part,
        executor=executor,
        chunk_size=solver_config.chunk_size,
        cancel=cancel,
    )
    stats = engine.solve()
    if out is not None:
        write_stats(stats, out=out)

    return SolveReport(
        query=store.query.text,
        letters=store.query.letters,
        seeded=seeded,
        stats=stats,
        candidates=len(store.bucket(store.max_length)),
        answers=rank(store),
    )


def find_anagrams(
    query: Query,
    candidates: Iterable[str],
    *,
    solver_config: SolverConfig | None = None,
    executor: ProcessPoolExecutor | None = None,
    cancel: Event | None = None,
    out: TextIO | None = None,
) -> SolveReport:
    """Find and rank the multi-word anagrams of `query` among `candidates`.

    With `fold_case` configured, the query and every candidate are lower-cased first.

    Raises:
        CandidateSourceUnavailable: If `candidates` fails to produce the dictionary.
        SearchCancelled: If `cancel` is set during the search.
    """
    solver_config = solver_config or default_config
    if solver_config.fold_case:
        if not query.fold_case:
            query = Query(query.text, fold_case=True)
        candidates = (word.lower() for word in candidates)
    store = WordStore(query, score_exponent=solver_config.score_exponent)
    seeded = store.seed(candidates)
    return solve_store(
        store,
        seeded=seeded,
        solver_config=solver_config,
        executor=executor,
        cancel=cancel,
        out=out,
    )


def run(
    query_text: str,
    *,
    solver_config: SolverConfig | None = None,
    out: TextIO | None = None,
    dump: bool = False,
    dump_words: bool = False,
    limit: int | None = None,
) -> SolveReport:
    """Run the solver for one query, reading the configured dictionary.

    Diagnostics go to `out`, or to a per-query log file when `log_dir` is configured.  The
    ranked answers always go to `out`.

    Args:
        query_text (str): The letters to find anagrams for.
        solver_config (SolverConfig | None): Settings; the module default if None.
        out (TextIO | None): Output stream; stdout if None.
        dump (bool): Write the bucket sizes after solving.
        dump_words (bool): Also write every bucket entry (implies `dump`).
        limit (int | None): Write at most this many answers.

    Raises:
        EmptyQuery: If the query has no letters.
        CandidateSourceUnavailable: If the dictionary cannot be read.
    """
    solver_config = solver_config or default_config
    if out is None:
        out = sys.stdout
    query = Query(query_text, fold_case=solver_config.fold_case)
    dump = dump or dump_words

    if solver_config.log_dir is None:
        report = solve_one(query, solver_config, logf=out, dump=dump, dump_words=dump_words)
    else:
        logfile = Path(solver_config.log_dir) / f"{safe_filename(query.text)}.log"
        print(f"Log file: {logfile}", file=out)
        logfile.parent.mkdir(parents=True, exist_ok=True)
        with open(logfile, "w", encoding="utf-8") as logf:
            try:
                report = solve_one(
                    query, solver_config, logf=logf, dump=dump, dump_words=dump_words
                )
            except KeyboardInterrupt:
                print("Solver interrupted by user.", file=logf, flush=True)
                raise
            write_results(report, out=logf)

    write_results(report, out=out, limit=limit)
    return report


def solve_one(
    query: Query,
    solver_config: SolverConfig,
    *,
    logf: TextIO,
    dump: bool = False,
    dump_words: bool = False,
) -> SolveReport:
    """Seed from the configured dictionary and solve, logging progress to `logf`."""
    write_config(solver_config, out=logf)

    start_time = time()
    store = WordStore(query, score_exponent=solver_config.score_exponent)
    seeded = store.seed_file(solver_config.word_list_path, fold_case=solver_config.fold_case)
    print(
        f"Seeded {int_comma(seeded)} words from {solver_config.word_list_path} "
        f"in {time_str(time() - start_time)}",
        file=logf,
        flush=True,
    )

    if solver_config.max_workers > 1:
        with get_executor(
            n_workers=solver_config.max_workers, query_letters=query.letters
        ) as executor:
            try:
                report = solve_store(
                    store,
                    seeded=seeded,
                    solver_config=solver_config,
                    executor=executor,
                    out=logf,
                )
            except BaseException:
                executor.shutdown(wait=False, cancel_futures=True)
                raise
    else:
        report = solve_store(store, seeded=seeded, solver_config=solver_config, out=logf)

    if dump:
        write_bucket_counts(store, out=logf, words=dump_words)
    return report
