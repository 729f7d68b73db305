"""The combination engine: builds longer word combinations out of shorter ones.

Bucket `L` is filled by pairing every entry of bucket `a` with every entry of bucket `b`
for each split `a + b == L`.  Buckets are processed in increasing length order, so every
bucket read while filling bucket `L` is already complete.
"""

from concurrent.futures import ProcessPoolExecutor
from threading import Event
from time import time

from anagrams.errors import SearchCancelled
from anagrams.models import LevelStats, SolveStats, SplitStats
from anagrams.solver.parallel import combine_parallel
from anagrams.solver.utils import combine, splits
from anagrams.store import WordStore


class CombinationEngine:
    """Fills the buckets of a seeded `WordStore` with multi-word combinations."""

    def __init__(
        self,
        store: WordStore,
        min_part: int,
        *,
        executor: ProcessPoolExecutor | None = None,
        chunk_size: int = 2_000,
        cancel: Event | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            store (WordStore): A seeded store; its buckets are filled in place.
            min_part (int): Minimum length of either part of a split.
            executor (ProcessPoolExecutor | None): Worker pool created by
                `anagrams.solver.parallel.get_executor`.  If None, levels expand serially.
            chunk_size (int): Left-bucket entries per worker task (parallel mode only).
            cancel (Event | None): Checked before each length level; when set, `solve`
                raises `SearchCancelled`.
        """
        if min_part < 1:
            raise ValueError(f"min_part must be at least 1, got {min_part}")
        self.store = store
        self.min_part = min_part
        self.executor = executor
        self.chunk_size = chunk_size
        self.cancel = cancel
        self.stats = SolveStats(min_part=min_part)
        """Counters accumulated by `expand` and `solve`."""

    def expand(self, length: int) -> int:
        """Fill bucket `length` from the pairs of shorter buckets.

        Splits where either bucket is empty are skipped.  If `length < 2 * min_part` there
        are no splits and nothing happens.

        Returns:
            The number of combinations created (pairs accepted).
        """
        dest = self.store.bucket(length)
        level = LevelStats(length=length)

        for left_length, right_length in splits(length, self.min_part):
            left = self.store.bucket(left_length)
            right = self.store.bucket(right_length)
            if not left or not right:
                continue

            split = SplitStats(
                length=length,
                left_length=left_length,
                right_length=right_length,
                left_size=len(left),
                right_size=len(right),
            )
            if self.executor is None:
                combined = combine(left, right, self.store.query.letters)
                split.accepted = len(combined)
                dest.update(combined)
            else:
                split.accepted = combine_parallel(
                    self.executor, left, right, dest, chunk_size=self.chunk_size
                )
            level.splits.append(split)

        level.bucket_size = len(dest)
        self.stats.levels.append(level)
        return level.created

    def solve(self) -> SolveStats:
        """Expand every length level, shortest first.

        Raises:
            SearchCancelled: If the cancel event is set between two levels.
        """
        start = time()
        try:
            for length in range(self.store.max_length + 1):
                if self.cancel is not None and self.cancel.is_set():
                    raise SearchCancelled(length - 1)
                self.expand(length)
        finally:
            self.stats.elapsed += time() - start
        return self.stats
