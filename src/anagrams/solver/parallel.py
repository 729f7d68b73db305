"""Implementation of the parallel level expansion: task distribution and worker management.

A length level is expanded by splitting the cross product of each split into chunks of the
left bucket.  Every chunk is combined in a worker process and merged back into the
destination bucket.  `combine_parallel` returns only after all its chunks are merged, which
keeps levels strictly ordered.
"""

import os
from collections.abc import Iterator, Mapping
from concurrent.futures import ProcessPoolExecutor, as_completed
from itertools import islice
from multiprocessing import Value
from multiprocessing.sharedctypes import Synchronized

from anagrams.solver.worker import init_worker_globals, worker_task
from anagrams.store import Bucket


def get_executor(*, n_workers: int | None = None, query_letters: str) -> ProcessPoolExecutor:
    """Get a ProcessPoolExecutor whose workers know the query letters.

    Args:
        n_workers (int | None): Number of worker processes to create.  If None,
            defaults to number of CPU cores minus one.
        query_letters (str): Canonical letters of the query, passed to every worker once.

    Returns:
        A ProcessPoolExecutor instance for worker processes.
    """
    worker_ctr: Synchronized[int] = Value("i", 0)

    cpus = os.cpu_count() or 1  # Fallback to 1 if os.cpu_count() is None
    if n_workers is None:
        n_workers = max(1, cpus - 1)  # Leave one core free
    if n_workers > cpus:
        raise ValueError(
            f"Requested number of workers ({n_workers}) exceeds CPU count ({cpus})",
        )
    return ProcessPoolExecutor(
        max_workers=n_workers,
        initializer=init_worker_globals,
        initargs=(worker_ctr, query_letters),
    )


def chunk_bucket(bucket: Mapping[str, int], chunk_size: int) -> Iterator[Bucket]:
    """Split a bucket into dicts of at most `chunk_size` entries."""
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    items = iter(bucket.items())
    while chunk := dict(islice(items, chunk_size)):
        yield chunk


def combine_parallel(
    executor: ProcessPoolExecutor,
    left: Mapping[str, int],
    right: Mapping[str, int],
    dest: Bucket,
    *,
    chunk_size: int,
) -> int:
    """Combine `left` with `right` in worker processes, merging the results into `dest`.

    Args:
        executor (ProcessPoolExecutor): Pool created by `get_executor`.
        left: Left bucket, distributed across tasks in chunks.
        right: Right bucket, sent whole with every task.
        dest (Bucket): Destination bucket, updated in place.
        chunk_size (int): Number of left entries per task.

    Returns:
        The number of distinct combinations accepted.
    """
    right_copy = dict(right)
    futures = [
        executor.submit(worker_task, chunk, right_copy)
        for chunk in chunk_bucket(left, chunk_size)
    ]
    # Chunks of a bucket paired with itself can produce the same key twice
    split_combined: Bucket = {}
    try:
        for future in as_completed(futures):
            split_combined.update(future.result())
    except BaseException:
        for future in futures:
            future.cancel()
        raise
    dest.update(split_combined)
    return len(split_combined)
