"""Worker-process side of the parallel level expansion."""

from dataclasses import dataclass
from multiprocessing.sharedctypes import Synchronized

from setproctitle import setproctitle

from anagrams.solver.utils import combine
from anagrams.store import Bucket


@dataclass(kw_only=True)
class WorkerState:
    """Global state maintained by each worker process."""

    worker_idx: int
    """Index of the worker process."""

    query_letters: str
    """Canonical letters of the query being solved."""

    n_tasks: int = 0
    """Number of tasks completed by this worker."""


worker_state: WorkerState | None = None
"""Global state for each worker process."""


def init_worker_globals(worker_ctr: "Synchronized[int]", query_letters: str) -> None:
    """Initialize global variables for worker processes.

    Args:
        worker_ctr (Synchronized[int]): Shared counter for workers.
        query_letters (str): Canonical letters of the query.
    """
    global worker_state  # noqa: PLW0603
    with worker_ctr.get_lock():
        # Get and set the shared worker counter atomically, using the obtained value
        # as the worker index
        worker_idx = worker_ctr.value
        worker_ctr.value += 1

    worker_state = WorkerState(worker_idx=worker_idx, query_letters=query_letters)
    setproctitle(f"anagrams: worker {worker_idx}")


def worker_task(left: Bucket, right: Bucket) -> Bucket:
    """Combine a chunk of the left bucket with the whole right bucket.

    Args:
        left (Bucket): A slice of the left bucket.
        right (Bucket): The complete right bucket.

    Returns:
        The accepted combinations and their scores.
    """
    if not worker_state:
        raise RuntimeError("Worker state not initialized. Call init_worker_globals first.")

    combined = combine(left, right, worker_state.query_letters)
    worker_state.n_tasks += 1
    return combined
