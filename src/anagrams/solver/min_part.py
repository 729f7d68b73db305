"""Choosing the minimum sub-word length (`min_part`).

A larger `min_part` skips splits with short parts, which bounds the combinatorial blow-up
at the cost of never finding anagrams that contain short words.
"""

from anagrams.solver.config import SolverConfig
from anagrams.solver.utils import splits
from anagrams.store import WordStore


def heuristic_min_part(query_length: int, *, offset: int = 3, floor: int = 3) -> int:
    """Half the query length minus `offset`, but never less than `floor`."""
    return max((query_length >> 1) - offset, floor)


def estimate_iterations(store: WordStore, min_part: int) -> int:
    """Estimate the number of pairs a solve would try, from the current bucket sizes.

    Buckets filled during the solve itself are not accounted for, so this is a lower bound
    when called on a freshly seeded store.  The store is not modified.
    """
    sizes = store.sizes()
    iterations = 0
    for length in range(store.max_length + 1):
        for left_length, right_length in splits(length, min_part):
            iterations += sizes[left_length] * sizes[right_length]
    return iterations


def estimate_min_part(store: WordStore, max_iterations: int) -> int:
    """Smallest `min_part` whose estimated iteration count stays within `max_iterations`.

    Candidates are tried from `query_length - 1` downwards; the search stops at the first
    one over budget.
    """
    min_part = store.max_length - 1
    while min_part > 0:
        if estimate_iterations(store, min_part) > max_iterations:
            break
        min_part -= 1
    return min_part + 1


def resolve_min_part(solver_config: SolverConfig, store: WordStore) -> int:
    """Pick the `min_part` to solve with.

    `force_exhaustive` wins over an explicit `min_part`, which wins over the configured
    strategy.
    """
    if solver_config.force_exhaustive:
        return 1
    if solver_config.min_part is not None:
        if solver_config.min_part < 1:
            raise ValueError(f"min_part must be at least 1, got {solver_config.min_part}")
        return solver_config.min_part
    if solver_config.min_part_strategy == "estimate":
        return estimate_min_part(store, solver_config.max_iterations)
    return heuristic_min_part(
        store.max_length,
        offset=solver_config.min_part_offset,
        floor=solver_config.min_part_floor,
    )
