"""Anagram solver configuration."""

from typing import Literal

from dotenv import find_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv(usecwd=True) or None


class SolverConfig(BaseSettings):
    """Configuration settings for the anagram solver."""

    word_list_path: str = "data/words"
    """Dictionary file, one candidate word per line. Default: data/words."""

    min_part: int | None = Field(default=None, ge=1)
    """Minimum length of either half of a split. If None (default), chosen by
    `min_part_strategy`.
    """

    force_exhaustive: bool = False
    """Force the minimum sub-word length to 1 (complete but slow). Default: False."""

    min_part_strategy: Literal["heuristic", "estimate"] = "heuristic"
    """How to choose the minimum sub-word length when `min_part` is not set.

    "heuristic": half the query length minus `min_part_offset`, at least `min_part_floor`.
    "estimate": the smallest value whose estimated iteration count stays within
    `max_iterations`.
    """

    min_part_offset: int = 3
    """Subtracted from half the query length by the heuristic strategy. Default: 3."""

    min_part_floor: int = Field(default=3, ge=1)
    """Lower bound for the heuristic strategy. Default: 3."""

    max_iterations: int = Field(default=100_000, ge=0)
    """Iteration budget for the "estimate" strategy. Default: 100000."""

    score_exponent: int = Field(default=2, ge=0)
    """A word of length n scores n ** score_exponent. Default: 2."""

    fold_case: bool = False
    """Lower-case the query and the dictionary before matching. Default: False."""

    max_workers: int = Field(default=1, ge=1)
    """Number of worker processes used to expand each level. 1 (default) runs serially."""

    chunk_size: int = Field(default=2_000, ge=1)
    """Number of left-bucket words handed to a worker per task. Default: 2000."""

    log_dir: str | None = None
    """Directory for per-query log files. If None (default), diagnostics go to stdout."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="forbid",
    )


config = SolverConfig()
