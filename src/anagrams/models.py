"""Result and statistics records produced by the solver."""

from dataclasses import dataclass, field
from typing import NamedTuple


class RankedAnagram(NamedTuple):
    """A ranked anagram: the combination text and its score."""

    text: str
    score: int


@dataclass(kw_only=True)
class SplitStats:
    """Counters for one split (pairing of two bucket lengths) of a target length."""

    length: int
    """Target length being filled."""

    left_length: int
    """Length of the longer (or equal) part."""

    right_length: int
    """Length of the shorter (or equal) part."""

    left_size: int
    """Number of entries in the left bucket."""

    right_size: int
    """Number of entries in the right bucket."""

    accepted: int = 0
    """Number of pairs that passed the containment check."""

    @property
    def pairs(self) -> int:
        """Number of pairs tried (size of the cross product)."""
        return self.left_size * self.right_size


@dataclass(kw_only=True)
class LevelStats:
    """Counters for one expanded length level."""

    length: int
    splits: list[SplitStats] = field(default_factory=list)
    bucket_size: int = 0
    """Size of the bucket after the level was expanded."""

    @property
    def iterations(self) -> int:
        return sum(split.pairs for split in self.splits)

    @property
    def created(self) -> int:
        return sum(split.accepted for split in self.splits)


@dataclass(kw_only=True)
class SolveStats:
    """Counters for a complete solve."""

    min_part: int
    """Minimum sub-word length used for every split."""

    levels: list[LevelStats] = field(default_factory=list)
    elapsed: float = 0.0
    """Wall-clock seconds spent expanding."""

    @property
    def iterations(self) -> int:
        """Total number of pairs tried over all levels."""
        return sum(level.iterations for level in self.levels)

    @property
    def created(self) -> int:
        """Total number of combinations created over all levels."""
        return sum(level.created for level in self.levels)


@dataclass(kw_only=True)
class SolveReport:
    """Everything a host needs to report one query."""

    query: str
    letters: str
    seeded: int
    """Number of dictionary words accepted into the store."""

    stats: SolveStats
    candidates: int
    """Number of entries in the full-length bucket before the exact-anagram filter."""

    answers: list[RankedAnagram]
