"""The bucketed word store.

Words and word combinations are kept in one bucket per letter count.  Bucket `L` maps the
text of each known combination with exactly `L` letters to its score.  Only combinations
whose letters fit within the query are ever stored.
"""

from collections.abc import Iterable
from os import PathLike

from anagrams.letters import Query, canonicalize, letter_count
from anagrams.wordlist import read_candidates

Bucket = dict[str, int]
"""Mapping from combination text to score."""


class WordStore:
    """Candidate words and combinations bucketed by letter count."""

    def __init__(self, query: Query, *, score_exponent: int = 2) -> None:
        """Create an empty store for the given query.

        Args:
            query (Query): The query whose letters bound every stored entry.
            score_exponent (int): A single word of length `n` scores `n ** score_exponent`.
        """
        if score_exponent < 0:
            raise ValueError(f"score_exponent must be non-negative, got {score_exponent}")
        self.query = query
        self.score_exponent = score_exponent
        self.buckets: list[Bucket] = [{} for _ in range(query.length + 1)]
        """Element [L] holds the combinations with `L` letters."""

    @property
    def max_length(self) -> int:
        """Length of the longest bucket, i.e. the query length."""
        return self.query.length

    def word_score(self, length: int) -> int:
        """Score of a single word with `length` letters."""
        return length**self.score_exponent

    def bucket(self, length: int) -> Bucket:
        """Return the (live) bucket for `length` letters."""
        if not 0 <= length <= self.max_length:
            raise IndexError(f"No bucket for length {length} (max {self.max_length})")
        return self.buckets[length]

    def seed(self, candidates: Iterable[str]) -> int:
        """Fill the buckets with the candidate words that fit within the query.

        Errors raised by `candidates` (e.g. `CandidateSourceUnavailable`) propagate.

        Args:
            candidates: Iterable of candidate words.

        Returns:
            The number of candidates accepted.  Duplicates count each time they are seen
            but are stored once.
        """
        accepted = 0
        for word in candidates:
            length = letter_count(word)
            if length > self.max_length:
                continue
            if not self.query.admits(canonicalize(word)):
                continue
            self.buckets[length][word] = self.word_score(length)
            accepted += 1
        return accepted

    def seed_file(self, path: str | PathLike[str], *, fold_case: bool = False) -> int:
        """Seed the store from a dictionary file.  See `read_candidates`."""
        return self.seed(read_candidates(path, fold_case=fold_case))

    def sizes(self) -> list[int]:
        """Number of entries in each bucket, indexed by length."""
        return [len(bucket) for bucket in self.buckets]

    def __len__(self) -> int:
        return sum(self.sizes())
