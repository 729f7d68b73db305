"""Letter multisets: canonical forms of words and containment checks.

A multiset is represented by its canonical form, the word's characters with spaces
removed and sorted into ascending order.  Two sorted strings can be compared for
multiset containment with a single merge-style scan.
"""

from dataclasses import dataclass, field
from functools import lru_cache

from anagrams.errors import EmptyQuery


@lru_cache(maxsize=300_000)
def canonicalize(text: str) -> str:
    """Return the canonical multiset of `text`: its non-space characters, sorted.

    This is a hotspot while combining buckets, hence the cache.
    """
    return "".join(sorted(text.replace(" ", "")))


def contains(needle: str, haystack: str) -> bool:
    """Returns whether multiset `needle` is contained in multiset `haystack`.

    Both arguments must be canonical (sorted, space-free).  An empty needle never
    matches.

    Args:
        needle (str): Canonical letters that must be available.
        haystack (str): Canonical letters available.
    """
    if not needle:
        return False

    n_needle = len(needle)
    pos = 0
    for ch in haystack:
        if ch == needle[pos]:
            pos += 1
            if pos == n_needle:
                return True
    return False


def letter_count(text: str) -> int:
    """Number of characters in `text`, not counting spaces."""
    return len(text) - text.count(" ")


@dataclass(frozen=True)
class Query:
    """The letters to find anagrams for.

    Spaces in the query are ignored; every other character is matched literally.
    """

    text: str
    """The query as supplied (after optional case folding)."""

    fold_case: bool = False
    """Whether the query was lower-cased before deriving its letters."""

    letters: str = field(init=False)
    """Canonical multiset of the query."""

    length: int = field(init=False)
    """Number of letters in the query."""

    def __post_init__(self) -> None:
        """Derive the canonical letters, rejecting queries without any."""
        if self.fold_case:
            object.__setattr__(self, "text", self.text.lower())
        letters = canonicalize(self.text)
        if not letters:
            raise EmptyQuery(self.text)
        object.__setattr__(self, "letters", letters)
        object.__setattr__(self, "length", len(letters))

    def admits(self, word_letters: str) -> bool:
        """Returns whether the canonical letters of a word fit within the query."""
        return contains(word_letters, self.letters)

    def is_anagram(self, text: str) -> bool:
        """Returns whether `text` uses exactly the letters of the query."""
        return canonicalize(text) == self.letters

    def __str__(self) -> str:
        return self.text
