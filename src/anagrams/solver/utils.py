"""Utility functions shared by the serial and parallel combination paths."""

from collections.abc import Iterator, Mapping

from anagrams.letters import canonicalize, contains
from anagrams.store import Bucket


def splits(length: int, min_part: int) -> Iterator[tuple[int, int]]:
    """Enumerate the ways to split `length` into two parts of at least `min_part` letters.

    Each unordered pair is produced once, longer part first.

    Args:
        length (int): Target length.
        min_part (int): Minimum length of either part (at least 1).

    Yields:
        `(left_length, right_length)` tuples with `left_length >= right_length`.
    """
    assert min_part >= 1, f"min_part must be positive, got {min_part}"
    for left_length in range(length - min_part, min_part - 1, -1):
        right_length = length - left_length
        if right_length > left_length:
            break
        yield left_length, right_length


def combine_key(a: str, b: str) -> str:
    """Join two parts into a combination with all of their words in sorted order.

    Every way of building the same multiset of words yields the same key, whichever split
    or pairing order produced it.
    """
    return " ".join(sorted(a.split(" ") + b.split(" ")))


def combine(left: Mapping[str, int], right: Mapping[str, int], query_letters: str) -> Bucket:
    """Pair every entry of `left` with every entry of `right`.

    Pairs whose letters do not fit within the query are dropped: they can never grow into
    a complete anagram.  When `left` and `right` are the same bucket an entry is also paired
    with itself; the containment check decides whether the query has letters for both.

    Args:
        left: Bucket (text -> score) of the first part.
        right: Bucket (text -> score) of the second part.
        query_letters (str): Canonical letters of the query.

    Returns:
        Mapping from combination text to the summed score of its parts.
    """
    combined: Bucket = {}
    right_items = [(b, canonicalize(b), b_score) for b, b_score in right.items()]
    for a, a_score in left.items():
        a_letters = canonicalize(a)
        for b, b_letters, b_score in right_items:
            if not contains("".join(sorted(a_letters + b_letters)), query_letters):
                continue
            combined[combine_key(a, b)] = a_score + b_score
    return combined
