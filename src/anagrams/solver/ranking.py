"""Ranking of the complete anagrams."""

from sortedcontainers import SortedList

from anagrams.models import RankedAnagram
from anagrams.store import WordStore


def rank_key(item: RankedAnagram) -> tuple[int, str]:
    """Highest score first; equal scores in alphabetical order."""
    return (-item.score, item.text)


def rank(store: WordStore) -> list[RankedAnagram]:
    """Return the true anagrams in the full-length bucket, best first.

    An entry of the full-length bucket only fits within the query letters; it is kept if
    it uses them exactly.
    """
    query = store.query
    answers = SortedList(key=rank_key)
    for text, score in store.bucket(store.max_length).items():
        if query.is_anagram(text):
            answers.add(RankedAnagram(text, score))
    return list(answers)
