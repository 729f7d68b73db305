from collections.abc import Callable, Iterable
from pathlib import Path

import pytest

from anagrams.letters import Query
from anagrams.store import WordStore

EAT_WORDS = ["eat", "ate", "tea", "a", "e", "t"]
DORMITORY_WORDS = ["dirty", "room", "dormitory", "dirt", "my", "or"]


@pytest.fixture
def write_words(tmp_path: Path) -> Callable[[Iterable[str]], Path]:
    """Write a dictionary file and return its path."""

    def _write(words: Iterable[str], name: str = "words.txt") -> Path:
        path = tmp_path / name
        path.write_text("\n".join(words) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def eat_store() -> WordStore:
    store = WordStore(Query("eat"))
    store.seed(EAT_WORDS)
    return store
