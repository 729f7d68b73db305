"""Module for reading the dictionary of candidate words."""

from collections.abc import Iterator
from os import PathLike
from pathlib import Path

from anagrams.errors import CandidateSourceUnavailable


def read_candidates(path: str | PathLike[str], *, fold_case: bool = False) -> Iterator[str]:
    """Yield the candidate words of a dictionary file, one per non-blank line.

    Nothing is read until the first word is requested; an unavailable file raises on that
    first request, before any word is produced.

    Args:
        path: Path to a UTF-8 text file with one word per line.
        fold_case: Whether to lower-case each word.

    Raises:
        CandidateSourceUnavailable: If the file is missing or cannot be read.
    """
    word_list_path = Path(path)
    if not word_list_path.is_file():
        raise CandidateSourceUnavailable(word_list_path, "not a file")

    try:
        with word_list_path.open("r", encoding="utf-8") as f:
            for line in f:
                word = line.strip()
                if not word:
                    continue
                yield word.lower() if fold_case else word
    except (OSError, UnicodeDecodeError) as e:
        raise CandidateSourceUnavailable(word_list_path, str(e)) from e
