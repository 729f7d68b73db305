"""Exceptions raised by the anagram solver."""

from os import PathLike


class AnagramError(Exception):
    """Base class for all anagram solver errors."""


class CandidateSourceUnavailable(AnagramError):
    """The dictionary (candidate word source) could not be opened or read."""

    def __init__(self, path: str | PathLike[str], reason: str | None = None) -> None:
        self.path = str(path)
        """Path of the dictionary that could not be read."""

        self.reason = reason
        """Short description of the underlying failure, if known."""

        message = f"Word list unavailable: {self.path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class EmptyQuery(AnagramError, ValueError):
    """The query contains no letters once spaces are removed."""

    def __init__(self, query: str) -> None:
        self.query = query
        """The raw query string as supplied."""

        super().__init__(f"Query has no letters: {query!r}")


class SearchCancelled(AnagramError):
    """The search was cancelled between two length levels."""

    def __init__(self, last_length: int) -> None:
        self.last_length = last_length
        """Last fully expanded length level (-1 if none)."""

        super().__init__(f"Search cancelled after length {last_length}")
