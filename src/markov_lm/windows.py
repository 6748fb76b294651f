from __future__ import annotations

from typing import Iterable, Iterator

from .exceptions import InsufficientInputError


def sliding_windows(chars: Iterable[str], n: int) -> Iterator[tuple[str, str]]:
    """Yield ``(window, next_char)`` pairs over a character stream.

    The first ``n`` characters form the initial window; every following
    character is yielded together with the window that precedes it, after
    which the window slides forward by one. Raises InsufficientInputError
    (on the first ``next()``) when the stream holds fewer than ``n`` characters.
    """

    if n <= 0:
        raise ValueError("n must be >= 1")

    it = iter(chars)
    head: list[str] = []
    for c in it:
        head.append(c)
        if len(head) == n:
            break
    if len(head) < n:
        raise InsufficientInputError(n, len(head))

    window = "".join(head)
    for c in it:
        yield window, c
        window = window[1:] + c


def trailing_window(text: str, n: int) -> str | None:
    """Return the last ``n`` characters of ``text``, or None if it is too short."""

    if n <= 0:
        raise ValueError("n must be >= 1")
    if len(text) < n:
        return None
    return text[-n:]
