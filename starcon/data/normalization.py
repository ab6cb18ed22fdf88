"""Shared helpers for vocabulary word normalization."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from ..core.constants import CANVAS_SIZE, MIN_WORD_LENGTH


def clean_word(text: str) -> str:
    """Return the trimmed, upper-cased form of ``text``."""

    if not text:
        return ""
    return text.strip().upper()


def prepare_words(
    words: Iterable[str],
    min_length: int = MIN_WORD_LENGTH,
    max_length: int = CANVAS_SIZE,
) -> Tuple[List[str], List[str]]:
    """Normalize ``words`` and order them for placement.

    Returns ``(accepted, rejected)``. Accepted words are sorted longest first;
    ``sorted`` is stable so equal lengths keep their input order. Rejected
    words are the normalized entries outside ``[min_length, max_length]``.
    """

    accepted: List[str] = []
    rejected: List[str] = []
    for raw in words:
        word = clean_word(raw)
        if min_length <= len(word) <= max_length:
            accepted.append(word)
        else:
            rejected.append(word)
    accepted = sorted(accepted, key=len, reverse=True)
    return accepted, rejected


def parse_words_file(lines: Iterable[str]) -> List[str]:
    """Extract vocabulary entries from lines. Blank lines and # comments are skipped.

    Lines may carry a translation after a colon (``WORD:translation``); only the
    word side is kept.
    """
    entries: List[str] = []
    for line in lines:
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        word = line.split(":", 1)[0].strip()
        if word:
            entries.append(word)
    return entries


__all__ = ["clean_word", "prepare_words", "parse_words_file"]
