"""Partial-reveal hint selection."""

from __future__ import annotations

import math

from ..core.constants import VOWELS
from ..core.models import HintResult


def _has_vowel(text: str) -> bool:
    return any(char.upper() in VOWELS for char in text)


def select_hint(word: str, num_letters: int) -> HintResult:
    """Pick the ``num_letters``-long window of ``word`` to reveal.

    The window closest to the centre of the word wins. For windows of two or
    more letters, any window containing a vowel beats every window without one.
    Distances are compared strictly, so the leftmost window wins exact ties.
    Counts below one are treated as one.
    """

    num_letters = max(1, num_letters)
    length = len(word)
    if num_letters >= length:
        return HintResult(text=word.upper(), start_index=0)

    prefer_vowels = num_letters >= 2
    centre = (length - num_letters) / 2
    best_start = 0
    best_distance = math.inf
    found_vowel = False

    for start in range(length - num_letters + 1):
        distance = abs(start - centre)
        if prefer_vowels and _has_vowel(word[start:start + num_letters]):
            if not found_vowel or distance < best_distance:
                found_vowel = True
                best_start, best_distance = start, distance
        elif not found_vowel and distance < best_distance:
            best_start, best_distance = start, distance

    return HintResult(
        text=word[best_start:best_start + num_letters].upper(),
        start_index=best_start,
    )
