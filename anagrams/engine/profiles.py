"""Letter-frequency profiles and their multiset arithmetic.

A profile is the canonical form of a multiset of letters: a tuple of
``(letter, count)`` pairs sorted by letter, with unique letters and strictly
positive counts. Two words or sentences are anagrams of each other exactly
when their profiles are equal.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, Iterable, Mapping

from ..core.exceptions import ProfileContractError
from ..core.models import EMPTY_PROFILE, Profile, Sentence
from ..data.normalization import fold_word


def _canonical(counts: Mapping[str, int]) -> Profile:
    return tuple(sorted((letter, count) for letter, count in counts.items() if count > 0))


def word_profile(word: str) -> Profile:
    """Return the canonical profile of ``word``, ignoring case."""

    return _canonical(Counter(fold_word(word)))


def sentence_profile(sentence: Sentence) -> Profile:
    """Return the combined profile of every word in ``sentence``."""

    return merge(word_profile(word) for word in sentence)


def merge(profiles: Iterable[Profile]) -> Profile:
    """Sum letter counts across ``profiles``; merging nothing gives ``()``."""

    totals: Dict[str, int] = {}
    for profile in profiles:
        for letter, count in profile:
            totals[letter] = totals.get(letter, 0) + count
    return _canonical(totals)


def subtract(x: Profile, y: Profile) -> Profile:
    """Remove the letters of ``y`` from ``x``.

    ``y`` must be a multiset subset of ``x``. Removing a letter ``x`` lacks,
    or more copies than ``x`` holds, raises :class:`ProfileContractError`
    instead of clamping.
    """

    remaining = dict(x)
    for letter, count in y:
        available = remaining.get(letter, 0)
        if count > available:
            raise ProfileContractError(
                f"cannot remove {count}x{letter!r} from {profile_to_string(x)!r}"
            )
        remaining[letter] = available - count
    return _canonical(remaining)


def is_subset_multiset(x: Profile, y: Profile) -> bool:
    """Return True when every letter of ``y`` is covered by ``x``."""

    available = dict(x)
    return all(count <= available.get(letter, 0) for letter, count in y)


def profile_size(profile: Profile) -> int:
    """Total number of letters in ``profile``."""

    return sum(count for _, count in profile)


def is_canonical(profile: Profile) -> bool:
    letters = [letter for letter, _ in profile]
    if any(count <= 0 for _, count in profile):
        return False
    return all(a < b for a, b in zip(letters, letters[1:]))


def profile_to_string(profile: Profile) -> str:
    """Render a profile as its sorted letters, e.g. ``(('a', 2), ('b', 1))`` -> ``"aab"``."""

    return "".join(letter * count for letter, count in profile)


__all__ = [
    "EMPTY_PROFILE",
    "is_canonical",
    "is_subset_multiset",
    "merge",
    "profile_size",
    "profile_to_string",
    "sentence_profile",
    "subtract",
    "word_profile",
]
