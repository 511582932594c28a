"""Value types shared by the anagram engine."""

from __future__ import annotations

from typing import List, Tuple

Word = str
Sentence = List[Word]

# Sorted by letter, one entry per letter, every count strictly positive.
Profile = Tuple[Tuple[str, int], ...]

# Ordered dictionary-backed profiles whose sum is the query profile.
Partition = Tuple[Profile, ...]

EMPTY_PROFILE: Profile = ()
EMPTY_PARTITION: Partition = ()
