"""Pretty-print helpers for anagram results."""

from __future__ import annotations

import sys
from typing import List, Sequence

from ..core.models import Partition, Profile, Sentence


def format_profile(profile: Profile) -> str:
    """Render ``(('a', 2), ('t', 1))`` as ``a2 t1``."""

    if not profile:
        return "(empty)"
    return " ".join(f"{letter}{count}" for letter, count in profile)


def format_sentence(sentence: Sentence) -> str:
    if not sentence:
        return "(empty sentence)"
    return " ".join(sentence)


def format_partition(partition: Partition) -> str:
    return " | ".join(format_profile(profile) for profile in partition)


def print_anagrams(results: Sequence[Sentence], *, label: str | None = None, stream=None) -> None:
    """Print one anagram per line, numbered, followed by a total."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    width = len(str(len(results)))
    lines: List[str] = [
        f"{number:>{width}}. {format_sentence(sentence)}"
        for number, sentence in enumerate(results, start=1)
    ]
    for line in lines:
        print(line, file=stream)
    print(f"{len(results)} anagram(s)", file=stream)
