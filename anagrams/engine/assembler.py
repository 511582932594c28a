"""Expansion of profile partitions into concrete word sequences."""

from __future__ import annotations

from itertools import product
from typing import List

from ..core.models import Partition, Sentence
from ..data.dictionary import DictionaryIndex


def expand_partition(index: DictionaryIndex, partition: Partition) -> List[Sentence]:
    """Return one sentence for every choice of a word per profile.

    Word order follows the partition's profile order. A profile with no
    dictionary words makes the whole partition expand to nothing.
    """

    buckets = [index.words_with_profile(profile) for profile in partition]
    if any(not bucket for bucket in buckets):
        return []
    return [list(words) for words in product(*buckets)]


__all__ = ["expand_partition"]
