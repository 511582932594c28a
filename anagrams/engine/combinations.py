"""Sub-profile enumeration and the per-query search universe."""

from __future__ import annotations

from itertools import product
from typing import Set, Tuple

from ..core.models import Profile
from ..data.dictionary import DictionaryIndex
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def all_sub_profiles(profile: Profile) -> Set[Profile]:
    """Return every sub-profile of ``profile``.

    Each letter independently takes any count from 0 to its count in
    ``profile``; letters chosen at 0 are omitted. The result contains the empty
    profile and ``profile`` itself, and has ``prod(count + 1)`` members.
    """

    choices = [range(count + 1) for _, count in profile]
    letters = [letter for letter, _ in profile]
    return {
        tuple((letter, count) for letter, count in zip(letters, counts) if count)
        for counts in product(*choices)
    }


def dictionary_universe(index: DictionaryIndex, target: Profile) -> Tuple[Profile, ...]:
    """Non-empty sub-profiles of ``target`` that have at least one dictionary word.

    Ordered by first appearance in the dictionary so that result order is
    reproducible across runs.
    """

    subs = all_sub_profiles(target)
    universe = tuple(
        sorted((p for p in subs if p and p in index), key=index.position)
    )
    LOGGER.debug(
        "Universe: %d of %d sub-profiles are dictionary-backed", len(universe), len(subs)
    )
    return universe


__all__ = ["all_sub_profiles", "dictionary_universe"]
