"""Profile-keyed dictionary index."""

from __future__ import annotations

from collections import defaultdict
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Tuple

from ..core.models import Profile, Word
from ..engine.profiles import word_profile
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class DictionaryIndex:
    """Groups dictionary words by their letter profile.

    The index is built once from an ordered word sequence and is read-only
    afterwards, so a single instance can be shared by any number of queries.
    Buckets keep the original dictionary order, and profiles are iterated in
    the order in which their first word appeared.
    """

    def __init__(self, words: Iterable[Word]) -> None:
        buckets: Dict[Profile, List[Word]] = defaultdict(list)
        word_count = 0
        for word in words:
            buckets[word_profile(word)].append(word)
            word_count += 1

        self._buckets: Mapping[Profile, Tuple[Word, ...]] = MappingProxyType(
            {profile: tuple(group) for profile, group in buckets.items()}
        )
        self._positions: Mapping[Profile, int] = MappingProxyType(
            {profile: position for position, profile in enumerate(self._buckets)}
        )
        self._word_count = word_count
        LOGGER.info(
            "Indexed %d words into %d profiles", self._word_count, len(self._buckets)
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def words_with_profile(self, profile: Profile) -> List[Word]:
        return list(self._buckets.get(profile, ()))

    def word_anagrams(self, word: Word) -> List[Word]:
        """Return every dictionary word sharing ``word``'s profile.

        A word counts as its own anagram, so ``word`` is part of the result
        whenever it is in the dictionary.
        """

        return self.words_with_profile(word_profile(word))

    def profiles(self) -> Iterator[Profile]:
        return iter(self._buckets)

    def position(self, profile: Profile) -> int:
        """First-appearance rank of ``profile``; raises ``KeyError`` if unknown."""

        return self._positions[profile]

    @property
    def word_count(self) -> int:
        return self._word_count

    def __contains__(self, profile: object) -> bool:
        return profile in self._buckets

    def __len__(self) -> int:
        return len(self._buckets)

    def __repr__(self) -> str:
        return f"DictionaryIndex(words={self._word_count}, profiles={len(self._buckets)})"


def build_index(words: Iterable[Word]) -> DictionaryIndex:
    """Group ``words`` by profile, preserving dictionary order within buckets."""

    return DictionaryIndex(words)


def words_with_profile(index: DictionaryIndex, profile: Profile) -> List[Word]:
    return index.words_with_profile(profile)


def word_anagrams_of(index: DictionaryIndex, word: Word) -> List[Word]:
    return index.word_anagrams(word)


__all__ = ["DictionaryIndex", "build_index", "words_with_profile", "word_anagrams_of"]
