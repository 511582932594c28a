"""Sentence anagram driver.

Ties the pipeline together for one query:

1. compute the profile of the input sentence;
2. collect the dictionary-backed sub-profiles of it (the search universe);
3. enumerate every ordered partition of the profile over that universe;
4. expand each partition into word sequences.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Set, Tuple

from ..core.models import Partition, Sentence, Word
from ..data.dictionary import DictionaryIndex
from ..utils.logger import get_logger
from .assembler import expand_partition
from .combinations import dictionary_universe
from .partition import find_partitions
from .profiles import profile_to_string, sentence_profile
from .solver import count_ordered_partitions, enumerate_profile_multisets, has_solution


LOGGER = get_logger(__name__)


@dataclass
class SearchConfig:
    """Knobs for a sentence anagram query.

    ``max_partitions`` caps how many partitions the search collects before it
    stops; ``None`` means exhaustive. The solver settings only affect the
    CP-SAT helpers (:meth:`SentenceAnagrammer.has_anagram` and
    :meth:`SentenceAnagrammer.estimate_partition_count`).
    """

    max_partitions: Optional[int] = None
    deduplicate: bool = True
    solver_timeout: float = 30.0
    solver_max_solutions: Optional[int] = None

    def __post_init__(self) -> None:
        if self.max_partitions is not None and self.max_partitions <= 0:
            raise ValueError("max_partitions must be positive or None")
        if self.solver_timeout <= 0:
            raise ValueError("solver_timeout must be positive")


@dataclass
class PartitionEstimate:
    """Ordered partition count from CP-SAT; a lower bound unless ``complete``."""

    count: int
    multisets: int
    complete: bool


class SentenceAnagrammer:
    """Answers anagram queries against a shared, read-only dictionary index."""

    def __init__(self, index: DictionaryIndex, config: Optional[SearchConfig] = None) -> None:
        self.index = index
        self.config = config or SearchConfig()

    def word_anagrams(self, word: Word) -> List[Word]:
        return self.index.word_anagrams(word)

    def partitions(self, sentence: Sentence) -> List[Partition]:
        """Return the profile partitions behind :meth:`sentence_anagrams`."""

        target = sentence_profile(sentence)
        if not target:
            return [()]
        universe = dictionary_universe(self.index, target)
        return find_partitions(universe, target, limit=self.config.max_partitions)

    def sentence_anagrams(self, sentence: Sentence) -> List[Sentence]:
        """Return every dictionary sentence using exactly the letters of ``sentence``.

        Different word orders are different anagrams. The empty sentence has
        exactly one anagram, itself.
        """

        partitions = self.partitions(sentence)
        results: List[Sentence] = []
        seen: Set[Tuple[Word, ...]] = set()
        for partition in partitions:
            for candidate in expand_partition(self.index, partition):
                if self.config.deduplicate:
                    key = tuple(candidate)
                    if key in seen:
                        continue
                    seen.add(key)
                results.append(candidate)

        LOGGER.info(
            "Sentence %r: %d partitions, %d anagrams",
            " ".join(sentence),
            len(partitions),
            len(results),
        )
        return results

    def count_sentence_anagrams(self, sentence: Sentence) -> int:
        return len(self.sentence_anagrams(sentence))

    def has_anagram(self, sentence: Sentence) -> bool:
        """Check with CP-SAT whether any anagram sentence exists."""

        target = sentence_profile(sentence)
        universe = dictionary_universe(self.index, target) if target else ()
        return has_solution(universe, target, timeout=self.config.solver_timeout)

    def estimate_partitions(self, sentence: Sentence) -> PartitionEstimate:
        """Count the ordered partitions the search would produce, via CP-SAT.

        Only the unordered multisets are enumerated; their orderings are
        counted combinatorially. Useful to size a query before running it.
        When the solver limits cut enumeration short the count is a lower
        bound and ``complete`` is False.
        """

        target = sentence_profile(sentence)
        universe = dictionary_universe(self.index, target) if target else ()
        enumeration = enumerate_profile_multisets(
            universe,
            target,
            timeout=self.config.solver_timeout,
            max_solutions=self.config.solver_max_solutions,
        )
        estimate = PartitionEstimate(
            count=count_ordered_partitions(enumeration.solutions),
            multisets=len(enumeration.solutions),
            complete=enumeration.complete,
        )
        LOGGER.debug(
            "Profile %r: %d multisets, %d ordered partitions (complete=%s)",
            profile_to_string(target),
            estimate.multisets,
            estimate.count,
            estimate.complete,
        )
        return estimate

    def estimate_partition_count(self, sentence: Sentence) -> int:
        return self.estimate_partitions(sentence).count


def sentence_anagrams(
    index: DictionaryIndex,
    sentence: Sentence,
    config: Optional[SearchConfig] = None,
) -> List[Sentence]:
    return SentenceAnagrammer(index, config).sentence_anagrams(sentence)


def word_anagrams(index: DictionaryIndex, word: Word) -> List[Word]:
    return index.word_anagrams(word)


__all__ = ["PartitionEstimate", "SearchConfig", "SentenceAnagrammer", "sentence_anagrams", "word_anagrams"]
