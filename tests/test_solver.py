import unittest

from anagrams import DictionaryIndex, SearchConfig, SentenceAnagrammer
from anagrams.core.exceptions import ProfileContractError
from anagrams.engine.solver import (
    count_ordered_partitions,
    enumerate_profile_multisets,
    has_solution,
    multiset_of,
    ordered_arrangements,
    solve_profile_multisets,
)

A1 = (("a", 1),)
A2 = (("a", 2),)
A3 = (("a", 3),)
B1 = (("b", 1),)


class MultisetSolverTests(unittest.TestCase):
    def test_enumerates_every_multiset(self) -> None:
        multisets = solve_profile_multisets([A1, A2], A3)
        self.assertCountEqual(multisets, [{A1: 3}, {A1: 1, A2: 1}])
        self.assertEqual(count_ordered_partitions(multisets), 3)

    def test_empty_target_and_empty_universe(self) -> None:
        self.assertEqual(solve_profile_multisets([A1], ()), [{}])
        self.assertEqual(solve_profile_multisets([], A1), [])
        self.assertTrue(has_solution([], ()))
        self.assertFalse(has_solution([], A1))

    def test_uncovered_letter_is_infeasible(self) -> None:
        target = (("a", 1), ("b", 1))
        self.assertEqual(solve_profile_multisets([A1], target), [])
        self.assertFalse(has_solution([A1], target))
        self.assertTrue(has_solution([A1, B1], target))

    def test_max_solutions_stops_enumeration(self) -> None:
        multisets = solve_profile_multisets([A1, A2, A3], A3, max_solutions=1)
        self.assertEqual(len(multisets), 1)

    def test_ordered_arrangements(self) -> None:
        self.assertEqual(ordered_arrangements({}), 1)
        self.assertEqual(ordered_arrangements({A1: 3}), 1)
        self.assertEqual(ordered_arrangements({A1: 2, B1: 1}), 3)
        self.assertEqual(multiset_of((A1, B1, A1)), {A1: 2, B1: 1})


    def test_empty_profile_in_universe_is_rejected(self) -> None:
        with self.assertRaises(ProfileContractError):
            solve_profile_multisets([(), A1], A1)
        with self.assertRaises(ProfileContractError):
            has_solution([(), A1], A1)

    def test_enumeration_reports_completeness(self) -> None:
        full = enumerate_profile_multisets([A1, A2], A3)
        self.assertTrue(full.complete)
        self.assertEqual(len(full.solutions), 2)

        cut = enumerate_profile_multisets([A1, A2, A3], A3, max_solutions=1)
        self.assertFalse(cut.complete)
        self.assertEqual(len(cut.solutions), 1)

        self.assertTrue(enumerate_profile_multisets([A1], ()).complete)
        self.assertTrue(enumerate_profile_multisets([A1], B1).complete)


class AnagrammerSolverTests(unittest.TestCase):
    def setUp(self) -> None:
        self.anagrammer = SentenceAnagrammer(
            DictionaryIndex(["I", "love", "you", "You", "olive", "Ylo", "cat"]),
            SearchConfig(solver_timeout=10.0),
        )

    def test_has_anagram(self) -> None:
        self.assertTrue(self.anagrammer.has_anagram(["I", "love", "you"]))
        self.assertTrue(self.anagrammer.has_anagram([]))
        self.assertFalse(self.anagrammer.has_anagram(["xyz"]))

    def test_estimate_matches_partition_search(self) -> None:
        sentence = ["I", "love", "you"]
        partitions = self.anagrammer.partitions(sentence)
        self.assertEqual(len(partitions), 8)
        self.assertEqual(self.anagrammer.estimate_partition_count(sentence), len(partitions))

    def test_capped_estimate_is_flagged_incomplete(self) -> None:
        index = DictionaryIndex(["en", "as", "my", "man", "yes", "men", "say", "sane"])
        sentence = ["yes", "man"]

        full = SentenceAnagrammer(index).estimate_partitions(sentence)
        self.assertEqual((full.count, full.multisets, full.complete), (12, 4, True))

        capped = SentenceAnagrammer(index, SearchConfig(solver_max_solutions=1)).estimate_partitions(sentence)
        self.assertFalse(capped.complete)
        self.assertEqual(capped.multisets, 1)
        self.assertLess(capped.count, full.count)

    def test_multisets_match_partition_search(self) -> None:
        index = DictionaryIndex(["en", "as", "my", "man", "yes", "men", "say", "sane"])
        anagrammer = SentenceAnagrammer(index)
        sentence = ["yes", "man"]
        partitions = anagrammer.partitions(sentence)
        universe = sorted({profile for partition in partitions for profile in partition})
        target = (("a", 1), ("e", 1), ("m", 1), ("n", 1), ("s", 1), ("y", 1))

        multisets = solve_profile_multisets(universe, target)
        self.assertCountEqual(
            multisets,
            [dict(m) for m in {tuple(sorted(multiset_of(p).items())) for p in partitions}],
        )


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
