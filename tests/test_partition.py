import unittest

from anagrams.core.exceptions import ProfileContractError
from anagrams.engine.partition import _check_consistency, find_partitions, iter_partitions
from anagrams.engine.profiles import merge, word_profile

A1 = (("a", 1),)
A2 = (("a", 2),)
A3 = (("a", 3),)


class PartitionSearchTests(unittest.TestCase):
    def test_empty_target_has_one_empty_partition(self) -> None:
        self.assertEqual(find_partitions([A1], ()), [()])
        self.assertEqual(find_partitions([], ()), [()])

    def test_results_follow_universe_order(self) -> None:
        self.assertEqual(
            find_partitions([A1, A2], A3),
            [(A1, A1, A1), (A1, A2), (A2, A1)],
        )
        self.assertEqual(
            find_partitions([A2, A1], A3),
            [(A2, A1), (A1, A2), (A1, A1, A1)],
        )

    def test_uncoverable_target_has_no_partitions(self) -> None:
        self.assertEqual(find_partitions([A2], A3), [])
        self.assertEqual(find_partitions([], A1), [])

    def test_every_partition_sums_to_target(self) -> None:
        target = word_profile("yesman")
        universe = [word_profile(w) for w in ["en", "as", "my", "man", "yes", "men", "say", "sane"]]
        partitions = find_partitions(universe, target)

        self.assertEqual(len(partitions), 12)
        self.assertEqual(len(set(partitions)), len(partitions))
        for partition in partitions:
            self.assertEqual(merge(partition), target)

    def test_limit_stops_search_and_warns(self) -> None:
        with self.assertLogs("anagrams.engine.partition", level="WARNING"):
            partitions = find_partitions([A1, A2], A3, limit=2)
        self.assertEqual(partitions, [(A1, A1, A1), (A1, A2)])

    def test_limit_equal_to_total_does_not_warn(self) -> None:
        with self.assertNoLogs("anagrams.engine.partition", level="WARNING"):
            partitions = find_partitions([A1, A2], A3, limit=3)
        self.assertEqual(partitions, [(A1, A1, A1), (A1, A2), (A2, A1)])

    def test_iter_partitions_is_lazy(self) -> None:
        iterator = iter_partitions([A1], (("a", 500),))
        self.assertEqual(len(next(iterator)), 500)

    def test_long_targets_do_not_hit_recursion_limit(self) -> None:
        self.assertEqual(len(find_partitions([A1], (("a", 5000),))[0]), 5000)

    def test_empty_profile_in_universe_is_rejected(self) -> None:
        with self.assertRaises(ProfileContractError):
            find_partitions([(), A1], A1)

    def test_consistency_check_rejects_mismatched_path(self) -> None:
        with self.assertRaises(ProfileContractError):
            _check_consistency((A3, A1, ()), (A1, A1))
        _check_consistency((A3, A2, ()), (A1, A2))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
