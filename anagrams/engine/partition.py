"""Exhaustive partition search over dictionary-backed profiles.

A partition of a target profile is an ordered sequence of universe profiles
whose multiset sum is exactly the target. The search is a depth-first walk:
at each residual ("leftover") profile every universe profile contained in it
is tried in universe order, and the walk continues on the remainder. The
empty leftover closes a partition.

The walk uses an explicit stack instead of recursion, so long sentences are
not limited by the interpreter's recursion depth. Candidates are pushed in
reverse so they are popped in universe order, which keeps the output in the
same pre-order a recursive formulation would produce.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Sequence, Tuple

from ..core.exceptions import ProfileContractError
from ..core.models import EMPTY_PARTITION, Partition, Profile
from ..utils.logger import get_logger
from .profiles import is_subset_multiset, merge, profile_to_string, subtract


LOGGER = get_logger(__name__)


def iter_partitions(universe: Sequence[Profile], target: Profile) -> Iterator[Partition]:
    """Lazily yield every partition of ``target`` over ``universe``.

    ``universe`` must not contain the empty profile: every step has to consume
    at least one letter for the walk to terminate.
    """

    if any(not profile for profile in universe):
        raise ProfileContractError("search universe must not contain the empty profile")

    # Each frame holds the leftovers seen along the path (target first) and the
    # profiles chosen so far.
    stack: List[Tuple[Tuple[Profile, ...], Partition]] = [((target,), EMPTY_PARTITION)]
    while stack:
        leftovers, path = stack.pop()
        leftover = leftovers[-1]
        if not leftover:
            _check_consistency(leftovers, path)
            yield path
            continue

        candidates = [c for c in universe if is_subset_multiset(leftover, c)]
        for candidate in reversed(candidates):
            remainder = subtract(leftover, candidate)
            stack.append((leftovers + (remainder,), path + (candidate,)))


def find_partitions(
    universe: Sequence[Profile],
    target: Profile,
    limit: Optional[int] = None,
) -> List[Partition]:
    """Return every partition of ``target`` over ``universe``.

    An empty ``target`` has exactly one partition, the empty one. When
    ``limit`` is given the search stops after that many partitions, and warns
    only if at least one more partition was left unreported.
    """

    partitions: List[Partition] = []
    for partition in iter_partitions(universe, target):
        if limit is not None and len(partitions) >= limit:
            LOGGER.warning(
                "Partition search for %r stopped at limit=%d",
                profile_to_string(target),
                limit,
            )
            break
        partitions.append(partition)
    return partitions


def _check_consistency(leftovers: Tuple[Profile, ...], path: Partition) -> None:
    """Every suffix of ``path`` must sum to the leftover it was chosen for."""

    suffix_total: Profile = ()
    for depth in range(len(path) - 1, -1, -1):
        suffix_total = merge((path[depth], suffix_total))
        if suffix_total != leftovers[depth]:
            raise ProfileContractError(
                f"partition suffix sums to {profile_to_string(suffix_total)!r}, "
                f"expected {profile_to_string(leftovers[depth])!r}"
            )


__all__ = ["find_partitions", "iter_partitions"]
