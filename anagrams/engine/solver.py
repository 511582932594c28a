"""CP-SAT reasoning over unordered profile multisets using OR-Tools.

Partition search enumerates *ordered* partitions, whose number grows with
the factorial of the partition length. The underlying question of which
profiles (with multiplicity) add up to the target is much smaller, and is
a plain integer program: one count variable per universe profile and one
linear equality per letter of the target. Solving it lets callers check
feasibility or size a query before running the full enumeration.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from math import factorial
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from ortools.sat.python import cp_model

from ..core.exceptions import ProfileContractError, SolverError
from ..core.models import Profile
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

ProfileMultiset = Dict[Profile, int]


class _MultisetCollector(cp_model.CpSolverSolutionCallback):
    """Records every solution as a ``{profile: count}`` mapping."""

    def __init__(
        self,
        universe: Sequence[Profile],
        count_vars: Sequence[cp_model.IntVar],
        max_solutions: Optional[int],
    ) -> None:
        super().__init__()
        self._universe = universe
        self._count_vars = count_vars
        self._max_solutions = max_solutions
        self.solutions: List[ProfileMultiset] = []

    def on_solution_callback(self) -> None:
        chosen: ProfileMultiset = {}
        for profile, var in zip(self._universe, self._count_vars):
            value = self.value(var)
            if value:
                chosen[profile] = value
        self.solutions.append(chosen)
        if self._max_solutions is not None and len(self.solutions) >= self._max_solutions:
            self.stop_search()


def _check_universe(universe: Sequence[Profile]) -> None:
    if any(not profile for profile in universe):
        raise ProfileContractError("search universe must not contain the empty profile")


def _build_model(universe: Sequence[Profile], target: Profile):
    """Return ``(model, count_vars)``, or ``None`` when infeasible by construction."""

    model = cp_model.CpModel()
    target_counts = dict(target)
    count_vars: List[cp_model.IntVar] = []
    for position, profile in enumerate(universe):
        # A profile can be used at most as often as its scarcest letter allows.
        upper = min(target_counts.get(letter, 0) // count for letter, count in profile)
        count_vars.append(model.new_int_var(0, upper, f"n_{position}"))

    for letter, needed in target:
        terms = [
            (dict(profile).get(letter, 0), var)
            for profile, var in zip(universe, count_vars)
            if letter in dict(profile)
        ]
        if not terms:
            LOGGER.debug("No universe profile covers letter %r", letter)
            return None
        model.add(sum(coeff * var for coeff, var in terms) == needed)
    return model, count_vars


@dataclass
class MultisetEnumeration:
    """Multisets found by CP-SAT and whether the enumeration ran to the end.

    ``complete`` is False when the time limit or ``max_solutions`` cut the
    search short; ``solutions`` is then only a prefix of the full answer.
    """

    solutions: List[ProfileMultiset] = field(default_factory=list)
    complete: bool = True


def enumerate_profile_multisets(
    universe: Sequence[Profile],
    target: Profile,
    timeout: float = 30.0,
    max_solutions: Optional[int] = None,
) -> MultisetEnumeration:
    """Enumerate every multiset of universe profiles summing to ``target``.

    Args:
        universe: Non-empty sub-profiles of ``target`` to choose from.
        target: Profile to cover exactly.
        timeout: Solver time limit in seconds.
        max_solutions: Stop after this many multisets.

    Returns:
        One ``{profile: count}`` mapping per solution, plus a completeness
        flag. The empty target has a single solution, the empty multiset.
    """
    _check_universe(universe)
    if not target:
        return MultisetEnumeration([{}])
    if not universe:
        return MultisetEnumeration()

    built = _build_model(universe, target)
    if built is None:
        return MultisetEnumeration()
    model, count_vars = built

    solver = cp_model.CpSolver()
    solver.parameters.max_time_in_seconds = timeout
    solver.parameters.enumerate_all_solutions = True
    solver.parameters.num_workers = 1

    collector = _MultisetCollector(universe, count_vars, max_solutions)
    status = solver.solve(model, collector)

    if status == cp_model.MODEL_INVALID:
        raise SolverError(f"CP-SAT rejected the model: {model.validate()}")
    # Without an objective, OPTIMAL means every solution was visited.
    complete = status in (cp_model.OPTIMAL, cp_model.INFEASIBLE)
    if not complete:
        LOGGER.warning(
            "CP-SAT: enumeration incomplete after %.2fs (%d multisets found)",
            solver.wall_time,
            len(collector.solutions),
        )
    LOGGER.info(
        "CP-SAT: %d profiles, %d multisets (status=%s)",
        len(universe),
        len(collector.solutions),
        solver.status_name(status),
    )
    return MultisetEnumeration(collector.solutions, complete)


def solve_profile_multisets(
    universe: Sequence[Profile],
    target: Profile,
    timeout: float = 30.0,
    max_solutions: Optional[int] = None,
) -> List[ProfileMultiset]:
    """Like :func:`enumerate_profile_multisets`, returning only the multisets."""

    return enumerate_profile_multisets(universe, target, timeout, max_solutions).solutions


def has_solution(universe: Sequence[Profile], target: Profile, timeout: float = 30.0) -> bool:
    """Return True when at least one multiset of ``universe`` sums to ``target``."""
    _check_universe(universe)
    if not target:
        return True
    if not universe:
        return False

    built = _build_model(universe, target)
    if built is None:
        return False
    model, _ = built

    solver = cp_model.CpSolver()
    solver.parameters.max_time_in_seconds = timeout
    status = solver.solve(model)
    if status == cp_model.MODEL_INVALID:
        raise SolverError(f"CP-SAT rejected the model: {model.validate()}")
    if status == cp_model.UNKNOWN:
        LOGGER.warning("CP-SAT: feasibility undecided after %.1fs", timeout)
    return status in (cp_model.OPTIMAL, cp_model.FEASIBLE)


def ordered_arrangements(multiset: Mapping[Profile, int]) -> int:
    """Number of distinct orderings of ``multiset`` (a multinomial coefficient)."""

    total = factorial(sum(multiset.values()))
    for count in multiset.values():
        total //= factorial(count)
    return total


def count_ordered_partitions(multisets: Iterable[Mapping[Profile, int]]) -> int:
    """Number of ordered partitions represented by ``multisets``."""

    return sum(ordered_arrangements(multiset) for multiset in multisets)


def multiset_of(partition: Iterable[Profile]) -> ProfileMultiset:
    """Collapse an ordered partition into its ``{profile: count}`` multiset."""

    return dict(Counter(partition))


__all__ = [
    "MultisetEnumeration",
    "ProfileMultiset",
    "count_ordered_partitions",
    "enumerate_profile_multisets",
    "has_solution",
    "multiset_of",
    "ordered_arrangements",
    "solve_profile_multisets",
]
