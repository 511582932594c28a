"""Custom exception hierarchy for sentence anagram search."""


class AnagramError(Exception):
    """Base exception for anagram search failures."""


class DictionaryLoadError(AnagramError):
    """Raised when the word list cannot be read."""


class ProfileContractError(AnagramError, AssertionError):
    """Raised when profile arithmetic is called outside its preconditions.

    This always indicates a bug in the caller: a well-formed partition search
    never subtracts a profile that is not contained in the leftover.
    """


class SolverError(AnagramError):
    """Raised when the CP-SAT model is rejected by the solver."""
