"""Case folding shared by dictionary indexing and queries."""

from __future__ import annotations


def fold_word(text: str) -> str:
    """Return ``text`` lower-cased, keeping every character.

    Non-alphabetic characters are not stripped: they take part in letter
    counting like any other character. Validating the word list is the
    job of whoever supplies it.
    """

    if not text:
        return ""
    return text.lower()


__all__ = ["fold_word"]
