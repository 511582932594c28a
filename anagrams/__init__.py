"""Sentence anagram search over a fixed word dictionary.

This package exposes the public API surface via:

- ``anagrams.data.dictionary.DictionaryIndex``: words grouped by letter profile.
- ``anagrams.engine.anagrams.SentenceAnagrammer``: word and sentence anagram queries.
- ``anagrams.data.loader`` helpers: reading a word list from disk.
"""

import logging

from .data.dictionary import DictionaryIndex, build_index
from .data.loader import DictionaryConfig, load_index, load_words
from .engine.anagrams import SearchConfig, SentenceAnagrammer, sentence_anagrams, word_anagrams

__all__ = [
    "DictionaryConfig",
    "DictionaryIndex",
    "SearchConfig",
    "SentenceAnagrammer",
    "build_index",
    "load_index",
    "load_words",
    "sentence_anagrams",
    "word_anagrams",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
