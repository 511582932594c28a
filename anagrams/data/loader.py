"""Word list loading for the dictionary index."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List

from ..core.exceptions import DictionaryLoadError
from ..utils.logger import get_logger
from .dictionary import DictionaryIndex


LOGGER = get_logger(__name__)


@dataclass
class DictionaryConfig:
    """Configuration for reading a plain-text word list."""

    path: Path | str
    encoding: str = "utf-8"
    min_length: int = 1
    skip_comments: bool = True
    strip_whitespace: bool = True


def load_words(config: DictionaryConfig) -> List[str]:
    """Read one word per line, keeping file order.

    Blank lines are always skipped; lines starting with ``#`` are skipped when
    ``skip_comments`` is set.
    """

    source = Path(config.path)
    if not source.exists():
        raise DictionaryLoadError(f"Missing word list: {source}")

    try:
        text = source.read_text(encoding=config.encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise DictionaryLoadError(f"Cannot read word list {source}: {exc}") from exc

    words: List[str] = []
    skipped = 0
    for line in text.splitlines():
        word = line.strip() if config.strip_whitespace else line
        if not word.strip():
            continue
        if config.skip_comments and word.lstrip().startswith("#"):
            continue
        if len(word) < config.min_length:
            skipped += 1
            continue
        words.append(word)

    LOGGER.info("Loaded %d words from %s (%d below min length)", len(words), source, skipped)
    return words


def load_index(config: DictionaryConfig) -> DictionaryIndex:
    return DictionaryIndex(load_words(config))


__all__ = ["DictionaryConfig", "load_index", "load_words"]
