import logging
import subprocess
import sys
import unittest
from pathlib import Path

import anagrams
from anagrams.utils.logger import get_logger

PROJECT_ROOT = Path(__file__).resolve().parents[1]

EMBEDDING_APP = """
import logging
before = list(logging.getLogger().handlers)
import anagrams
from anagrams import DictionaryIndex, SentenceAnagrammer
SentenceAnagrammer(DictionaryIndex(["a", "b"])).sentence_anagrams(["ab"])
assert logging.getLogger().handlers == before, logging.getLogger().handlers
logging.basicConfig(level=logging.INFO, format="APP %(name)s %(message)s")
DictionaryIndex(["a"])
"""


class LibraryLoggingTests(unittest.TestCase):
    def test_import_leaves_root_logger_to_the_application(self) -> None:
        completed = subprocess.run(
            [sys.executable, "-c", EMBEDDING_APP],
            cwd=PROJECT_ROOT,
            capture_output=True,
            text=True,
            check=False,
        )
        self.assertEqual(completed.returncode, 0, completed.stderr)
        self.assertIn("APP anagrams.data.dictionary Indexed 1 words into 1 profiles", completed.stderr)
        self.assertNotIn(" | INFO    | ", completed.stderr)

    def test_package_logger_has_null_handler(self) -> None:
        package_logger = logging.getLogger(anagrams.__name__)
        self.assertTrue(
            any(isinstance(handler, logging.NullHandler) for handler in package_logger.handlers)
        )

    def test_get_logger_names(self) -> None:
        self.assertEqual(get_logger().name, "anagrams")
        self.assertEqual(get_logger("anagrams.engine.solver").name, "anagrams.engine.solver")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
