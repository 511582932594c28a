"""CLI entrypoint for sentence anagram search."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict

from anagrams.data.loader import DictionaryConfig, load_index
from anagrams.engine.anagrams import SearchConfig, SentenceAnagrammer
from anagrams.utils.logger import configure_logging
from anagrams.utils.pretty import print_anagrams


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find every dictionary sentence that is an anagram of the input",
    )
    parser.add_argument("sentence", nargs="*", metavar="WORD", help="Words of the input sentence")
    parser.add_argument(
        "--dictionary",
        type=Path,
        default=Path("linuxwords.txt"),
        help="Word list, one word per line (# comments and blank lines ignored)",
    )
    parser.add_argument("--word", type=str, help="Look up single-word anagrams instead")
    parser.add_argument(
        "--max-partitions",
        type=int,
        default=None,
        help="Stop the search after this many partitions (default: exhaustive)",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only report whether an anagram exists and how many partitions the search would yield",
    )
    parser.add_argument(
        "--solver-timeout",
        type=float,
        default=30.0,
        help="CP-SAT time limit in seconds for --check",
    )
    parser.add_argument(
        "--solver-max-solutions",
        type=int,
        default=None,
        help="Stop CP-SAT enumeration after this many word multisets (makes --check a lower bound)",
    )
    parser.add_argument("--json", action="store_true", help="Print JSON instead of a numbered list")
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level)

    if args.word and args.sentence:
        parser.error("--word cannot be combined with a sentence")
    if args.max_partitions is not None and args.max_partitions <= 0:
        parser.error("--max-partitions must be positive")
    if args.solver_max_solutions is not None and args.solver_max_solutions <= 0:
        parser.error("--solver-max-solutions must be positive")

    index = load_index(DictionaryConfig(path=args.dictionary))
    anagrammer = SentenceAnagrammer(
        index,
        SearchConfig(
            max_partitions=args.max_partitions,
            solver_timeout=args.solver_timeout,
            solver_max_solutions=args.solver_max_solutions,
        ),
    )

    payload: Dict[str, Any]
    if args.word:
        payload = {"word": args.word, "anagrams": anagrammer.word_anagrams(args.word)}
    elif args.check:
        estimate = anagrammer.estimate_partitions(args.sentence)
        payload = {
            "sentence": args.sentence,
            "has_anagram": anagrammer.has_anagram(args.sentence),
            "partition_count": estimate.count,
            "partition_count_complete": estimate.complete,
        }
    else:
        results = anagrammer.sentence_anagrams(args.sentence)
        if not (args.json or args.output):
            print_anagrams(results, label=" ".join(args.sentence) or "(empty sentence)")
            return
        payload = {"sentence": args.sentence, "anagrams": results}

    output_text = json.dumps(payload, ensure_ascii=False, indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    else:
        print(output_text)


if __name__ == "__main__":  # pragma: no cover
    main()
