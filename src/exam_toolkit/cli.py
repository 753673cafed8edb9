"""
Command-line entry point: generate exam versions from a question bank file.

Usage:
    exam-versions bank.json -n 3 -m both
    exam-versions bank.json -n 26 -m options --json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from exam_toolkit import __version__
from exam_toolkit.core.models.versions import ShuffleMode
from exam_toolkit.core.utils.serialization import (
    BankLoadError,
    load_question_bank,
    versions_to_dict,
)
from exam_toolkit.output import render_answer_key, render_version
from exam_toolkit.versioning import (
    DEFAULT_VERSION_COUNT,
    VersionSetManager,
    answer_keys,
    clamp_version_count,
    parse_version_count,
)

logger = logging.getLogger("exam_toolkit.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exam-versions",
        description="Generate randomized exam versions with answer keys",
    )
    parser.add_argument("bank", type=Path, help="Path to question bank JSON")
    parser.add_argument(
        "-n", "--count", default=DEFAULT_VERSION_COUNT,
        help="Number of versions to generate (clamped to 1-26)",
    )
    parser.add_argument(
        "-m", "--mode", choices=[m.value for m in ShuffleMode], default=ShuffleMode.BOTH.value,
        help="What to shuffle: both, questions, or options",
    )
    parser.add_argument("--json", action="store_true", help="Print versions as JSON")
    parser.add_argument("--no-key", action="store_true", help="Do not derive answer keys")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configure_logging(args: argparse.Namespace) -> None:
    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", stream=sys.stderr)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args)

    try:
        bank, settings = load_question_bank(args.bank)
    except BankLoadError as e:
        logger.error(str(e))
        return 1

    if not len(bank):
        logger.error(f"Question bank is empty: {args.bank}")
        return 1

    count = clamp_version_count(args.count)
    if parse_version_count(args.count) != count:
        logger.warning(f"Version count {args.count!r} clamped to {count}")

    manager = VersionSetManager()
    versions = manager.generate(bank, count, ShuffleMode(args.mode))
    keys = None if args.no_key else answer_keys(versions, bank)

    if args.json:
        payload = versions_to_dict(versions, keys, settings)
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return 0

    for version in versions:
        print(render_version(version, settings))
        print()
        if keys is not None:
            print(render_answer_key(version, settings))
            print()

    return 0


if __name__ == "__main__":
    sys.exit(main())
