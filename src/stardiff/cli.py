"""Command-line host for running the change transform over JSON lines.

Usage
-----
    stardiff snapshots.jsonl
    some-producer | stardiff --look-back --format structured

Each non-empty input line is one snapshot record. Each produced
notification is written to stdout as one line.
"""

from __future__ import annotations

import argparse
import contextlib
import logging
import sys
from collections.abc import Iterator, Sequence
from typing import Any, BinaryIO

from stardiff.config import TransformConfig
from stardiff.exceptions import StarDiffError
from stardiff.ingestion.codec import OutputFormat
from stardiff.state.policy import ColdStart, ReportedValue
from stardiff.transform import ChangeTransform, Record


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="stardiff",
        description="Emit a notification whenever a repository's star or fork count changes.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("rb"),
        default=None,
        help="JSON-lines file of snapshots (default: stdin)",
    )
    parser.add_argument(
        "--look-back",
        action="store_true",
        help="Use the first line as the starting baseline instead of processing it",
    )
    parser.add_argument("--format", choices=[f.value for f in OutputFormat], help="Output payload shape")
    parser.add_argument("--report", choices=[r.value for r in ReportedValue], help="Report new or previous values")
    parser.add_argument("--cold-start", choices=[c.value for c in ColdStart], help="Initial baseline posture")
    parser.add_argument(
        "--ignore-empty",
        action="store_true",
        default=None,
        help="Ignore snapshots where both counters are zero",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def _records(stream: BinaryIO) -> Iterator[Record]:
    # Lines stay bytes so undecodable input surfaces as a snapshot decode error.
    for line in stream:
        line = line.strip()
        if line:
            yield Record(key=None, value=line)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    overrides: dict[str, Any] = {}
    if args.format is not None:
        overrides["output_format"] = args.format
    if args.report is not None:
        overrides["reported_value"] = args.report
    if args.cold_start is not None:
        overrides["cold_start"] = args.cold_start
    if args.ignore_empty is not None:
        overrides["ignore_empty_snapshots"] = args.ignore_empty

    source = contextlib.nullcontext(sys.stdin.buffer) if args.input is None else args.input
    try:
        with source as stream:
            transform = ChangeTransform(TransformConfig.from_env(**overrides))
            transform.init()

            records = _records(stream)
            if args.look_back:
                first = next(records, None)
                if first is not None:
                    transform.look_back(first)

            for output in transform.process(records):
                sys.stdout.write(output.value.decode("utf-8") + "\n")
                sys.stdout.flush()
    except StarDiffError as exc:
        print(f"stardiff: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
