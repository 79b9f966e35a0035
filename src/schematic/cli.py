#!/usr/bin/env python3
"""
Solve an engine schematic and print both answers.

Usage:
    schematic input.txt
    schematic input.txt --receipts runs/today
    cat input.txt | schematic
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .errors import SchematicError
from .logging_config import setup_logging
from .parser import decode_input
from .receipts import log_receipt
from .solver import format_answers, solve


def read_input(path: str) -> bytes:
    if path == "-":
        return sys.stdin.buffer.read()
    return Path(path).read_bytes()


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Sum part numbers and gear ratios of an engine schematic")
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Path to the schematic text file (default: stdin)"
    )
    parser.add_argument(
        "--receipts",
        type=str,
        default=None,
        help="Append a JSONL receipt to this directory"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging on stderr"
    )

    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, stream=sys.stderr)

    try:
        data = read_input(args.input)
    except OSError as e:
        parser.error(f"cannot read {args.input}: {e.strerror}")

    try:
        result = solve(decode_input(data))
    except SchematicError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(format_answers(result))

    if args.receipts is not None:
        log_receipt(result.receipt.to_record(), out_dir=args.receipts)

    return 0


if __name__ == "__main__":
    sys.exit(main())
