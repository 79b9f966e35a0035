#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Schematic - Receipts
====================

Every solve leaves a receipt: the input hash, the schematic statistics,
both answers and the timing. Receipts are appended as JSON lines.
"""

import hashlib
import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Dict, Optional

from .config import RECEIPTS_FILENAME, default_receipts_dir
from .invariants import SchematicStats

# =============================================================================
# Receipt Dataclass
# =============================================================================

@dataclass
class Receipt:
    """Record of one solve."""
    input_sha: str
    stats: SchematicStats
    part1: int
    part2: int
    timing_ms: float

    def to_record(self) -> Dict:
        record = asdict(self)
        record["stats"]["shape"] = list(self.stats.shape)
        return record


# =============================================================================
# Hashing
# =============================================================================

def text_sha(text: str) -> str:
    """SHA-256 of the raw input text."""
    return hashlib.sha256(text.encode()).hexdigest()


# =============================================================================
# Receipt Logging
# =============================================================================

def log_receipt(record: Dict, out_dir: Optional[str] = None) -> Path:
    """
    Append a receipt record to <out_dir>/receipts.jsonl.

    Args:
        record: Dictionary with receipt data
        out_dir: Output directory (default: runs/YYYY-MM-DD)

    Returns:
        Path of the receipts file
    """
    if out_dir is None:
        out_dir = default_receipts_dir()

    Path(out_dir).mkdir(parents=True, exist_ok=True)
    receipt_path = Path(out_dir) / RECEIPTS_FILENAME

    with open(receipt_path, "a") as f:
        f.write(json.dumps(record, sort_keys=True) + "\n")
    return receipt_path
