"""Constants shared across the schematic engine."""
from __future__ import annotations

from datetime import datetime


# ============================================================================
# Grid alphabet
# ============================================================================
BLANK = "."
GEAR_GLYPH = "*"

# Part values are unsigned 32-bit
MAX_PART_VALUE = 2**32 - 1


# ============================================================================
# Receipts
# ============================================================================
RECEIPTS_FILENAME = "receipts.jsonl"
DEFAULT_RUNS_ROOT = "runs"


def default_receipts_dir() -> str:
    """Return runs/YYYY-MM-DD for today."""
    date_str = datetime.now().strftime("%Y-%m-%d")
    return f"{DEFAULT_RUNS_ROOT}/{date_str}"
