"""--debug gear ledger dump to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from gearscan.gears import GearLedger
from gearscan.scanner import ScanResult


def dump_ledger(
    ledger: GearLedger,
    result: ScanResult | None = None,
    *,
    file: TextIO = sys.stderr,
) -> None:
    """Print every gear position with its numbers to *file*."""
    file.write(f"GearLedger ({len(ledger)} positions)\n")
    for (column, row), values, ratio in ledger.ratios():
        numbers = ", ".join(str(v) for v in values)
        marker = f"ratio={ratio}" if len(values) == 2 else "ignored"
        file.write(f"  * {row + 1}:{column + 1} [{numbers}] {marker}\n")
    if result is not None:
        file.write(f"parts={result.part_sum} gears={result.gear_ratio_sum}\n")
