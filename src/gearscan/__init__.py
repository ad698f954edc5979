"""Streaming part-number and gear-ratio scanner for engine schematics."""

from __future__ import annotations

from gearscan.scanner import ScanResult, Scanner, scan

__version__ = "0.1.0"

__all__ = ["ScanResult", "Scanner", "scan"]
