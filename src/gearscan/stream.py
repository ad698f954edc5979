"""Chunked character stream over a grid file."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from gearscan.scanner import ScanResult, Scanner

DEFAULT_CHUNK_SIZE = 1024


def read_chars(path: str | Path, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[str]:
    """Yield the characters of *path* one at a time, reading *chunk_size* at once.

    The file stays open only while the generator is being consumed and is
    closed when it is exhausted, closed, or an exception propagates through it.
    """
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    with open(path, encoding="utf-8") as f:
        while chunk := f.read(chunk_size):
            yield from chunk


def feed_file(scanner: Scanner, path: str | Path, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
    """Feed the whole of *path* into *scanner*, closing the file on every exit path."""
    chars = read_chars(path, chunk_size)
    try:
        scanner.feed(chars)
    finally:
        chars.close()


def scan_file(path: str | Path, chunk_size: int = DEFAULT_CHUNK_SIZE) -> ScanResult:
    """Scan the grid stored in *path*."""
    scanner = Scanner()
    feed_file(scanner, path, chunk_size)
    return scanner.finish()
