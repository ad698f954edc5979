"""Command-line interface for gearscan."""

from __future__ import annotations

import argparse
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from gearscan.errors import ScanError
from gearscan.scanner import ScanResult
from gearscan.stream import DEFAULT_CHUNK_SIZE

PARTS = ("1", "2", "both")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    part: str
    chunk_size: int
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="gearscan",
        description="Sum part numbers and gear ratios of an engine schematic",
    )
    # Any count other than one path is accepted and ignored by main()
    p.add_argument("inputs", nargs="*", metavar="input", help="Schematic grid file")
    p.add_argument(
        "--part",
        choices=PARTS,
        default=None,
        help="Which result to print: 1 (part sum), 2 (gear ratios), both (default)",
    )
    p.add_argument(
        "--chunk-size",
        type=int,
        default=None,
        metavar="CHARS",
        help=f"Read buffer size in characters (default: {DEFAULT_CHUNK_SIZE})",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover gearscan.toml)",
    )
    p.add_argument("--debug", action="store_true", help="Dump the gear ledger to stderr")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "gearscan.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def parse_chunk_size(value: object) -> int:
    """Validate a chunk size coming from the config file."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise argparse.ArgumentTypeError(
            f"invalid chunk_size (expected a positive integer): {value!r}"
        )
    return value


def parse_part(value: object) -> str:
    """Validate an output selection coming from the config file."""
    text = str(value)
    if text not in PARTS:
        raise argparse.ArgumentTypeError(
            f"invalid part (expected one of {', '.join(PARTS)}): {value!r}"
        )
    return text


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    input_file = Path(args.inputs[0])
    input_dir = input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    chunk_size = DEFAULT_CHUNK_SIZE
    cfg_scan = config.get("scan")
    if isinstance(cfg_scan, dict) and "chunk_size" in cfg_scan:
        chunk_size = parse_chunk_size(cfg_scan["chunk_size"])
    if args.chunk_size is not None:
        chunk_size = parse_chunk_size(args.chunk_size)

    part = "both"
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict) and "part" in cfg_output:
        part = parse_part(cfg_output["part"])
    if args.part is not None:
        part = args.part

    return CliOptions(
        input_file=input_file,
        part=part,
        chunk_size=chunk_size,
        debug=args.debug,
    )


def format_result(result: ScanResult, part: str) -> str:
    if part == "1":
        return str(result.part_sum)
    if part == "2":
        return str(result.gear_ratio_sum)
    return str(result)


def scan_input(options: CliOptions) -> ScanResult:
    """Stream the input file through the scanner."""
    from gearscan.debug import dump_ledger
    from gearscan.scanner import Scanner
    from gearscan.stream import feed_file

    scanner = Scanner()
    feed_file(scanner, options.input_file, options.chunk_size)
    result = scanner.finish()

    if options.debug:
        dump_ledger(scanner.gears, result, file=sys.stderr)

    return result


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if len(args.inputs) != 1:
        return 0

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        result = scan_input(options)
    except ScanError as exc:
        print(exc.format(str(options.input_file)), file=sys.stderr)
        return 1

    print(format_result(result, options.part))
    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
