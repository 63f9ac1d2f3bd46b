# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""CLI harness for C++ interface extraction."""

import argparse
import json
import logging
import os
import sys
from dataclasses import asdict
from pathlib import Path
from typing import TextIO

from rich.console import Console
from rich.logging import RichHandler
from rich.style import Style
from rich.table import Table

from cie.frontend import CompileDiagnosticError, ParseFailureError, ParserFrontEnd
from cie.frontends import ClangFrontEnd, FrontEndConfig
from cie.interface_builder import extract_interfaces
from cie.model import InterfaceDescription
from cie.persistence import PersistenceError
from cie.writers import XmlDescriptionWriter

logger = logging.getLogger(__name__)

LIBCLANG_ENV_VAR = "CIE_LIBCLANG"

TABLE_COLUMN_RATIOS: dict[str, int] = {
    "kind": 1,
    "name": 2,
    "signature": 5,
}


def configure_logging(level: int = logging.INFO) -> None:
    """Configure application logging with Rich handler.

    Args:
        level: Logging severity threshold.
    """
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(prog="cie")
    subparsers = parser.add_subparsers(dest="command", required=True)
    extract_parser = subparsers.add_parser("extract")
    extract_parser.add_argument(
        "--path", required=True, help="Header or source file to analyze."
    )
    extract_parser.add_argument(
        "--include",
        "-I",
        action="append",
        default=[],
        help="Include search directory; may be repeated.",
    )
    extract_parser.add_argument(
        "--package",
        action="append",
        default=[],
        help="Package tag added to every interface; may be repeated.",
    )
    extract_parser.add_argument(
        "--format",
        choices=("table", "json", "xml"),
        default="table",
        help="Output format.",
    )
    extract_parser.add_argument(
        "--output",
        required=False,
        help="JSON output file, or destination directory for --format xml.",
    )
    extract_parser.add_argument(
        "--std", required=False, help="Language standard, e.g. c++17."
    )
    extract_parser.add_argument(
        "--clang-arg",
        action="append",
        default=[],
        help="Extra argument passed to libclang; may be repeated.",
    )
    extract_parser.add_argument(
        "--libclang",
        required=False,
        help=f"Path of the libclang shared library (default: ${LIBCLANG_ENV_VAR}).",
    )
    extract_parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging."
    )
    return parser


def run(argv: list[str], stdout: TextIO, stderr: TextIO) -> int:
    """Run CLI command.

    Args:
        argv: CLI arguments.
        stdout: Standard output stream.
        stderr: Standard error stream.

    Returns:
        Exit code.
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit:
        logger.warning(f"Argument parsing failed (argv={argv})")
        return 2
    if args.command == "extract":
        return _run_extract(args=args, stdout=stdout, stderr=stderr)

    logger.warning(f"Unsupported command (command={args.command})")
    stderr.write(f"Unsupported command: {args.command}\n")
    return 2


def build_front_end(args: argparse.Namespace) -> ParserFrontEnd:
    """Create the configured parsing front end.

    Args:
        args: Parsed CLI arguments.

    Returns:
        Configured front end.
    """
    extra_args = [f"-std={args.std}"] if args.std else []
    extra_args.extend(args.clang_arg)
    config = FrontEndConfig(
        extra_args=tuple(extra_args),
        library_file=args.libclang or os.environ.get(LIBCLANG_ENV_VAR) or None,
    )
    return ClangFrontEnd(config=config)


def _run_extract(args: argparse.Namespace, stdout: TextIO, stderr: TextIO) -> int:
    """Run extract command.

    Args:
        args: Parsed CLI arguments.
        stdout: Standard output stream.
        stderr: Standard error stream.

    Returns:
        Exit code.
    """
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    file_path = Path(args.path)
    if not file_path.is_file():
        logger.warning(f"Path does not exist (path={file_path})")
        stderr.write(f"Path does not exist: {file_path}\n")
        return 2
    if args.format == "xml" and not args.output:
        logger.warning("Missing output directory for XML format")
        stderr.write("--output is required when --format xml is used\n")
        return 2

    try:
        records = extract_interfaces(
            file_path,
            include_dirs=args.include,
            packages=args.package,
            front_end=build_front_end(args),
        )
    except ParseFailureError as exc:
        logger.warning(f"Parsing failed (path={file_path} reason={exc.reason})")
        stderr.write(f"parse_failure: {exc}\n")
        return 1
    except CompileDiagnosticError as exc:
        logger.warning(
            f"Compilation diagnostics reported (path={file_path} count={len(exc.diagnostics)})"
        )
        for diagnostic in exc.diagnostics:
            stderr.write(f"compile_diagnostic: {diagnostic}\n")
        return 1

    if args.format == "xml":
        return _write_xml(records=records, destination=Path(args.output), stderr=stderr)
    if args.format == "json":
        if args.output:
            try:
                _write_json_file(records=records, output_path=Path(args.output))
            except OSError as exc:
                logger.warning(
                    f"Failed to write JSON output file (output_path={args.output} error={exc})"
                )
                stderr.write(f"Failed to write JSON output file: {args.output}\n")
                return 2
        else:
            _write_json(records=records, stdout=stdout)
    else:
        _write_table(records=records, stdout=stdout)
    return 0


def _write_xml(
    records: list[InterfaceDescription], destination: Path, stderr: TextIO
) -> int:
    """Write one XML description file per record.

    Args:
        records: Extracted interfaces.
        destination: Root output directory.
        stderr: Standard error stream.

    Returns:
        Exit code.
    """
    writer = XmlDescriptionWriter(destination=destination)
    try:
        for record in records:
            writer.write(record)
    except PersistenceError as exc:
        logger.warning(f"Failed to write XML descriptions (destination={destination} error={exc})")
        stderr.write(f"Failed to write XML descriptions: {exc}\n")
        return 2
    logger.info(f"XML descriptions written (destination={destination} records={len(records)})")
    return 0


def _payload(records: list[InterfaceDescription]) -> dict[str, list[dict]]:
    return {"records": [asdict(record) for record in records]}


def _write_json(records: list[InterfaceDescription], stdout: TextIO) -> None:
    """Write records in JSON format.

    Args:
        records: Extracted interfaces.
        stdout: Standard output stream.
    """
    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    console.print(
        json.dumps(_payload(records), indent=2, sort_keys=True),
        markup=False,
        highlight=False,
        soft_wrap=True,
    )


def _write_json_file(records: list[InterfaceDescription], output_path: Path) -> None:
    """Write raw JSON payload to an output file.

    Args:
        records: Extracted interfaces.
        output_path: Target file path.

    Raises:
        OSError: If directory creation or file writing fails.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(_payload(records), indent=2, sort_keys=True), encoding="utf-8"
    )


def _write_table(records: list[InterfaceDescription], stdout: TextIO) -> None:
    """Write one methods table per interface.

    Args:
        records: Extracted interfaces.
        stdout: Standard output stream.
    """
    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    for record in records:
        title = record.qualified_name
        if record.base_classes:
            title = f"{title} : {', '.join(record.base_classes)}"
        console.rule(title, style=Style(color="cyan"), characters="-")
        table = Table(show_header=True, show_lines=True, expand=True)
        table.add_column("kind", ratio=TABLE_COLUMN_RATIOS["kind"], overflow="fold")
        table.add_column("name", ratio=TABLE_COLUMN_RATIOS["name"], overflow="fold")
        table.add_column(
            "signature",
            ratio=TABLE_COLUMN_RATIOS["signature"],
            overflow="fold",
        )
        for method in record.methods:
            table.add_row(method.kind, method.name, method.signature)
        console.print(table)


def main() -> None:
    """Run the CLI application and exit."""
    configure_logging()
    exit_code = run(sys.argv[1:], stdout=sys.stdout, stderr=sys.stderr)
    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
