"""
Command-line interface for MarkQuill.

Usage:
    markquill process report.md --output report.processed.md
    markquill fields report.md --json
    markquill --log-level INFO --log-file markquill.log process report.md
    markquill version
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from .config import ProcessorConfig
from .engine.directive_processor import DirectiveProcessor, has_signature_blocks
from .utils.field_ids import find_field_collisions
from .utils.logger import add_file_handler
from .utils.rich_logger import setup_logging

logger = logging.getLogger(__name__)

console = Console(stderr=True)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="markquill",
        description="MarkQuill - Markdown directive pre-processor for PDF generation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  markquill process report.md --output report.processed.md
  markquill process report.md --date-format "%d.%m.%Y"
  markquill fields report.md --json
  markquill --log-level INFO --log-file markquill.log process report.md
  markquill version
        """,
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default: WARNING)",
    )
    parser.add_argument(
        "--no-rich",
        action="store_true",
        help="Use plain logging output instead of rich",
    )
    parser.add_argument(
        "--log-file",
        help="Also write log records to this file (rotated at 10 MB)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    process_parser = subparsers.add_parser("process", help="Expand directives in a Markdown file")
    process_parser.add_argument("input", help="Input Markdown file")
    process_parser.add_argument(
        "-o", "--output",
        help="Output file path (default: print to stdout)",
    )
    process_parser.add_argument(
        "--date-format",
        help="strftime format used for the [Date] placeholder (default: locale short date)",
    )

    fields_parser = subparsers.add_parser("fields", help="List fillable signature field names")
    fields_parser.add_argument("input", help="Input Markdown file")
    fields_parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )

    subparsers.add_parser("version", help="Show version information")

    return parser


def _read_input(path_arg: str) -> Optional[Path]:
    input_path = Path(path_arg)
    if not input_path.exists():
        console.print(f"[red]Error: File not found: {input_path}[/red]")
        return None
    return input_path


def cmd_process(args) -> int:
    """Handle process command."""
    input_path = _read_input(args.input)
    if input_path is None:
        return 1

    config = ProcessorConfig(date_format=args.date_format) if args.date_format else ProcessorConfig()
    processor = DirectiveProcessor(config)
    logger.info("Processing %s", input_path)

    if args.output:
        processor.process_file(input_path, args.output)
        console.print(f"[green]✓ Saved: {args.output}[/green]")
    else:
        sys.stdout.write(processor.process_file(input_path))
    return 0


def cmd_fields(args) -> int:
    """Handle fields command."""
    input_path = _read_input(args.input)
    if input_path is None:
        return 1

    text = input_path.read_text(encoding="utf-8")
    names = DirectiveProcessor().collect_field_names(text)
    duplicates = find_field_collisions(names)

    if args.json:
        info = {
            "file": str(input_path),
            "has_signature_blocks": has_signature_blocks(text),
            "fields": names,
            "duplicates": duplicates,
        }
        print(json.dumps(info, indent=2, ensure_ascii=False))
    else:
        for name in names:
            print(name)
        for name in duplicates:
            console.print(f"[yellow]Duplicate field name: {name}[/yellow]")
    return 0


def cmd_version(args=None) -> int:
    """Handle version command."""
    from .version import __version__
    print(f"MarkQuill v{__version__}")
    print("Markdown directive pre-processor for PDF generation")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level, use_rich=not args.no_rich)
    if args.log_file:
        add_file_handler(logging.getLogger(), args.log_file, args.log_level)

    if args.command == "process":
        return cmd_process(args)
    elif args.command == "fields":
        return cmd_fields(args)
    elif args.command == "version":
        return cmd_version(args)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
