#!/usr/bin/env python3
"""
TeX Citation Scanner CLI

A tool for extracting citation keys from TeX documents, following
\\input and \\include directives, and reporting where each key is cited.
"""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from exporters import to_json, to_text
from texscan.config import load_config
from texscan.exceptions import ConfigError
from texscan.traversal import TexParser


def parse_args(args=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="texcites",
        description="Extract citation keys from TeX files and their inclusions.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  texcites paper.tex                     # Text report on stdout
  texcites paper.tex -f json -o keys.json
  texcites a.tex b.tex --style ascii     # Pure ASCII (no Unicode)
  texcites paper.tex --cite-command 'mycite'
  texcites paper.tex --config scan.yaml --log-level DEBUG
        """,
    )

    parser.add_argument(
        "files",
        nargs="+",
        help="TeX files to scan",
    )

    # Output options
    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Output file (default: stdout)",
    )

    parser.add_argument(
        "-f", "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )

    parser.add_argument(
        "--style",
        choices=["tree", "ascii"],
        default="tree",
        help="Text output style: 'tree' (Unicode) or 'ascii' (pure ASCII)",
    )

    parser.add_argument(
        "--relative-to",
        type=str,
        default=None,
        help="Base path for relative path display (default: current directory)",
    )

    # Scanning options
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="YAML file with scan settings",
    )

    parser.add_argument(
        "--cite-command",
        nargs="+",
        default=None,
        help="Extra citation command patterns (regex, without backslash)",
    )

    parser.add_argument(
        "--encoding",
        type=str,
        default=None,
        help="Encoding used to read TeX files (default: utf-8)",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )

    return parser.parse_args(args)


def main(args=None):
    """Main entry point."""
    parsed = parse_args(args)

    logging.basicConfig(
        level=getattr(logging, parsed.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(parsed.config)
        if parsed.cite_command:
            config = config.with_extra_cite_commands(*parsed.cite_command)
        if parsed.encoding:
            config = replace(config, encoding=parsed.encoding)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    result = TexParser(config).parse_files(parsed.files)
    if result is None:
        print("Error: parsing was interrupted", file=sys.stderr)
        return 1

    base = Path(parsed.relative_to).resolve() if parsed.relative_to else Path.cwd()

    if parsed.format == "json":
        output = to_json(result, base=base)
    else:
        output = to_text(result, base=base, style=parsed.style)

    # Write output
    if parsed.output:
        try:
            output_path = Path(parsed.output)
            output_path.write_text(output, encoding="utf-8")
            print(f"Output written to: {output_path}", file=sys.stderr)
        except OSError as e:
            print(f"Error writing output: {e}", file=sys.stderr)
            return 1
    else:
        print(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
