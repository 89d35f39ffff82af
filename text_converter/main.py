"""Main entry point for text conversion."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import Config
from .converters import convert_request
from .modes import CONVERSION_MODES, UnknownModeError
from .schemas.request import ConversionRequest


def _load_input(value: Optional[str]) -> str:
    """Read input from a file path, a literal string or stdin."""
    if value is None:
        return sys.stdin.read()
    try:
        path = Path(value)
        is_file = path.is_file()
    except (OSError, ValueError):
        # Not a usable path (too long, NUL bytes); treat as literal text
        is_file = False
    if is_file:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    return value


def _format_modes(output_format: str) -> str:
    if output_format == "json":
        modes = {key: mode.to_descriptor() for key, mode in CONVERSION_MODES.items()}
        return json.dumps(modes, indent=2, ensure_ascii=False)
    return "\n".join(f"{key}\t{mode.label}" for key, mode in CONVERSION_MODES.items())


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    config = Config()

    parser = argparse.ArgumentParser(description="Convert text between formats and cases")
    parser.add_argument(
        "--mode",
        type=str,
        help=f"Conversion mode (default: {config.default_mode})",
        default=config.default_mode,
    )
    parser.add_argument(
        "--input",
        type=str,
        help="Input file or text string (default: stdin)",
        default=None,
    )
    parser.add_argument(
        "--output",
        type=str,
        help="Output file path (default: stdout)",
        default=None,
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default=config.output_format if config.output_format in ("text", "json") else "text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--reverse",
        action="store_true",
        help="Apply the inverse conversion of a bidirectional mode",
    )
    parser.add_argument(
        "--list-modes",
        action="store_true",
        help="List available conversion modes and exit",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(level=config.get_log_level(), format="%(levelname)s %(name)s: %(message)s")
    if not config.validate():
        logging.getLogger(__name__).warning("Invalid text converter configuration in environment")

    if args.list_modes:
        print(_format_modes(args.format))
        return

    # Load input
    try:
        text = _load_input(args.input)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error loading input: {e}", file=sys.stderr)
        sys.exit(1)

    # Run conversion
    try:
        result = convert_request(ConversionRequest(mode=args.mode, text=text, reverse=args.reverse))
    except UnknownModeError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print(f"Error converting text: {e}", file=sys.stderr)
        sys.exit(1)

    # Format output
    if args.format == "json":
        output_text = json.dumps(result.model_dump(), indent=2, ensure_ascii=False)
    else:
        output_text = result.output

    # Write output
    if args.output:
        Path(args.output).parent.mkdir(parents=True, exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(output_text)
        print(f"Output written to {args.output}", file=sys.stderr)
    else:
        print(output_text)


if __name__ == "__main__":
    main()
