#!/usr/bin/env python3
"""Main CLI entry point for asciinema-scenario."""

import argparse
import logging
import os
import sys
from typing import List, Optional, TextIO

from asciinema_scenario.engine import PreviewLine, ScenarioEngine
from asciinema_scenario.parser import ScenarioError, read_header, read_lines
from asciinema_scenario.preview import save_preview
from asciinema_scenario.recording import RecordingWriter

logger = logging.getLogger(__name__)

LOG_LEVELS = [logging.ERROR, logging.WARNING, logging.INFO, logging.DEBUG]


def process_scenario_file(filepath: str, stream: TextIO) -> List[PreviewLine]:
    """
    Convert a scenario file into an asciicast recording.

    Args:
        filepath: Path to the scenario file
        stream: Where the recording is written

    Returns:
        Preview lines of the session, for rendering an SVG preview
    """
    logger.info('Reading scenario %s', filepath)
    header = read_header(filepath)

    writer = RecordingWriter(stream)
    writer.write_header(header)

    engine = ScenarioEngine(header, writer)
    return engine.process_lines(read_lines(filepath))


def setup_logging(verbosity: int):
    level = LOG_LEVELS[min(verbosity, len(LOG_LEVELS) - 1)]
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format='%(levelname)s %(name)s: %(message)s',
    )


def check_paths(scenario_file: str, preview_file: Optional[str],
                output: Optional[str] = None) -> Optional[str]:
    """Return an error message when the given paths cannot be used, else None."""
    if not os.path.exists(scenario_file):
        return f'scenario file `{scenario_file}` does not exist!'
    if preview_file and os.path.exists(preview_file):
        return f'svg preview file `{preview_file}` already exists!'
    if output and os.path.exists(output) and os.path.samefile(scenario_file, output):
        return f'output file `{output}` is the scenario file itself!'
    return None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='asciinema-scenario',
        description='Create asciinema videos from a text file.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  asciinema-scenario demo.scenario > demo.cast
  asciinema-scenario demo.scenario -o demo.cast -p demo.svg
        """
    )

    parser.add_argument(
        'scenario_file',
        help='Input scenario file'
    )

    parser.add_argument(
        '-p', '--preview-file',
        dest='preview_file',
        help='Write an SVG preview of the session (must not exist yet)'
    )

    parser.add_argument(
        '-o', '--output',
        help='Output file (default: stdout)'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='count',
        default=0,
        help='Increase log verbosity (repeat for more)'
    )

    return parser


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    error = check_paths(args.scenario_file, args.preview_file, args.output)
    if error:
        print(f"Error: {error}", file=sys.stderr)
        sys.exit(1)

    try:
        if args.output:
            with open(args.output, 'w', encoding='utf-8') as f:
                preview_lines = process_scenario_file(args.scenario_file, f)
        else:
            preview_lines = process_scenario_file(args.scenario_file, sys.stdout)

        if args.preview_file:
            save_preview(args.preview_file, preview_lines)

    except ScenarioError as e:
        print(f"Error: {args.scenario_file}: {e}", file=sys.stderr)
        sys.exit(1)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
