#!/usr/bin/env python3
"""
File Splitter Utility
Splits files into numbered segments and joins them back.

Usage:
    python file_splitter.py --split <file> [options]
    python file_splitter.py --join <file.001> [options]

Examples:
    # Split with default 10MB segments: video.mp4.000, video.mp4.001, ...
    python file_splitter.py --split video.mp4

    # Split with custom segment size and base name
    python file_splitter.py --split document.pdf --size 500KB --output parts/doc.pdf

    # Join files back (writes video.mp4 next to the segments)
    python file_splitter.py --join video.mp4.001
"""

import argparse
import logging
import os
import sys

from file_divider import DividerError, FileDivider
from size_units import format_size, parse_size_expression

DEFAULT_SIZE = "10MB"

logger = logging.getLogger("file_divider")


def build_parser():
    parser = argparse.ArgumentParser(
        description="File Splitter/Joiner Utility",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Split file with default 10MB segments
  python file_splitter.py --split video.mp4

  # Split into 500KB segments named out.mp4.000, out.mp4.001, ...
  python file_splitter.py --split video.mp4 --size 500KB --output out.mp4

  # Join segments back together
  python file_splitter.py --join out.mp4.001

  # Join with specific output name
  python file_splitter.py --join out.mp4.001 --output merged_video.mp4

Supported units: B, Kb, KB, Mb, MB, Gb, GB (case-sensitive, Kb = kilobit).
A bare number means megabytes; 50MB, MB50 and 5M0B are the same size.
        """
    )

    # Main operation
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument('--split', metavar='FILE', help='Split the specified file')
    group.add_argument('--join', metavar='SEGMENT',
                       help='Join the segment set starting at SEGMENT (must end in .001)')

    # Options for splitting
    parser.add_argument('--size', '-s', default=DEFAULT_SIZE,
                        help=f'Segment size (default: {DEFAULT_SIZE}). Examples: 500KB, 1GB, 80Mb')
    parser.add_argument('--keep-empty-tail', action='store_true',
                        help='Write a zero-length last segment when the size divides the file exactly')

    parser.add_argument('--output', '-o', default='',
                        help='Segment base name when splitting, joined file name when joining')

    # General options
    parser.add_argument('--quiet', '-q', action='store_true',
                        help='Suppress progress output')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable verbose output')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(format="%(message)s", level=logging.INFO)
    divider = FileDivider(logger=logger, quiet=args.quiet,
                          keep_empty_tail=args.keep_empty_tail)

    try:
        if args.split:
            # Split operation
            expression = parse_size_expression(args.size)
            segments = divider.split_expression(expression, os.path.abspath(args.split), args.output)

            if args.verbose and not args.quiet:
                print(f"\nCreated {len(segments)} segments:")
                for segment in segments:
                    print(f"  {segment} ({format_size(os.path.getsize(segment))})")

        elif args.join:
            # Join operation
            output_file = divider.join(os.path.abspath(args.join), args.output)

            if args.verbose and not args.quiet:
                final_size = os.path.getsize(output_file)
                print(f"Final file size: {format_size(final_size)}")

    except DividerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
