"""
Command Line Interface Module

Parses command-line arguments for the wall extraction pipeline.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from .constants import (
    DEFAULT_THRESHOLD,
    DEFAULT_MIN_LINE_LENGTH,
    DEFAULT_SCAN_GAP,
    DEFAULT_DUPLICATE_TOLERANCE,
    DEFAULT_MERGE_TOLERANCE,
    DEFAULT_ORIENTATION_TOLERANCE,
)
from .pipeline import extraction_config_from_args, run_pipeline
from .raster.image import InputError

SUPPORTED_IMAGE_SUFFIXES = {".png", ".jpg", ".jpeg", ".bmp", ".gif", ".tif", ".tiff", ".webp"}


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for the pipeline."""
    parser = argparse.ArgumentParser(
        prog="wallscan",
        description="Extract wall segments from a floor plan image",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m wallscan.cli -i plan.png -o ./output
  python -m wallscan.cli -i scan.jpg -o ./output --threshold 160 --scan-gap 2
  python -m wallscan.cli -i plan.png -o ./output --debug --verbose
        """
    )

    # Required arguments
    parser.add_argument(
        "-i", "--input",
        required=True,
        help="Input image file path"
    )

    parser.add_argument(
        "-o", "--output",
        required=True,
        help="Output directory path"
    )

    # Extraction parameters
    extraction_group = parser.add_argument_group('extraction parameters')

    extraction_group.add_argument(
        "--threshold",
        type=float,
        default=DEFAULT_THRESHOLD,
        help=f"Luminance below this is ink (default: {DEFAULT_THRESHOLD})"
    )

    extraction_group.add_argument(
        "--min-line-length",
        type=int,
        default=DEFAULT_MIN_LINE_LENGTH,
        help=f"Ignore runs of this many pixels or fewer (default: {DEFAULT_MIN_LINE_LENGTH})"
    )

    extraction_group.add_argument(
        "--scan-gap",
        type=int,
        default=DEFAULT_SCAN_GAP,
        help=f"Scan every Nth row and column (default: {DEFAULT_SCAN_GAP})"
    )

    extraction_group.add_argument(
        "--duplicate-tolerance",
        type=float,
        default=DEFAULT_DUPLICATE_TOLERANCE,
        help=f"Cross-axis distance for duplicate removal (default: {DEFAULT_DUPLICATE_TOLERANCE})"
    )

    extraction_group.add_argument(
        "--merge-tolerance",
        type=float,
        default=DEFAULT_MERGE_TOLERANCE,
        help=f"Endpoint gap for joining segments (default: {DEFAULT_MERGE_TOLERANCE})"
    )

    extraction_group.add_argument(
        "--orientation-tolerance",
        type=float,
        default=DEFAULT_ORIENTATION_TOLERANCE,
        help=f"Max |dy| for a horizontal segment (default: {DEFAULT_ORIENTATION_TOLERANCE})"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Save thresholded bitmap and wall overlay images"
    )

    return parser


def validate_args(args: argparse.Namespace) -> Tuple[bool, str]:
    """
    Validate parsed arguments.

    Args:
        args: Parsed arguments

    Returns:
        Tuple of (is_valid, error_message)
    """
    # Check input file exists
    input_path = Path(args.input)
    if not input_path.exists():
        return False, f"Input file not found: {args.input}"

    if input_path.suffix.lower() not in SUPPORTED_IMAGE_SUFFIXES:
        return False, f"Input file must be an image: {args.input}"

    # Check/create output directory
    output_path = Path(args.output)
    try:
        output_path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        return False, f"Cannot create output directory: {e}"

    try:
        extraction_config_from_args(args).validate()
    except InputError as e:
        return False, str(e)

    return True, ""


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse and validate command-line arguments.

    Args:
        args: Optional list of arguments (uses sys.argv if None)

    Returns:
        Parsed and validated arguments
    """
    parser = create_parser()
    parsed = parser.parse_args(args)

    is_valid, error_msg = validate_args(parsed)
    if not is_valid:
        parser.error(error_msg)

    return parsed


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    args = parse_args(argv)

    try:
        run_pipeline(args)
    except KeyboardInterrupt:
        print("\nProcessing cancelled by user")
        return 1
    except Exception as e:
        print(f"\nError: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
