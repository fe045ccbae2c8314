"""
Pipeline Orchestration Module

Coordinates wall extraction from a raster and the file-level workflow used
by the CLI.
"""

import logging
import math
import numbers
import time
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import List, Optional, Dict, Any

from .constants import (
    DEFAULT_THRESHOLD,
    DEFAULT_MIN_LINE_LENGTH,
    DEFAULT_SCAN_GAP,
    DEFAULT_DUPLICATE_TOLERANCE,
    DEFAULT_MERGE_TOLERANCE,
    DEFAULT_ORIENTATION_TOLERANCE,
)
from .raster.image import Raster, ExtractionError, InputError, validate_raster, load_raster
from .raster.thresholder import threshold_raster
from .vector.segment import Segment
from .vector.scanline_detector import detect_segments
from .vector.duplicate_filter import filter_duplicate_segments
from .vector.segment_merger import merge_segments
from .output.json_writer import write_segments_to_json, generate_json_filename
from .output.debug_images import (
    save_bitmap_image,
    save_overlay_image,
    generate_debug_filenames,
)


logger = logging.getLogger(__name__)


class ProcessingFailure(ExtractionError):
    """Raised when an extraction stage fails unexpectedly."""
    pass


def _is_number(value) -> bool:
    return (
        isinstance(value, numbers.Real)
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


def _is_integer(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


@dataclass(frozen=True)
class ExtractionConfig:
    """Tunable parameters for one extraction call."""
    threshold: float = DEFAULT_THRESHOLD
    min_line_length: int = DEFAULT_MIN_LINE_LENGTH
    scan_gap: int = DEFAULT_SCAN_GAP
    duplicate_tolerance: float = DEFAULT_DUPLICATE_TOLERANCE
    merge_tolerance: float = DEFAULT_MERGE_TOLERANCE
    orientation_tolerance: float = DEFAULT_ORIENTATION_TOLERANCE

    def validate(self) -> None:
        """
        Check parameter types and ranges.

        The orientation tolerance must lie in (0, min_line_length]: every
        detected run then classifies along its own scan axis, since a row
        run has |dy| = 0 and a column run has |dy| >= min_line_length.

        Raises:
            InputError: If any parameter is ill-typed or out of range
        """
        for name in ("threshold", "duplicate_tolerance", "merge_tolerance", "orientation_tolerance"):
            if not _is_number(getattr(self, name)):
                raise InputError(f"{name} must be a number: {getattr(self, name)!r}")

        for name in ("min_line_length", "scan_gap"):
            if not _is_integer(getattr(self, name)):
                raise InputError(f"{name} must be an integer: {getattr(self, name)!r}")

        if not 0 <= self.threshold <= 256:
            raise InputError(f"Threshold must be between 0 and 256: {self.threshold}")

        if self.scan_gap < 1:
            raise InputError(f"Scan gap must be a positive integer: {self.scan_gap}")

        if self.min_line_length < 0:
            raise InputError(f"Minimum line length must not be negative: {self.min_line_length}")

        for name in ("duplicate_tolerance", "merge_tolerance"):
            value = getattr(self, name)
            if value < 0:
                raise InputError(f"{name} must not be negative: {value}")

        if not 0 < self.orientation_tolerance <= self.min_line_length:
            raise InputError(
                f"Orientation tolerance must be greater than 0 and at most "
                f"min_line_length ({self.min_line_length}): {self.orientation_tolerance}"
            )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ExtractionResult:
    """Result of one extraction call, with per-stage counts."""
    segments: List[Segment]
    width: int
    height: int
    raw_count: int
    deduplicated_count: int
    processing_time: float

    @property
    def final_count(self) -> int:
        return len(self.segments)


def run_extraction(
    raster: Raster,
    config: Optional[ExtractionConfig] = None
) -> ExtractionResult:
    """
    Extract wall segments from a raster.

    Steps:
    1. Threshold to a bitmap
    2. Scan sampled rows and columns for long foreground runs
    3. Drop overlapping duplicates
    4. Merge collinear, endpoint-adjacent segments to a fixpoint

    Args:
        raster: Input RGBA raster
        config: Extraction parameters (defaults if None)

    Returns:
        ExtractionResult

    Raises:
        InputError: Raster or config invalid; raised before any scanning
        ProcessingFailure: Any failure inside the stages; no partial result
    """
    config = config or ExtractionConfig()
    config.validate()
    validate_raster(raster)

    start_time = time.time()

    try:
        bitmap = threshold_raster(raster, config.threshold)

        raw_segments = detect_segments(
            bitmap,
            min_line_length=config.min_line_length,
            scan_gap=config.scan_gap,
        )

        deduplicated = filter_duplicate_segments(
            raw_segments,
            tolerance=config.duplicate_tolerance,
            orientation_tolerance=config.orientation_tolerance,
        )

        merged = merge_segments(
            deduplicated,
            tolerance=config.merge_tolerance,
            orientation_tolerance=config.orientation_tolerance,
        )
    except InputError:
        raise
    except Exception as e:
        logger.error(f"Wall extraction failed: {e}")
        raise ProcessingFailure(f"Wall extraction failed: {e}") from e

    processing_time = time.time() - start_time
    logger.info(
        f"Extracted {len(merged)} walls from {raster.width}x{raster.height} "
        f"raster in {processing_time:.2f}s"
    )

    return ExtractionResult(
        segments=merged,
        width=raster.width,
        height=raster.height,
        raw_count=len(raw_segments),
        deduplicated_count=len(deduplicated),
        processing_time=processing_time,
    )


def extract_walls(
    raster: Raster,
    config: Optional[ExtractionConfig] = None
) -> List[Segment]:
    """
    Extract wall segments from a raster.

    This is the main entry point for callers that only need the segments.
    """
    return run_extraction(raster, config).segments


def extraction_config_from_args(args) -> ExtractionConfig:
    """Build an ExtractionConfig from parsed CLI arguments."""
    return ExtractionConfig(
        threshold=args.threshold,
        min_line_length=args.min_line_length,
        scan_gap=args.scan_gap,
        duplicate_tolerance=args.duplicate_tolerance,
        merge_tolerance=args.merge_tolerance,
        orientation_tolerance=args.orientation_tolerance,
    )


@dataclass
class PipelineConfig:
    """Configuration for a file-to-file pipeline run."""
    input_image: str
    output_dir: str
    extraction: ExtractionConfig = field(default_factory=ExtractionConfig)
    verbose: bool = False
    debug: bool = False


@dataclass
class PipelineResult:
    """Result from a full pipeline run."""
    input_file: str
    output_dir: str
    wall_count: int
    raw_count: int
    deduplicated_count: int
    json_path: str
    debug_paths: List[str]
    processing_time: float


def run_pipeline(args) -> PipelineResult:
    """
    Run extraction on an image file and write the outputs.

    Args:
        args: Parsed CLI arguments

    Returns:
        PipelineResult
    """
    start_time = time.time()

    config = PipelineConfig(
        input_image=args.input,
        output_dir=args.output,
        extraction=extraction_config_from_args(args),
        verbose=args.verbose,
        debug=args.debug,
    )

    # Setup logging
    log_level = logging.DEBUG if config.verbose else logging.INFO
    logging.basicConfig(level=log_level, format='%(message)s')

    logger.info(f"Processing: {config.input_image}")

    raster = load_raster(config.input_image)
    result = run_extraction(raster, config.extraction)

    # Generate outputs
    output_dir = Path(config.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    json_path = generate_json_filename(config.input_image, config.output_dir)
    write_segments_to_json(
        result.segments, json_path,
        input_file=config.input_image,
        width=result.width,
        height=result.height,
        config=config.extraction,
    )
    logger.info(f"JSON written: {json_path}")

    debug_paths = []
    if config.debug:
        bitmap_path, overlay_path = generate_debug_filenames(
            config.input_image, config.output_dir
        )
        save_bitmap_image(threshold_raster(raster, config.extraction.threshold), bitmap_path)
        save_overlay_image(
            raster, result.segments, overlay_path,
            orientation_tolerance=config.extraction.orientation_tolerance,
        )
        debug_paths = [bitmap_path, overlay_path]
        logger.info(f"Debug images written: {bitmap_path}, {overlay_path}")

    processing_time = time.time() - start_time

    # Summary
    logger.info(f"\nSummary:")
    logger.info(f"  Raw segments: {result.raw_count}")
    logger.info(f"  After deduplication: {result.deduplicated_count}")
    logger.info(f"  Walls: {result.final_count}")
    logger.info(f"  Processing time: {processing_time:.1f}s")

    return PipelineResult(
        input_file=config.input_image,
        output_dir=config.output_dir,
        wall_count=result.final_count,
        raw_count=result.raw_count,
        deduplicated_count=result.deduplicated_count,
        json_path=json_path,
        debug_paths=debug_paths,
        processing_time=processing_time,
    )
