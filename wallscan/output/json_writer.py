"""
JSON Writer Module

Writes extracted walls to a JSON document.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Dict, Any

from ..constants import DEFAULT_ORIENTATION_TOLERANCE
from ..vector.segment import Segment

logger = logging.getLogger(__name__)


def segments_to_document(
    segments: List[Segment],
    input_file: str,
    width: int,
    height: int,
    config=None
) -> Dict[str, Any]:
    """
    Build the JSON document for an extraction result.

    Args:
        segments: Final wall segments
        input_file: Source image path
        width: Image width in pixels
        height: Image height in pixels
        config: ExtractionConfig used for the run (optional)

    Returns:
        Dictionary ready for json.dump
    """
    orientation_tolerance = (
        config.orientation_tolerance if config is not None
        else DEFAULT_ORIENTATION_TOLERANCE
    )

    return {
        "input_file": str(input_file),
        "generated_at": datetime.now().isoformat(timespec="seconds"),
        "image": {"width": width, "height": height},
        "parameters": config.to_dict() if config is not None else {},
        "wall_count": len(segments),
        "walls": [seg.to_dict(orientation_tolerance) for seg in segments],
    }


def write_segments_to_json(
    segments: List[Segment],
    output_path: str,
    input_file: str,
    width: int,
    height: int,
    config=None
) -> str:
    """
    Write wall segments to a JSON file.

    Returns:
        Path of the written file
    """
    document = segments_to_document(segments, input_file, width, height, config)

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(document, f, indent=2)

    logger.debug(f"Wrote {len(segments)} walls to {output_path}")
    return str(output_path)


def generate_json_filename(input_path: str, output_dir: str) -> str:
    """Output path of the form <output_dir>/<stem>_walls.json."""
    stem = Path(input_path).stem
    return str(Path(output_dir) / f"{stem}_walls.json")
