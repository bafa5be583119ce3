"""Transcript parsing entry points.

WHY: Callers should not need to know which layouts exist. They hand over
lines (or a file path) and get back a detected layout plus segments, or
a plain-text Transcript when no timestamp grammar was recognized.

HOW: parse_document() runs detect_format() and dispatches to the matching
builder in BUILDERS. load_transcript() reads the file, keeps the raw text,
and turns FormatNotRecognizedError into a PLAIN_TEXT transcript.

RULES:
- Detection and building stay two separate pure functions
- An empty or blank-only document is PLAIN_TEXT with no segments, no error
- A document with content but no recognized grammar raises
  FormatNotRecognizedError from parse_document()
- A recognized document never fails because of individual bad lines
- load_transcript() reads UTF-8 and tolerates a byte-order mark; invalid
  UTF-8 raises TranscriptReadError
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from podcast_metadata.config import DEFAULT_SEGMENT_DURATION_MS, AppSettings
from podcast_metadata.core.builders import BUILDERS
from podcast_metadata.core.detector import detect_format
from podcast_metadata.core.ir import Transcript, TranscriptFormat, TranscriptSegment
from podcast_metadata.exceptions import FormatNotRecognizedError, TranscriptReadError

logger = logging.getLogger(__name__)

__all__ = ["detect_format", "parse_document", "load_transcript", "read_text_file"]


def parse_document(
    lines: Sequence[str],
    default_segment_duration_ms: int = DEFAULT_SEGMENT_DURATION_MS,
) -> Tuple[TranscriptFormat, List[TranscriptSegment]]:
    """Detect a document's layout and build its segments.

    Args:
        lines: The document's lines.
        default_segment_duration_ms: Provisional duration for Zencastr
            segments (only the last one keeps it).

    Returns:
        (format, segments) with segments in document order.

    Raises:
        FormatNotRecognizedError: If the document has non-blank content
            but no recognized timestamp grammar.
    """
    detected = detect_format(lines)

    if detected is TranscriptFormat.PLAIN_TEXT:
        if any(line.strip() for line in lines):
            raise FormatNotRecognizedError(
                "Unable to detect a timestamped transcript format"
            )
        return detected, []

    segments = BUILDERS[detected](lines, default_segment_duration_ms)
    logger.debug("Built %d segments from %s document", len(segments), detected.value)
    return detected, segments


def read_text_file(path: Path) -> str:
    """Read a whole file as UTF-8, dropping a leading byte-order mark.

    Raises:
        TranscriptReadError: If the bytes are not valid UTF-8.
    """
    try:
        return path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as e:
        raise TranscriptReadError(
            "{} is not valid UTF-8 text ({})".format(path, e.reason)
        ) from e


def load_transcript(
    path: str | Path,
    settings: Optional[AppSettings] = None,
) -> Transcript:
    """Read a transcript file and parse it into the Transcript IR.

    Args:
        path: Path to the transcript file.
        settings: Supplies default_segment_duration_ms; defaults apply
            when omitted.

    Returns:
        A Transcript. Unrecognized layouts come back as PLAIN_TEXT with
        no segments and the full file content in raw_content.

    Raises:
        FileNotFoundError: If the file does not exist.
        TranscriptReadError: If the file is not valid UTF-8.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError("Transcript file not found: {}".format(file_path))

    raw_content = read_text_file(file_path)
    lines = raw_content.splitlines()
    duration_ms = (settings or AppSettings()).default_segment_duration_ms

    try:
        detected, segments = parse_document(lines, duration_ms)
    except FormatNotRecognizedError:
        logger.info("No timestamp format in %s, loading as plain text", file_path)
        detected, segments = TranscriptFormat.PLAIN_TEXT, []

    logger.info(
        "Loaded %s: format=%s, %d segments", file_path.name, detected.value, len(segments)
    )

    return Transcript(
        file_path=str(file_path),
        format=detected,
        raw_content=raw_content,
        segments=segments,
    )
