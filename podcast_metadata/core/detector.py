"""Transcript layout detection.

WHY: The layouts overlap — a bare compact timestamp is weak evidence for a
time range, and an SRT header contains two valid HH:MM:SS stamps. Detection
has to pick exactly one layout before any builder runs.

HOW: Scan the first DETECTION_WINDOW_LINES lines once per grammar, in
fixed precedence from most to least structurally specific:
  1. SRT header (two decorated stamps joined by "-->", comma milliseconds)
  2. Compact Zencastr stamp alone on a line
  3. Time range (two HH:MM:SS stamps joined by a dash or arrow)
  4. Otherwise plain text

RULES:
- Pure function of the first 50 lines; never raises
- An empty document is plain text
"""

from __future__ import annotations

from typing import Sequence

from podcast_metadata.config import DETECTION_WINDOW_LINES
from podcast_metadata.core.ir import TranscriptFormat
from podcast_metadata.core.timestamps import (
    SRT_TIMESTAMP_RE,
    TIME_RANGE_RE,
    is_compact_timestamp,
)


def detect_format(lines: Sequence[str]) -> TranscriptFormat:
    """Classify a document by the timestamp grammar found in its prefix.

    Args:
        lines: The document's lines (line terminators optional).

    Returns:
        The first TranscriptFormat, in precedence order, whose grammar
        matches any of the first 50 lines; PLAIN_TEXT when none does.
    """
    window = list(lines[:DETECTION_WINDOW_LINES])

    if any(SRT_TIMESTAMP_RE.search(line) for line in window):
        return TranscriptFormat.SRT

    if any(is_compact_timestamp(line) for line in window):
        return TranscriptFormat.ZENCASTR

    if any(TIME_RANGE_RE.search(line) for line in window):
        return TranscriptFormat.TIME_RANGE

    return TranscriptFormat.PLAIN_TEXT
