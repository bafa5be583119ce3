"""SRT encoding and validation.

WHY: SRT is the strictest output the tool produces — players reject
overlapping or zero-length cues, and hand-authored SRT files commonly use
"." instead of "," for milliseconds. The encoder must always emit clean
SRT, and users need a way to check third-party SRT files.

HOW: convert_to_srt() runs repair_segments() and serializes the result.
validate_srt() is an independent line scanner that never mutates or
raises; it collects every violation it finds and resynchronizes after
each one.

RULES:
- Cue layout: index, "HH:MM:SS,mmm --> HH:MM:SS,mmm", text, blank line
- Cue text is "Speaker: text" when a speaker is known
- Encoder output ends in exactly one newline, no other trailing whitespace
- Validator line numbers are 1-based
- Sequence mismatch resynchronizes: expected = actual + 1
- A malformed header skips the rest of its block
- Encoder output always validates with zero violations
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from podcast_metadata.core.ir import SrtConversionResult, TranscriptSegment
from podcast_metadata.core.repair import repair_segments
from podcast_metadata.core.timestamps import SRT_TIMESTAMP_RE, decode_srt_range

logger = logging.getLogger(__name__)


def convert_to_srt(segments: Sequence[TranscriptSegment]) -> SrtConversionResult:
    """Repair segments and serialize them as an SRT document.

    Args:
        segments: Segments in any order.

    Returns:
        SrtConversionResult with the SRT text, the repair warnings and
        whether every message was a recoverable warning.
    """
    repaired = repair_segments(segments)

    lines: List[str] = []
    for sequence_number, segment in enumerate(repaired.segments, 1):
        lines.append(str(sequence_number))
        lines.append("{} --> {}".format(segment.start_srt, segment.end_srt))
        lines.append(segment.labelled_text)
        lines.append("")

    content = "\n".join(lines).rstrip() + "\n"

    return SrtConversionResult(
        content=content,
        errors=list(repaired.warnings),
        is_valid=repaired.is_valid,
    )


def _parse_sequence(line: str) -> Optional[int]:
    try:
        return int(line.strip())
    except ValueError:
        return None


def validate_srt(srt_content: str) -> List[str]:
    """Check arbitrary SRT text and report every violation found.

    Args:
        srt_content: Full SRT document text.

    Returns:
        Violation messages in document order; empty when the text is valid.
    """
    errors: List[str] = []
    lines = srt_content.split("\n")
    count = len(lines)

    expected_sequence = 1
    previous_end_ms = 0
    i = 0

    while i < count:
        while i < count and not lines[i].strip():
            i += 1
        if i >= count:
            break

        sequence = _parse_sequence(lines[i])
        if sequence is None:
            errors.append(
                "Line {}: Expected sequence number, got '{}'".format(i + 1, lines[i].strip())
            )
            i += 1
            continue

        if sequence != expected_sequence:
            errors.append(
                "Line {}: Expected sequence {}, got {}".format(i + 1, expected_sequence, sequence)
            )
        expected_sequence = sequence + 1
        i += 1

        if i >= count:
            errors.append("Unexpected end of file after sequence {}".format(sequence))
            break

        timestamp_line = lines[i].strip()
        match = SRT_TIMESTAMP_RE.search(timestamp_line)

        if match is None:
            if "." in timestamp_line and "-->" in timestamp_line:
                errors.append(
                    "Line {}: Timestamp uses '.' for milliseconds. "
                    "SRT requires ',' (e.g., 00:00:00,000)".format(i + 1)
                )
            else:
                errors.append(
                    "Line {}: Invalid timestamp format. "
                    "Expected 'HH:MM:SS,mmm --> HH:MM:SS,mmm'".format(i + 1)
                )
            i += 1
            while i < count and lines[i].strip():
                i += 1
            continue

        start_ms, end_ms = decode_srt_range(match)

        if start_ms >= end_ms:
            errors.append("Line {}: End time must be after start time".format(i + 1))

        if start_ms < previous_end_ms:
            errors.append("Line {}: Subtitle overlaps with previous subtitle".format(i + 1))

        previous_end_ms = end_ms
        i += 1

        has_text = False
        while i < count and lines[i].strip():
            has_text = True
            i += 1

        if not has_text:
            errors.append("Sequence {}: No subtitle text found".format(sequence))

    logger.debug("Validated SRT: %d violations", len(errors))
    return errors
