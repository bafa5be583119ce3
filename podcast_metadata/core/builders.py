"""Segment builders — one pure parser per transcript layout.

WHY: Each layout encodes timing, speakers and text differently. Keeping
one builder per layout means adding a layout is an isolated change: one
detector pattern plus one function registered in BUILDERS.

HOW: Every builder has the same signature,
``(lines, default_segment_duration_ms) -> list[TranscriptSegment]``, and
walks the lines once. Lines or blocks that do not fit the grammar are
skipped (logged at DEBUG) and the walk continues.

  build_zencastr    — "00:00.29" / "James" / "Welcome back..." blocks
  build_time_range  — "00:00:00 - 00:00:05 James: Welcome back..." lines
  build_srt         — standard SubRip blocks

RULES:
- A builder raises FormatNotRecognizedError only when no line of its own
  grammar appears anywhere in the document
- Segments with empty text are never emitted
- Speaker heuristic: ^[A-Z][a-zA-Z\\s]{0,30}$ and shorter than 30 chars
- Zencastr end times are provisional (start + default duration), then
  chained so each segment ends where the next begins
- Time-range and SRT text may carry a "Name: " prefix (colon within the
  first 30 characters), which is split off into the speaker
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from podcast_metadata.config import SPEAKER_MAX_LENGTH
from podcast_metadata.core.ir import TranscriptFormat, TranscriptSegment
from podcast_metadata.core.repair import chain_end_times
from podcast_metadata.core.timestamps import (
    SRT_TIMESTAMP_RE,
    TIME_RANGE_RE,
    decode_compact,
    decode_srt_range,
    decode_time_range,
    is_compact_timestamp,
    match_compact,
)
from podcast_metadata.exceptions import FormatNotRecognizedError

logger = logging.getLogger(__name__)

# Speaker detection: short line, capitalized, letters and spaces only
_SPEAKER_RE = re.compile(r"[A-Z][a-zA-Z\s]{0,30}")

Builder = Callable[[Sequence[str], int], List[TranscriptSegment]]


def is_speaker_label(text: str) -> bool:
    """True if text looks like a bare speaker name ("James", "Dr Who")."""
    return len(text) < SPEAKER_MAX_LENGTH and _SPEAKER_RE.fullmatch(text) is not None


def split_speaker(text: str) -> Tuple[Optional[str], str]:
    """Split a leading "Name: " prefix off a line of text.

    The colon must sit within the first 30 characters and the prefix, less
    trailing spaces, must pass is_speaker_label(). Otherwise the text is
    returned unchanged.
    """
    colon_index = text.find(":")
    if 0 < colon_index < SPEAKER_MAX_LENGTH:
        prefix = text[:colon_index].rstrip()
        if is_speaker_label(prefix):
            return prefix, text[colon_index + 1:].strip()
    return None, text


def _require_grammar(lines: Sequence[str], matches: Callable[[str], bool], name: str) -> None:
    if not any(matches(line) for line in lines):
        raise FormatNotRecognizedError(
            "No {} timestamps found in document".format(name)
        )


# ---------------------------------------------------------------------------
# Format A: Zencastr
# ---------------------------------------------------------------------------

def build_zencastr(
    lines: Sequence[str],
    default_segment_duration_ms: int,
) -> List[TranscriptSegment]:
    """Parse Zencastr exports.

    Layout::

        00:00.29
        James
        Welcome back everyone...

    HOW: Find a lone timestamp line. The following line is the speaker when
    it passes the speaker heuristic. Text lines are collected until a blank
    line, the next timestamp, or a short capitalized line that is not
    followed by more prose (the next block's speaker). A short capitalized
    line that *is* followed by prose is a sentence fragment and kept as text.
    """
    _require_grammar(lines, is_compact_timestamp, "Zencastr")

    segments: List[TranscriptSegment] = []
    count = len(lines)
    i = 0

    while i < count:
        match = match_compact(lines[i])
        if match is None:
            i += 1
            continue

        start_ms = decode_compact(match)
        i += 1

        speaker: Optional[str] = None
        if i < count and is_speaker_label(lines[i].strip()):
            speaker = lines[i].strip()
            i += 1

        text_lines: List[str] = []
        while i < count:
            text_line = lines[i].strip()
            if not text_line or is_compact_timestamp(text_line):
                break

            if is_speaker_label(text_line):
                followed_by_prose = (
                    i + 1 < count
                    and lines[i + 1].strip() != ""
                    and not is_compact_timestamp(lines[i + 1])
                )
                if not followed_by_prose:
                    break

            text_lines.append(text_line)
            i += 1

        if not text_lines:
            logger.debug("Skipping Zencastr timestamp at %d ms with no text", start_ms)
            continue

        segments.append(
            TranscriptSegment(
                start_ms=start_ms,
                end_ms=start_ms + default_segment_duration_ms,
                speaker=speaker,
                text=" ".join(text_lines),
            )
        )

    return chain_end_times(segments)


# ---------------------------------------------------------------------------
# Format B: time range
# ---------------------------------------------------------------------------

def build_time_range(
    lines: Sequence[str],
    default_segment_duration_ms: int = 0,
) -> List[TranscriptSegment]:
    """Parse "HH:MM:SS - HH:MM:SS [Speaker:] text" lines.

    Start and end both come from the line, so no end-time chaining is
    needed and default_segment_duration_ms is unused. When nothing but an
    optional speaker follows the range, the text is taken from the
    continuation lines below it (up to a blank line or the next range).
    """
    _require_grammar(lines, lambda line: TIME_RANGE_RE.search(line) is not None, "time-range")

    segments: List[TranscriptSegment] = []
    count = len(lines)

    for index, line in enumerate(lines):
        match = TIME_RANGE_RE.search(line)
        if match is None:
            continue

        start_ms, end_ms = decode_time_range(match)
        speaker, text = split_speaker(line[match.end():].strip())

        if not text:
            continuation: List[str] = []
            j = index + 1
            while j < count and lines[j].strip() and TIME_RANGE_RE.search(lines[j]) is None:
                continuation.append(lines[j].strip())
                j += 1
            if speaker is None:
                speaker, text = split_speaker(" ".join(continuation))
            else:
                text = " ".join(continuation)

        if not text:
            logger.debug("Skipping time-range line %d with no text", index + 1)
            continue

        segments.append(
            TranscriptSegment(start_ms=start_ms, end_ms=end_ms, speaker=speaker, text=text)
        )

    return segments


# ---------------------------------------------------------------------------
# Format C: SRT
# ---------------------------------------------------------------------------

def _is_sequence_number(line: str) -> bool:
    try:
        int(line.strip())
    except ValueError:
        return False
    return True


def build_srt(
    lines: Sequence[str],
    default_segment_duration_ms: int = 0,
) -> List[TranscriptSegment]:
    """Parse SubRip blocks into segments.

    HOW: An optional sequence number line is consumed and discarded, then
    the header line supplies start and end. Non-blank lines up to the next
    blank line are the text, joined with single spaces. Lines that are
    neither a sequence number nor a header are skipped one at a time.
    Sequence numbers are not checked here; see validate_srt().
    """
    _require_grammar(lines, lambda line: SRT_TIMESTAMP_RE.search(line) is not None, "SRT")

    segments: List[TranscriptSegment] = []
    count = len(lines)
    i = 0

    while i < count:
        if _is_sequence_number(lines[i]):
            i += 1
            if i >= count:
                break

        match = SRT_TIMESTAMP_RE.search(lines[i])
        if match is None:
            i += 1
            continue

        start_ms, end_ms = decode_srt_range(match)
        i += 1

        text_lines: List[str] = []
        while i < count and lines[i].strip():
            text_lines.append(lines[i].strip())
            i += 1

        speaker, text = split_speaker(" ".join(text_lines))
        if text:
            segments.append(
                TranscriptSegment(start_ms=start_ms, end_ms=end_ms, speaker=speaker, text=text)
            )
        else:
            logger.debug("Skipping SRT block at %d ms with no text", start_ms)

        i += 1  # blank separator

    return segments


BUILDERS: Dict[TranscriptFormat, Builder] = {
    TranscriptFormat.ZENCASTR: build_zencastr,
    TranscriptFormat.TIME_RANGE: build_time_range,
    TranscriptFormat.SRT: build_srt,
}
"""Dispatch table from detected layout to its builder."""
