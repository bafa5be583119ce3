"""Intermediate representation dataclasses for parsed transcripts.

WHY: Every input layout (Zencastr, time range, SRT, plain text) carries
the same information in a different shape. Downstream consumers — the SRT
encoder, the text projections, the generation prompts, the manifest —
need one well-typed form that does not care where the transcript came from.

HOW: Four records form the model:
  TranscriptFormat     — closed enumeration of recognized layouts
  TranscriptSegment    — one timestamped utterance (frozen value record)
  Transcript           — ordered segments plus provenance and raw text
  SrtConversionResult  — SRT text with the warnings raised while repairing it

RULES:
- All times are integer milliseconds
- TranscriptSegment is frozen; adjust it with dataclasses.replace()
- start_ms < end_ms holds once segments have been repaired, not before
- raw_content is always retained verbatim so plain-text input stays usable
- duration_ms is the end time of the last segment (0 with no segments)
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field
from typing import List, Optional

from podcast_metadata.core.timestamps import format_srt_time, format_youtube_time

# Average speaking rate used when a transcript has no timestamps.
WORDS_PER_MINUTE = 150.0

_WORD_SPLIT_RE = re.compile(r"[ \n\r\t]+")


class TranscriptFormat(str, enum.Enum):
    """Detected layout of a transcript file.

    HOW: Inherits from str so values serialize cleanly to JSON.

    RULES:
    - plain_text: no timestamp grammar recognized (loaded as raw content)
    - zencastr: lone compact timestamp lines, optional speaker line, text
    - time_range: "HH:MM:SS - HH:MM:SS text" lines
    - srt: standard SubRip blocks
    """

    PLAIN_TEXT = "plain_text"
    ZENCASTR = "zencastr"
    TIME_RANGE = "time_range"
    SRT = "srt"


@dataclass(frozen=True)
class TranscriptSegment:
    """One timestamped unit of transcript speech.

    WHY: Builders create segments whose end time is often provisional
    (start + default duration). Freezing the record forces every later
    correction to produce a new value instead of editing shared state.

    RULES:
    - start_ms / end_ms: integer milliseconds
    - speaker: short display name, or None when not detectable
    - text: non-empty spoken content
    """

    start_ms: int
    end_ms: int
    text: str
    speaker: Optional[str] = None

    @property
    def start_srt(self) -> str:
        return format_srt_time(self.start_ms)

    @property
    def end_srt(self) -> str:
        return format_srt_time(self.end_ms)

    @property
    def start_youtube(self) -> str:
        return format_youtube_time(self.start_ms)

    @property
    def labelled_text(self) -> str:
        """Text prefixed with "Speaker: " when a speaker is known."""
        if self.speaker:
            return "{}: {}".format(self.speaker, self.text)
        return self.text


@dataclass
class Transcript:
    """A loaded transcript — parsed into segments or kept as raw text.

    WHY: This is the top-level container handed to formatters and to the
    generation layer. Plain-text transcripts have no segments but still
    need a usable full text and a duration estimate.

    RULES:
    - segments: in parse order; call repair_segments() before relying on order
    - has_timestamps is True iff at least one segment was parsed
    - full_text() / text_with_timestamps() fall back to raw_content
    """

    file_path: str
    format: TranscriptFormat = TranscriptFormat.PLAIN_TEXT
    raw_content: str = ""
    segments: List[TranscriptSegment] = field(default_factory=list)

    @property
    def has_timestamps(self) -> bool:
        return len(self.segments) > 0

    @property
    def duration_ms(self) -> int:
        return self.segments[-1].end_ms if self.segments else 0

    @property
    def duration_seconds(self) -> float:
        return self.duration_ms / 1000.0

    @property
    def duration_minutes(self) -> float:
        """Duration in minutes, estimated from word count without timestamps."""
        if self.has_timestamps:
            return self.duration_seconds / 60.0
        words = [w for w in _WORD_SPLIT_RE.split(self.raw_content) if w]
        return len(words) / WORDS_PER_MINUTE

    def full_text(self) -> str:
        """Speaker-labelled text, one paragraph per segment."""
        if not self.has_timestamps:
            return self.raw_content
        return "\n\n".join(s.labelled_text for s in self.segments)

    def text_with_timestamps(self) -> str:
        """One "[start - end] text" line per segment, in YouTube time."""
        if not self.has_timestamps:
            return self.raw_content
        return "\n".join(
            "[{} - {}] {}".format(
                s.start_youtube, format_youtube_time(s.end_ms), s.labelled_text
            )
            for s in self.segments
        )


@dataclass(frozen=True)
class SrtConversionResult:
    """Output of SRT encoding.

    RULES:
    - content: complete SRT document ending in exactly one newline
    - errors: human-readable messages raised while repairing, in order
    - is_valid: True iff every error is a recoverable "Warning:" message
    """

    content: str
    errors: List[str]
    is_valid: bool


@dataclass(frozen=True)
class Chapter:
    """A YouTube chapter marker.

    RULES:
    - timestamp: already formatted (MM:SS or HH:MM:SS)
    - summary: optional, carried into the manifest only
    """

    timestamp: str
    title: str
    summary: Optional[str] = None
