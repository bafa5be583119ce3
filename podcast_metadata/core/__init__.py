"""Core parsing, repair and SRT modules.

WHY: The core package is the stable heart of the tool — the IR dataclasses,
the layout detector and builders, segment repair, and SRT encoding and
validation. Formatters, the output stage and the CLI all sit on top of it.

HOW: timestamps.py holds the grammars, detector.py and builders.py turn
lines into segments, parser.py ties them together, repair.py fixes timing,
srt.py and chapters.py render output text.

RULES:
- Everything in core is pure apart from load_transcript()'s file read
- IR dataclasses are the contract — change with care
"""

from podcast_metadata.core.chapters import format_chapters_for_youtube, parse_chapter_response
from podcast_metadata.core.ir import (
    Chapter,
    SrtConversionResult,
    Transcript,
    TranscriptFormat,
    TranscriptSegment,
)
from podcast_metadata.core.parser import detect_format, load_transcript, parse_document
from podcast_metadata.core.repair import RepairResult, repair_segments
from podcast_metadata.core.srt import convert_to_srt, validate_srt

__all__ = [
    "Chapter",
    "RepairResult",
    "SrtConversionResult",
    "Transcript",
    "TranscriptFormat",
    "TranscriptSegment",
    "convert_to_srt",
    "detect_format",
    "format_chapters_for_youtube",
    "load_transcript",
    "parse_chapter_response",
    "parse_document",
    "repair_segments",
    "validate_srt",
]
