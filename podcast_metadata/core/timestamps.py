"""Timestamp grammars for every supported transcript layout.

WHY: Each input layout writes time differently — Zencastr uses compact
centisecond stamps on their own line, time-range logs use whole-second
HH:MM:SS pairs, and SRT uses comma-delimited milliseconds. Everything
downstream works in integer milliseconds, so decoding lives in one place.

HOW: One compiled regex per grammar plus a decoder that turns a match
into milliseconds. The inverse renderers (SRT and YouTube style) live
here too so encode and decode share the same arithmetic.

RULES:
- COMPACT_TIMESTAMP_RE is anchored on the whole (stripped) line, so it can
  never match a fragment of an SRT header
- Compact 2-field form (M:SS.cc) means zero hours; centiseconds × 10 = ms
- Time-range and SRT fields are integers:
  hours*3600000 + minutes*60000 + seconds*1000 [+ milliseconds]
- SRT rendering is HH:MM:SS,mmm; from 100 hours on the hours field
  widens to three or more digits, and SRT_TIMESTAMP_RE accepts that width
  so encoder output stays parseable and validator-clean
- YouTube rendering drops the hours field when it is zero
"""

from __future__ import annotations

import re
from re import Match

# Zencastr: MM:SS.cc or HH:MM:SS.cc (centiseconds), alone on a line
COMPACT_TIMESTAMP_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?\.(\d{2})$")

# Time range: HH:MM:SS - HH:MM:SS (dash, en dash or arrow separators)
TIME_RANGE_RE = re.compile(
    r"(\d{1,2}):(\d{2}):(\d{2})\s*[-–>]+\s*(\d{1,2}):(\d{2}):(\d{2})"
)

# SRT header: HH:MM:SS,mmm --> HH:MM:SS,mmm (hours may run past 99)
SRT_TIMESTAMP_RE = re.compile(
    r"(\d{2,}):(\d{2}):(\d{2}),(\d{3})\s*-->\s*(\d{2,}):(\d{2}):(\d{2}),(\d{3})"
)

_MS_PER_HOUR = 3_600_000
_MS_PER_MINUTE = 60_000
_MS_PER_SECOND = 1_000


def to_ms(hours: int, minutes: int, seconds: int, milliseconds: int = 0) -> int:
    """Combine clock fields into total milliseconds."""
    return (
        hours * _MS_PER_HOUR
        + minutes * _MS_PER_MINUTE
        + seconds * _MS_PER_SECOND
        + milliseconds
    )


def match_compact(line: str) -> Match[str] | None:
    """Match a Zencastr timestamp occupying the whole stripped line."""
    return COMPACT_TIMESTAMP_RE.match(line.strip())


def is_compact_timestamp(line: str) -> bool:
    return match_compact(line) is not None


def decode_compact(match: Match[str]) -> int:
    """Decode a COMPACT_TIMESTAMP_RE match into milliseconds.

    Groups: 1=first number, 2=second number, 3=optional third number,
    4=centiseconds. With three fields the first is hours; with two the
    first is minutes.
    """
    first = int(match.group(1))
    second = int(match.group(2))
    centiseconds = int(match.group(4))

    if match.group(3) is not None:
        hours, minutes, seconds = first, second, int(match.group(3))
    else:
        hours, minutes, seconds = 0, first, second

    return to_ms(hours, minutes, seconds, centiseconds * 10)


def decode_time_range(match: Match[str]) -> tuple[int, int]:
    """Decode a TIME_RANGE_RE match into (start_ms, end_ms)."""
    fields = [int(g) for g in match.groups()]
    return to_ms(*fields[0:3]), to_ms(*fields[3:6])


def decode_srt_range(match: Match[str]) -> tuple[int, int]:
    """Decode an SRT_TIMESTAMP_RE match into (start_ms, end_ms)."""
    fields = [int(g) for g in match.groups()]
    return to_ms(*fields[0:4]), to_ms(*fields[4:8])


def _split_ms(total_ms: int) -> tuple[int, int, int, int]:
    hours, remainder = divmod(total_ms, _MS_PER_HOUR)
    minutes, remainder = divmod(remainder, _MS_PER_MINUTE)
    seconds, milliseconds = divmod(remainder, _MS_PER_SECOND)
    return hours, minutes, seconds, milliseconds


def format_srt_time(total_ms: int) -> str:
    """Render milliseconds as an SRT timestamp: HH:MM:SS,mmm."""
    hours, minutes, seconds, milliseconds = _split_ms(total_ms)
    return "{:02d}:{:02d}:{:02d},{:03d}".format(hours, minutes, seconds, milliseconds)


def format_youtube_time(total_ms: int) -> str:
    """Render milliseconds as a YouTube chapter stamp: MM:SS or HH:MM:SS."""
    hours, minutes, seconds, _ = _split_ms(total_ms)
    if hours > 0:
        return "{:02d}:{:02d}:{:02d}".format(hours, minutes, seconds)
    return "{:02d}:{:02d}".format(minutes, seconds)
