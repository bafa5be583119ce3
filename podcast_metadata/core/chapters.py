"""YouTube chapter parsing and formatting.

WHY: Chapter markers come back from the AI assistant as free text
("0:00 Intro", "12:5 Guest story" ...). YouTube only accepts a clean
"<timestamp> <title>" list whose first entry starts at zero.

HOW: parse_chapter_response() picks out "timestamp title" lines, pads the
timestamp fields to two digits, and prepends an "Introduction" chapter when
the first chapter is not at zero. format_chapters_for_youtube() renders the
list back to text.

RULES:
- Chapter lines match ^(\\d{1,2}:\\d{2}(?::\\d{2})?)\\s+(.+)$
- Timestamps normalize to MM:SS or HH:MM:SS, zero-padded
- Chapters with empty titles are dropped
- Formatting performs no validation; that belongs to the parser
"""

from __future__ import annotations

import re
from typing import List, Sequence

from podcast_metadata.core.ir import Chapter

_CHAPTER_LINE_RE = re.compile(r"^(\d{1,2}:\d{2}(?::\d{2})?)\s+(.+)$", re.MULTILINE)

_ZERO_TIMESTAMPS = frozenset({"00:00", "00:00:00"})

INTRODUCTION_TITLE = "Introduction"


def normalize_timestamp(timestamp: str) -> str:
    """Zero-pad every field of an M:SS or H:MM:SS timestamp.

    Anything that is not two or three numeric fields is returned unchanged.
    """
    parts = timestamp.split(":")
    if len(parts) not in (2, 3) or not all(p.isdigit() for p in parts):
        return timestamp
    return ":".join("{:02d}".format(int(p)) for p in parts)


def parse_chapter_response(response: str) -> List[Chapter]:
    """Extract chapters from an assistant response.

    Args:
        response: Raw assistant text, one chapter per line.

    Returns:
        Chapters in response order, starting at 00:00.
    """
    chapters: List[Chapter] = []
    for match in _CHAPTER_LINE_RE.finditer(response):
        title = match.group(2).strip()
        if title:
            chapters.append(Chapter(timestamp=normalize_timestamp(match.group(1)), title=title))

    if chapters and chapters[0].timestamp not in _ZERO_TIMESTAMPS:
        chapters.insert(0, Chapter(timestamp="00:00", title=INTRODUCTION_TITLE))

    return chapters


def format_chapters_for_youtube(chapters: Sequence[Chapter]) -> str:
    """Render chapters as "<timestamp> <title>" lines for a YouTube description."""
    return "\n".join(
        "{} {}".format(chapter.timestamp, chapter.title) for chapter in chapters
    ).rstrip()
