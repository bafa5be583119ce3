"""Timestamp-annotated transcript formatter.

WHY: Chapter generation needs to know *when* topics change. The assistant
gets one "[start - end] Speaker: text" line per segment so it can anchor
chapter markers to real times.

HOW: Uses Transcript.text_with_timestamps(). Times are YouTube style
(MM:SS, or HH:MM:SS past the first hour).

RULES:
- Skipped (no output) when the transcript has no timestamps
- Output suffix: "-timestamped.txt"
- Media type: "text/plain"
"""

from __future__ import annotations

from typing import List

from podcast_metadata.core.ir import Transcript
from podcast_metadata.formatters.base import BaseFormatter, FormatterOutput


class TimestampedTextFormatter(BaseFormatter):
    """Formatter that produces one timestamped line per segment."""

    @property
    def name(self) -> str:
        return "Timestamped Text"

    def format(self, transcript: Transcript) -> List[FormatterOutput]:
        if not transcript.has_timestamps:
            return []

        return [
            FormatterOutput(
                suffix="-timestamped.txt",
                content=transcript.text_with_timestamps() + "\n",
                media_type="text/plain",
            )
        ]
