"""Plain text transcript formatter with speaker-labeled paragraphs.

WHY: The generation layer sends the assistant one block of readable text
per episode, and editors want the same text for review and archival — no
timecodes, just who said what.

HOW: Uses Transcript.full_text(): one "Speaker: text" paragraph per
segment, separated by blank lines, or the raw file content when the
transcript has no timestamps.

RULES:
- Double newline between paragraphs
- Exactly one trailing newline when there is any content
- Output suffix: "-transcript.txt"
- Media type: "text/plain"
"""

from __future__ import annotations

from typing import List

from podcast_metadata.core.ir import Transcript
from podcast_metadata.formatters.base import BaseFormatter, FormatterOutput


class PlainTextFormatter(BaseFormatter):
    """Formatter that produces speaker-labeled plain text paragraphs."""

    @property
    def name(self) -> str:
        return "Plain Text"

    def format(self, transcript: Transcript) -> List[FormatterOutput]:
        content = transcript.full_text().rstrip()
        if content:
            content += "\n"

        return [
            FormatterOutput(
                suffix="-transcript.txt",
                content=content,
                media_type="text/plain",
            )
        ]
