"""SRT subtitle formatter — repaired, validator-clean SubRip output.

WHY: Podcast platforms and video editors accept SRT for captions. Parsed
transcripts may be out of order or overlap; players reject both. This
formatter is the bridge between the Transcript IR and convert_to_srt().

HOW: Calls convert_to_srt() on the transcript's segments. The repair
warnings travel with the output so the caller can show them.

RULES:
- Skipped (no output) when the transcript has no timestamps
- One cue per segment, "Speaker: text" when a speaker is known
- Output suffix: ".srt"
- Media type: "application/x-subrip"
- Never modifies the Transcript IR
"""

from __future__ import annotations

from typing import List

from podcast_metadata.core.ir import Transcript
from podcast_metadata.core.srt import convert_to_srt
from podcast_metadata.formatters.base import BaseFormatter, FormatterOutput


class SRTFormatter(BaseFormatter):
    """Formatter that produces one SRT subtitle file."""

    @property
    def name(self) -> str:
        return "SRT Subtitles"

    def format(self, transcript: Transcript) -> List[FormatterOutput]:
        if not transcript.has_timestamps:
            return []

        result = convert_to_srt(transcript.segments)

        return [
            FormatterOutput(
                suffix=".srt",
                content=result.content,
                media_type="application/x-subrip",
                warnings=list(result.errors),
            )
        ]
