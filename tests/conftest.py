"""Shared test fixtures for the podcast_metadata test suite.

WHY: Most test modules need the same small, hand-checked documents in each
supported layout. Centralizing them here keeps the expected timings in one
place.

HOW: Module-level constants hold the raw documents; pytest fixtures hand
out fresh copies, plus a pre-built Transcript IR for the Zencastr sample.

RULES:
- Expected timings in the docstrings are computed by hand, not by the code
- Fixtures return new lists so tests may mutate them freely
"""

from typing import List

import pytest

from podcast_metadata.core.ir import Transcript, TranscriptFormat, TranscriptSegment


# ---------------------------------------------------------------------------
# Sample documents
# ---------------------------------------------------------------------------

# Starts: 00:00.29 → 290 ms, 00:05.50 → 5500 ms, 01:02.10 → 62100 ms
ZENCASTR_LINES: List[str] = [
    "00:00.29",
    "James",
    "Welcome back everyone to the show.",
    "",
    "00:05.50",
    "Sarah",
    "Thanks for having me.",
    "It is great to be here.",
    "",
    "01:02.10",
    "James",
    "Let us talk about parsing.",
    "",
]

TIME_RANGE_LINES: List[str] = [
    "00:00:00 - 00:00:05 James: Welcome to the podcast.",
    "00:00:05 - 00:00:12 Sarah: Glad to be here.",
    "not a timestamp line",
    "00:00:12 – 00:00:20 And we are off.",
]

SRT_TEXT = (
    "1\n"
    "00:00:01,000 --> 00:00:04,500\n"
    "James: Hello there.\n"
    "\n"
    "2\n"
    "00:00:04,500 --> 00:00:09,000\n"
    "This spans\n"
    "two lines.\n"
    "\n"
)

PLAIN_TEXT = (
    "Welcome back everyone to the show.\n"
    "Today we are talking about transcripts.\n"
)


@pytest.fixture
def zencastr_lines():
    return list(ZENCASTR_LINES)


@pytest.fixture
def time_range_lines():
    return list(TIME_RANGE_LINES)


@pytest.fixture
def srt_text():
    return SRT_TEXT


@pytest.fixture
def zencastr_transcript():
    """Transcript IR equivalent to parsing ZENCASTR_LINES with 5000 ms default."""
    return Transcript(
        file_path="/tmp/episode.txt",
        format=TranscriptFormat.ZENCASTR,
        raw_content="\n".join(ZENCASTR_LINES),
        segments=[
            TranscriptSegment(start_ms=290, end_ms=5500, speaker="James",
                              text="Welcome back everyone to the show."),
            TranscriptSegment(start_ms=5500, end_ms=62100, speaker="Sarah",
                              text="Thanks for having me. It is great to be here."),
            TranscriptSegment(start_ms=62100, end_ms=67100, speaker="James",
                              text="Let us talk about parsing."),
        ],
    )


@pytest.fixture
def plain_transcript():
    return Transcript(
        file_path="/tmp/notes.txt",
        format=TranscriptFormat.PLAIN_TEXT,
        raw_content=PLAIN_TEXT,
    )


@pytest.fixture
def write_file(tmp_path):
    """Write text to a file under tmp_path and return its path."""

    def _write(name, content):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
