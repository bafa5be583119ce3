"""Unit tests for layout detection.

WHY: Detection decides which builder runs. Wrong precedence sends an SRT
file to the Zencastr builder and silently loses every segment.

HOW: One test per layout, precedence tests with mixed documents, and
window-boundary tests at exactly 50 lines.
"""

from podcast_metadata.core.detector import detect_format
from podcast_metadata.core.ir import TranscriptFormat


class TestDetectFormat:
    """detect_format() classification and precedence."""

    def test_empty_document_is_plain_text(self):
        assert detect_format([]) is TranscriptFormat.PLAIN_TEXT

    def test_prose_is_plain_text(self):
        assert detect_format(["Just some notes.", "No timestamps here."]) is TranscriptFormat.PLAIN_TEXT

    def test_srt(self, srt_text):
        assert detect_format(srt_text.split("\n")) is TranscriptFormat.SRT

    def test_zencastr(self, zencastr_lines):
        assert detect_format(zencastr_lines) is TranscriptFormat.ZENCASTR

    def test_time_range(self, time_range_lines):
        assert detect_format(time_range_lines) is TranscriptFormat.TIME_RANGE

    def test_srt_wins_over_compact(self):
        lines = ["00:00.29", "1", "00:00:01,000 --> 00:00:02,000", "Hi."]
        assert detect_format(lines) is TranscriptFormat.SRT

    def test_compact_wins_over_time_range(self):
        lines = ["00:00:00 - 00:00:05 Hello.", "00:05.00", "James", "Hi."]
        assert detect_format(lines) is TranscriptFormat.ZENCASTR

    def test_inline_compact_stamp_is_not_zencastr(self):
        assert detect_format(["Intro at 00:05.00 sharp"]) is TranscriptFormat.PLAIN_TEXT

    def test_dot_millisecond_header_is_not_srt(self):
        lines = ["1", "00:00:00.000 --> 00:00:05.000", "Hello"]
        assert detect_format(lines) is TranscriptFormat.PLAIN_TEXT

    def test_header_on_line_50_is_seen(self):
        lines = ["prose"] * 49 + ["00:00:01,000 --> 00:00:02,000"]
        assert detect_format(lines) is TranscriptFormat.SRT

    def test_header_on_line_51_is_not_seen(self):
        lines = ["prose"] * 50 + ["00:00:01,000 --> 00:00:02,000"]
        assert detect_format(lines) is TranscriptFormat.PLAIN_TEXT

    def test_accepts_tuples(self, zencastr_lines):
        assert detect_format(tuple(zencastr_lines)) is TranscriptFormat.ZENCASTR
