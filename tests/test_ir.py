"""Unit tests for the transcript IR records."""

import dataclasses

import pytest

from podcast_metadata.core.ir import Transcript, TranscriptFormat, TranscriptSegment


class TestTranscriptFormat:

    def test_values_are_strings(self):
        assert TranscriptFormat.SRT == "srt"
        assert TranscriptFormat("time_range") is TranscriptFormat.TIME_RANGE
        assert [f.value for f in TranscriptFormat] == ["plain_text", "zencastr", "time_range", "srt"]


class TestTranscriptSegment:

    def test_is_frozen(self):
        segment = TranscriptSegment(start_ms=0, end_ms=1000, text="Hi.")
        with pytest.raises(dataclasses.FrozenInstanceError):
            segment.start_ms = 5

    def test_replace_returns_new_value(self):
        segment = TranscriptSegment(start_ms=0, end_ms=1000, text="Hi.")
        moved = dataclasses.replace(segment, start_ms=500)
        assert segment.start_ms == 0
        assert moved.start_ms == 500

    def test_renderings(self):
        segment = TranscriptSegment(start_ms=61500, end_ms=3723456, speaker="Sarah", text="Hi.")
        assert segment.start_srt == "00:01:01,500"
        assert segment.end_srt == "01:02:03,456"
        assert segment.start_youtube == "01:01"
        assert segment.labelled_text == "Sarah: Hi."

    def test_labelled_text_without_speaker(self):
        assert TranscriptSegment(start_ms=0, end_ms=1, text="Hi.").labelled_text == "Hi."


class TestTranscript:

    def test_timed_properties(self, zencastr_transcript):
        assert zencastr_transcript.has_timestamps
        assert zencastr_transcript.duration_ms == 67100
        assert zencastr_transcript.duration_seconds == pytest.approx(67.1)
        assert zencastr_transcript.duration_minutes == pytest.approx(67.1 / 60)

    def test_full_text(self, zencastr_transcript):
        text = zencastr_transcript.full_text()
        assert text.startswith("James: Welcome back everyone to the show.\n\nSarah: ")
        assert text.count("\n\n") == 2

    def test_text_with_timestamps(self, zencastr_transcript):
        lines = zencastr_transcript.text_with_timestamps().split("\n")
        assert lines[0] == "[00:00 - 00:05] James: Welcome back everyone to the show."
        assert lines[2] == "[01:02 - 01:07] James: Let us talk about parsing."

    def test_plain_text_falls_back_to_raw(self, plain_transcript):
        assert not plain_transcript.has_timestamps
        assert plain_transcript.duration_ms == 0
        assert plain_transcript.full_text() == plain_transcript.raw_content
        assert plain_transcript.text_with_timestamps() == plain_transcript.raw_content

    def test_plain_text_duration_from_word_count(self):
        transcript = Transcript(file_path="x.txt", raw_content=" ".join(["word"] * 300))
        assert transcript.duration_minutes == pytest.approx(2.0)
