"""End-to-end tests for the command-line interface.

WHY: The CLI is the user-facing surface. Exit codes and the files it
leaves behind are its contract.

HOW: Calls main() with an explicit argv inside tmp_path. Every run passes
--settings pointing at tmp_path so no real user settings are read.
"""

import json

import pytest

from podcast_metadata.cli import build_parser, main


def _run(argv):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


class TestConvert:

    def test_zencastr_to_all_outputs(self, tmp_path, write_file, zencastr_lines, capsys):
        source = write_file("episode.txt", "\n".join(zencastr_lines))
        settings = tmp_path / "settings.json"

        code = _run([str(source), "--settings", str(settings)])

        assert code == 0
        assert (tmp_path / "episode.srt").is_file()
        assert (tmp_path / "episode-transcript.txt").is_file()
        assert (tmp_path / "episode-timestamped.txt").is_file()
        manifest = json.loads((tmp_path / "episode-manifest.json").read_text(encoding="utf-8"))
        assert manifest["format"] == "zencastr"
        assert "Done! Saved 4 file(s)" in capsys.readouterr().err

    def test_output_dir_formats_and_overrides(self, tmp_path, write_file, zencastr_lines):
        source = write_file("episode.txt", "\n".join(zencastr_lines))
        out_dir = tmp_path / "out"
        out_dir.mkdir()

        code = _run([
            str(source),
            "--output-dir", str(out_dir),
            "--formats", "srt",
            "--segment-duration-ms", "1000",
            "--context", "Guest: Sarah",
            "--settings", str(tmp_path / "settings.json"),
        ])

        assert code == 0
        srt = (out_dir / "episode.srt").read_text(encoding="utf-8")
        assert "00:01:02,100 --> 00:01:03,100" in srt
        manifest = json.loads((out_dir / "episode-manifest.json").read_text(encoding="utf-8"))
        assert manifest["episodeContext"] == "Guest: Sarah"
        assert not (out_dir / "episode-transcript.txt").exists()

    def test_chapters_file(self, tmp_path, write_file, zencastr_lines):
        source = write_file("episode.txt", "\n".join(zencastr_lines))
        chapters = write_file("reply.txt", "Here you go:\n0:30 Welcome\n1:02 Parsing\n")

        code = _run([
            str(source), "--chapters", str(chapters), "--formats", "plain_text",
            "--settings", str(tmp_path / "settings.json"),
        ])

        assert code == 0
        assert (tmp_path / "episode-chapters.txt").read_text(encoding="utf-8") == (
            "00:00 Introduction\n00:30 Welcome\n01:02 Parsing\n"
        )

    def test_plain_text_input(self, tmp_path, write_file, capsys):
        source = write_file("notes.txt", "Just some notes without timestamps.\n")

        code = _run([str(source), "--settings", str(tmp_path / "settings.json")])

        assert code == 0
        assert not (tmp_path / "notes.srt").exists()
        assert (tmp_path / "notes-transcript.txt").is_file()
        assert "loaded as plain text" in capsys.readouterr().err

    def test_srt_warnings_are_reported(self, tmp_path, write_file, capsys):
        source = write_file("log.txt", "00:00:00 - 00:00:10 A\n00:00:05 - 00:00:15 B\n")

        code = _run([str(source), "--formats", "srt", "--settings", str(tmp_path / "settings.json")])

        assert code == 0
        err = capsys.readouterr().err
        assert "SRT conversion warnings (1):" in err
        assert "Segment 2 overlaps" in err

    def test_missing_input(self, tmp_path, capsys):
        code = _run([str(tmp_path / "missing.txt"), "--settings", str(tmp_path / "settings.json")])
        assert code == 1
        assert "File not found" in capsys.readouterr().err

    def test_unknown_format(self, tmp_path, write_file, zencastr_lines, capsys):
        source = write_file("episode.txt", "\n".join(zencastr_lines))
        code = _run([str(source), "--formats", "docx", "--settings", str(tmp_path / "settings.json")])

        assert code == 1
        assert "Unknown format 'docx'" in capsys.readouterr().err

    def test_bad_settings_file(self, tmp_path, write_file, zencastr_lines):
        source = write_file("episode.txt", "\n".join(zencastr_lines))
        settings = write_file("settings.json", "{broken")

        assert _run([str(source), "--settings", str(settings)]) == 1

    def test_no_input_is_usage_error(self):
        assert _run([]) == 2

    def test_invalid_utf8_input(self, tmp_path, capsys):
        source = tmp_path / "episode.txt"
        source.write_bytes(b"00:00.00\nJames\nCaf\xe9 talk\n")

        code = _run([str(source), "--settings", str(tmp_path / "settings.json")])

        assert code == 1
        assert "not valid UTF-8" in capsys.readouterr().err
        assert not (tmp_path / "episode.srt").exists()

    def test_wrongly_typed_settings(self, tmp_path, write_file, zencastr_lines, capsys):
        source = write_file("ep.txt", "\n".join(zencastr_lines))
        settings = write_file("settings.json", json.dumps({"model": 123}))

        assert _run([str(source), "--settings", str(settings)]) == 1
        assert "Error: Invalid settings file" in capsys.readouterr().err
        assert sorted(p.name for p in tmp_path.iterdir()) == ["ep.txt", "settings.json"]

    def test_non_positive_segment_duration(self, tmp_path, write_file, zencastr_lines, capsys):
        source = write_file("episode.txt", "\n".join(zencastr_lines))

        code = _run([
            str(source), "--segment-duration-ms", "0",
            "--settings", str(tmp_path / "settings.json"),
        ])

        assert code == 1
        assert "Invalid option value" in capsys.readouterr().err

    def test_reports_suggested_chapters(self, tmp_path, write_file, zencastr_lines, capsys):
        source = write_file("episode.txt", "\n".join(zencastr_lines))
        chapters = write_file("reply.txt", "0:00 Only one\n")

        code = _run([
            str(source), "--chapters", str(chapters), "--formats", "plain_text",
            "--settings", str(tmp_path / "settings.json"),
        ])

        assert code == 0
        err = capsys.readouterr().err
        assert "Suggested chapters: 3" in err
        assert "Note: expected 3-12 chapters" in err


class TestValidate:

    def test_valid_file(self, write_file, srt_text, capsys):
        path = write_file("good.srt", srt_text)
        assert _run(["--validate", str(path)]) == 0
        assert "valid SRT" in capsys.readouterr().err

    def test_invalid_file(self, write_file, capsys):
        path = write_file("bad.srt", "1\n00:00:00.000 --> 00:00:05.000\nHello\n")

        assert _run(["--validate", str(path)]) == 1
        err = capsys.readouterr().err
        assert "1 problem(s) found" in err
        assert "Line 2: Timestamp uses '.'" in err

    def test_many_violations_are_truncated(self, write_file, capsys):
        content = "".join("x{}\n".format(i) for i in range(8))
        path = write_file("junk.srt", content)

        assert _run(["--validate", str(path)]) == 1
        assert "... and 3 more" in capsys.readouterr().err

    def test_missing_file(self, tmp_path):
        assert _run(["--validate", str(tmp_path / "nope.srt")]) == 1

    def test_invalid_utf8_file(self, tmp_path, capsys):
        path = tmp_path / "bad.srt"
        path.write_bytes(b"1\n00:00:00,000 --> 00:00:01,000\nCaf\xe9\n")

        assert _run(["--validate", str(path)]) == 1
        assert "not valid UTF-8" in capsys.readouterr().err


class TestParser:

    def test_defaults(self):
        args = build_parser().parse_args(["episode.txt"])
        assert args.input_file == "episode.txt"
        assert args.formats is None
        assert args.segment_duration_ms is None
        assert not args.verbose
