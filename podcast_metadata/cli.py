"""Command-line interface for the Podcast Metadata Generator.

WHY: Users need a simple way to turn a transcript export into subtitle
and text files from the terminal, and to check SRT files they received
from elsewhere. The CLI wires together settings, transcript loading,
pluggable formatter output, chapter parsing, and file saving behind a
single command.

HOW: Uses argparse. In convert mode it loads settings, parses the
transcript, optionally parses a saved assistant chapter reply, runs the
selected formatters and writes everything via save_outputs(). In
--validate mode it runs validate_srt() on a file and reports violations.
Status messages go to stderr.

RULES:
- Positional argument: transcript file path (omit when using --validate)
- --formats: comma-separated formatter keys (default: all registered)
- --segment-duration-ms overrides the setting for this run only
- Warnings and violations are shown truncated to the first 5
- Exit codes: 0 = success, 1 = error or SRT violations found
- Status output goes to stderr (not stdout)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from pydantic import ValidationError

from podcast_metadata.config import load_settings
from podcast_metadata.core.chapters import parse_chapter_response
from podcast_metadata.core.parser import load_transcript, read_text_file
from podcast_metadata.core.srt import validate_srt
from podcast_metadata.exceptions import PodcastMetadataError
from podcast_metadata.formatters import FORMATTERS
from podcast_metadata.output import save_outputs

logger = logging.getLogger(__name__)

MAX_SHOWN_MESSAGES = 5


def _status(msg: str) -> None:
    """Print a status message to stderr, flushed immediately."""
    print(msg, file=sys.stderr, flush=True)


def _error(msg: str) -> None:
    print("Error: {}".format(msg), file=sys.stderr, flush=True)


def _show_messages(messages: Sequence[str], limit: int = MAX_SHOWN_MESSAGES) -> None:
    """Print up to ``limit`` messages, then a count of the rest."""
    for message in messages[:limit]:
        _status("  {}".format(message))
    if len(messages) > limit:
        _status("  ... and {} more".format(len(messages) - limit))


def _run_validate(srt_file: str) -> int:
    """Validate an SRT file and report violations.

    Returns:
        Process exit code: 0 when valid, 1 on violations or read failure.
    """
    path = Path(srt_file)
    if not path.is_file():
        _error("File not found: {}".format(path))
        return 1

    try:
        content = read_text_file(path)
    except PodcastMetadataError as e:
        _error(str(e))
        return 1

    violations = validate_srt(content)
    if not violations:
        _status("{}: valid SRT".format(path.name))
        return 0

    _status("{}: {} problem(s) found".format(path.name, len(violations)))
    _show_messages(violations)
    return 1


def _parse_format_keys(formats: Optional[str]) -> List[str]:
    if not formats:
        return list(FORMATTERS.keys())

    keys = [f.strip() for f in formats.split(",") if f.strip()]
    unknown = [key for key in keys if key not in FORMATTERS]
    if unknown:
        raise ValueError(
            "Unknown format '{}'. Available formats: {}".format(
                unknown[0], ", ".join(sorted(FORMATTERS.keys()))
            )
        )
    return keys


def _run_convert(args: argparse.Namespace) -> int:
    """Load a transcript and write all requested outputs.

    Returns:
        Process exit code.
    """
    input_path = Path(args.input_file).resolve()
    if not input_path.is_file():
        _error("File not found: {}".format(input_path))
        return 1

    output_dir = Path(args.output_dir).resolve() if args.output_dir else input_path.parent
    if not output_dir.is_dir():
        _error("Output directory does not exist: {}".format(output_dir))
        return 1

    try:
        format_keys = _parse_format_keys(args.formats)
    except ValueError as e:
        _error(str(e))
        return 1

    try:
        settings = load_settings(args.settings)
    except PodcastMetadataError as e:
        _error(str(e))
        return 1

    try:
        if args.segment_duration_ms is not None:
            settings.default_segment_duration_ms = args.segment_duration_ms
        if args.context:
            settings.episode_context = args.context
    except ValidationError as e:
        _error("Invalid option value: {}".format(e.errors()[0]["msg"]))
        return 1

    _status("Loading transcript...")
    transcript = load_transcript(input_path, settings)
    if transcript.has_timestamps:
        _status("  Format: {}, {} segments, {:.1f} minutes".format(
            transcript.format.value,
            len(transcript.segments),
            transcript.duration_minutes,
        ))
    else:
        _status("  No timestamps found; loaded as plain text (~{:.1f} minutes)".format(
            transcript.duration_minutes,
        ))
    target_chapters = settings.calculate_target_chapters(transcript.duration_minutes)
    _status("  Suggested chapters: {}".format(target_chapters))

    chapters = []
    if args.chapters:
        chapters_path = Path(args.chapters)
        if not chapters_path.is_file():
            _error("Chapters file not found: {}".format(chapters_path))
            return 1
        chapters = parse_chapter_response(read_text_file(chapters_path))
        _status("  Parsed {} chapters".format(len(chapters)))
        if not settings.min_chapters <= len(chapters) <= settings.max_chapters:
            _status("  Note: expected {}-{} chapters for this episode".format(
                settings.min_chapters, settings.max_chapters,
            ))

    _status("Writing output...")
    report = save_outputs(
        transcript,
        output_dir,
        format_keys=format_keys,
        settings=settings,
        chapters=chapters,
    )

    if report.srt_warnings:
        _status("SRT conversion warnings ({}):".format(len(report.srt_warnings)))
        _show_messages(report.srt_warnings)

    _status("")
    _status("Done! Saved {} file(s) to {}".format(len(report.saved_files), output_dir))
    for f in report.saved_files:
        _status("  {}".format(f.name))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    RULES:
    - Positional: input_file (optional only when --validate is given)
    - Optional: --validate, --output-dir, --formats, --chapters
    - Optional: --segment-duration-ms, --settings, --context, --verbose
    """
    parser = argparse.ArgumentParser(
        prog="podcast_metadata",
        description="Parse podcast transcripts (Zencastr, time-range, SRT or plain text) "
                    "and produce SRT subtitles, text transcripts, chapters and a manifest.",
    )

    parser.add_argument(
        "input_file",
        nargs="?",
        default=None,
        help="Path to the transcript file.",
    )

    parser.add_argument(
        "--validate",
        metavar="SRT_FILE",
        default=None,
        help="Validate an SRT file and report problems instead of converting.",
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save output files (default: same as input file).",
    )

    parser.add_argument(
        "--formats",
        default=None,
        help="Comma-separated list of output formats. "
             "Available: {}. Default: all.".format(", ".join(sorted(FORMATTERS.keys()))),
    )

    parser.add_argument(
        "--chapters",
        default=None,
        help="Path to a saved assistant reply listing chapters as 'MM:SS Title' lines.",
    )

    parser.add_argument(
        "--segment-duration-ms",
        type=int,
        default=None,
        help="Provisional duration of the last Zencastr segment (default: from settings).",
    )

    parser.add_argument(
        "--settings",
        default=None,
        help="Path to a settings JSON file (default: ~/.podcast-metadata-generator/settings.json).",
    )

    parser.add_argument(
        "--context",
        default=None,
        help="Episode context (guest names, topics) recorded in the manifest.",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log parsing details to stderr.",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    - Always exits via sys.exit() with the run's exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.validate:
        sys.exit(_run_validate(args.validate))

    if not args.input_file:
        parser.error("a transcript file is required unless --validate is given")

    try:
        code = _run_convert(args)
    except KeyboardInterrupt:
        _status("\nCancelled by user.")
        sys.exit(130)
    except (PodcastMetadataError, OSError) as e:
        logger.debug("Conversion failed", exc_info=True)
        _error(str(e))
        sys.exit(1)

    sys.exit(code)


if __name__ == "__main__":
    main()
