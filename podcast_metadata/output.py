"""Writing formatter outputs, chapters and the JSON manifest to disk.

WHY: A single run produces several files — subtitles, text projections,
YouTube chapters and a manifest that ties them together. Users rerun the
tool on the same episode, so earlier outputs must never be overwritten.

HOW: save_outputs() runs the selected formatters and picks a
conflict-free path for each output and for the chapter list. It then
builds the manifest and validates it against manifest_schema.json with
jsonschema. Only then does write_output() write the files, manifest last.

RULES:
- Output naming: {stem}{suffix}; on conflict insert -2, -3 ... before the
  extension (episode-transcript-2.txt)
- All text is written as UTF-8
- The manifest is built and validated before any file is written; a
  schema failure raises ManifestError and leaves the directory untouched
- Output paths are all resolved before the first write
- generatedAt is UTC ISO-8601
- srtPath is the saved SRT file name, or null without timestamps
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

import jsonschema

from podcast_metadata.config import AppSettings
from podcast_metadata.core.chapters import format_chapters_for_youtube
from podcast_metadata.core.ir import Chapter, Transcript
from podcast_metadata.exceptions import ManifestError
from podcast_metadata.formatters import FORMATTERS
from podcast_metadata.formatters.base import FormatterOutput

logger = logging.getLogger(__name__)

_SCHEMA_PATH = Path(__file__).resolve().parent / "manifest_schema.json"

_CACHED_SCHEMA: Optional[dict] = None


def _get_schema() -> dict:
    """Load and cache the manifest JSON schema."""
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        with open(_SCHEMA_PATH, encoding="utf-8") as f:
            _CACHED_SCHEMA = json.load(f)
    return _CACHED_SCHEMA


@dataclass
class OutputReport:
    """What save_outputs() wrote.

    Attributes:
        saved_files: Paths in the order they were written (manifest last).
        srt_warnings: Repair warnings raised while encoding the SRT file.
        manifest: The manifest dict as written.
    """

    saved_files: List[Path] = field(default_factory=list)
    srt_warnings: List[str] = field(default_factory=list)
    manifest: Dict[str, Any] = field(default_factory=dict)


def resolve_output_path(stem: str, suffix: str, output_dir: Path) -> Path:
    """Resolve the output file path, adding a numeric suffix on conflict.

    Args:
        stem: Source filename stem (without extension).
        suffix: Formatter's suffix (e.g. "-transcript.txt" or ".srt").
        output_dir: Directory to save the output file.

    Returns:
        A Path that does not yet exist.
    """
    base_path = output_dir / "{}{}".format(stem, suffix)
    if not base_path.exists():
        return base_path

    # e.g. "-transcript.txt" → ("-transcript", ".txt"), ".srt" → ("", ".srt")
    dot_idx = suffix.rfind(".")
    if dot_idx >= 0:
        suffix_name = suffix[:dot_idx]
        suffix_ext = suffix[dot_idx:]
    else:
        suffix_name = suffix
        suffix_ext = ""

    counter = 2
    while True:
        candidate = output_dir / "{}{}-{}{}".format(stem, suffix_name, counter, suffix_ext)
        if not candidate.exists():
            return candidate
        counter += 1


def write_output(output: FormatterOutput, path: Path) -> Path:
    """Write a single formatter output to an already-resolved path."""
    path.write_text(output.content, encoding="utf-8")
    logger.info("Saved %s", path)
    return path


def build_manifest(
    transcript: Transcript,
    settings: AppSettings,
    chapters: Sequence[Chapter] = (),
    srt_path: Optional[Path] = None,
    srt_warnings: Sequence[str] = (),
) -> Dict[str, Any]:
    """Build and validate the manifest dict for one run.

    Raises:
        ManifestError: If the manifest does not conform to
            manifest_schema.json.
    """
    manifest: Dict[str, Any] = {
        "transcriptPath": transcript.file_path,
        "generatedAt": datetime.now(timezone.utc).isoformat(),
        "model": settings.model,
        "episodeContext": settings.episode_context,
        "format": transcript.format.value,
        "segmentCount": len(transcript.segments),
        "durationSeconds": transcript.duration_seconds,
        "chapters": [
            {"timestamp": c.timestamp, "title": c.title, "summary": c.summary}
            for c in chapters
        ],
        "srtPath": srt_path.name if srt_path is not None else None,
        "srtWarnings": list(srt_warnings),
    }

    try:
        jsonschema.validate(instance=manifest, schema=_get_schema())
    except jsonschema.ValidationError as e:
        raise ManifestError("Invalid manifest: {}".format(e.message)) from e
    return manifest


def save_outputs(
    transcript: Transcript,
    output_dir: Path,
    format_keys: Optional[Sequence[str]] = None,
    settings: Optional[AppSettings] = None,
    chapters: Sequence[Chapter] = (),
) -> OutputReport:
    """Run formatters and write every output file for one transcript.

    Args:
        transcript: The loaded transcript.
        output_dir: Existing directory to write into.
        format_keys: FORMATTERS keys to run (default: all).
        settings: Supplies the model name and episode context for the manifest.
        chapters: Parsed chapters; a "-chapters.txt" file is written when non-empty.

    Returns:
        OutputReport listing the files written and the SRT repair warnings.

    Raises:
        KeyError: If a format key is not registered.
        ManifestError: If the manifest fails schema validation; no file
            is written in that case.
    """
    settings = settings or AppSettings()
    keys = list(format_keys) if format_keys is not None else list(FORMATTERS.keys())
    keys = list(dict.fromkeys(keys))
    stem = Path(transcript.file_path).stem

    report = OutputReport()
    srt_path: Optional[Path] = None
    planned: List[Tuple[FormatterOutput, Path]] = []

    for key in keys:
        formatter = FORMATTERS[key]()
        for output in formatter.format(transcript):
            path = resolve_output_path(stem, output.suffix, output_dir)
            planned.append((output, path))
            if output.suffix == ".srt":
                srt_path = path
                report.srt_warnings.extend(output.warnings)

    if chapters:
        chapters_output = FormatterOutput(
            suffix="-chapters.txt",
            content=format_chapters_for_youtube(chapters) + "\n",
            media_type="text/plain",
        )
        planned.append((chapters_output, resolve_output_path(stem, chapters_output.suffix, output_dir)))

    report.manifest = build_manifest(
        transcript,
        settings,
        chapters=chapters,
        srt_path=srt_path,
        srt_warnings=report.srt_warnings,
    )
    manifest_output = FormatterOutput(
        suffix="-manifest.json",
        content=json.dumps(report.manifest, indent=2, ensure_ascii=False),
        media_type="application/json",
    )
    planned.append((manifest_output, resolve_output_path(stem, manifest_output.suffix, output_dir)))

    for output, path in planned:
        report.saved_files.append(write_output(output, path))

    return report
