"""Configuration constants, user settings, and .env loading.

WHY: Centralizes every tunable value so it is easy to find, update, and
override. The parser only needs one setting (the provisional duration of
a Zencastr segment), but the surrounding workflow persists a handful of
generation preferences that travel with it.

HOW: python-dotenv loads the .env file on import. Engine constants are
module-level values. AppSettings is a strict Pydantic model;
load_settings() and save_settings() move it to and from an indented
JSON file.

RULES:
- All environment overrides use the PODCAST_ prefix
- A missing settings file means defaults, never an error
- A malformed settings file raises SettingsError (never silently ignored),
  including a value of the wrong type ("5000" for an integer field)
- episode_context is per-session and is never written to disk
- Unknown keys in the settings file are ignored
- Python 3.9+ compatible (no PEP 604 unions in model fields)
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from podcast_metadata.exceptions import SettingsError

# Load .env from the project root (where the script is run from)
load_dotenv()

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Engine constants
# ---------------------------------------------------------------------------

DETECTION_WINDOW_LINES = 50
"""Number of leading lines the format detector inspects."""

INVALID_DURATION_FIX_MS = 5000
"""Duration given to a segment whose end does not follow its start."""

SPEAKER_MAX_LENGTH = 30
"""Speaker labels must be shorter than this many characters."""

# ---------------------------------------------------------------------------
# Environment defaults
# ---------------------------------------------------------------------------

DEFAULT_SEGMENT_DURATION_MS = int(os.getenv("PODCAST_DEFAULT_SEGMENT_DURATION_MS", "5000"))
DEFAULT_MODEL = os.getenv("PODCAST_MODEL", "gpt-5")
DEFAULT_SETTINGS_PATH = Path(
    os.getenv(
        "PODCAST_SETTINGS_PATH",
        str(Path.home() / ".podcast-metadata-generator" / "settings.json"),
    )
)


class AppSettings(BaseModel):
    """User preferences for transcript parsing and metadata generation.

    WHY: The parser needs default_segment_duration_ms to close Zencastr
    segments that have no explicit end time. The chapter fields drive the
    suggested chapter count the CLI reports. The title and description
    fields are stored for the generation layer, which reads the same
    settings file.

    HOW: Strict mode, so a settings file that stores "5000" where an
    integer belongs is rejected on load instead of failing mid-parse.
    Assignments (CLI overrides) are validated the same way.

    RULES:
    - default_segment_duration_ms is the only value the parser reads
    - episode_context is excluded from save_settings()
    """

    model_config = ConfigDict(strict=True, validate_assignment=True)

    model: str = Field(default=DEFAULT_MODEL, description="Assistant model name recorded in the manifest.")
    output_directory: str = Field(default="", description="Default output directory; empty means next to the input.")
    title_count: int = Field(default=5, ge=1, description="Titles the generation layer asks for.")
    title_max_words: int = Field(default=10, ge=1)
    short_description_words: int = Field(default=50, ge=1)
    medium_description_words: int = Field(default=150, ge=1)
    long_description_words: int = Field(default=300, ge=1)
    min_chapters: int = Field(default=3, ge=0, description="Lower bound for the suggested chapter count.")
    max_chapters: int = Field(default=12, ge=0, description="Upper bound for the suggested chapter count.")
    chapters_per_30_min: int = Field(default=5, ge=0)
    chapter_title_max_words: int = Field(default=8, ge=1)
    podcast_name: Optional[str] = None
    host_names: Optional[str] = None
    default_segment_duration_ms: int = Field(
        default=DEFAULT_SEGMENT_DURATION_MS,
        gt=0,
        description="Provisional duration of a Zencastr segment with no following stamp.",
    )
    prompt_for_context_on_load: bool = True
    episode_context: Optional[str] = Field(default=None, description="Per-session context; never saved.")

    def calculate_target_chapters(self, duration_minutes: float) -> int:
        """Target chapter count for an episode, clamped to [min, max].

        Scales linearly at chapters_per_30_min per half hour of content.
        """
        target = int(duration_minutes / 30.0 * self.chapters_per_30_min)
        return max(self.min_chapters, min(self.max_chapters, target))


def load_settings(path: Union[str, Path, None] = None) -> AppSettings:
    """Load settings from a JSON file, falling back to defaults.

    Args:
        path: Settings file path. Defaults to DEFAULT_SETTINGS_PATH.

    Returns:
        AppSettings populated from the file; defaults for missing keys.

    Raises:
        SettingsError: If the file exists but is not a JSON object, or a
            value has the wrong type or range.
    """
    settings_path = Path(path) if path is not None else DEFAULT_SETTINGS_PATH
    if not settings_path.is_file():
        logger.debug("No settings file at %s, using defaults", settings_path)
        return AppSettings()

    try:
        data = json.loads(settings_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise SettingsError(
            "Could not read settings file {}: {}".format(settings_path, e)
        ) from e

    if not isinstance(data, dict):
        raise SettingsError(
            "Invalid settings file {}: root must be a JSON object".format(settings_path)
        )

    known = set(AppSettings.model_fields)
    ignored = sorted(set(data) - known)
    if ignored:
        logger.info("Ignoring unknown settings keys: %s", ", ".join(ignored))

    values = {key: value for key, value in data.items() if key in known}
    values.pop("episode_context", None)

    try:
        settings = AppSettings.model_validate(values)
    except ValidationError as e:
        raise SettingsError(
            "Invalid settings file {}: {}".format(settings_path, e)
        ) from e

    logger.info("Loaded settings from %s", settings_path)
    return settings


def save_settings(settings: AppSettings, path: Union[str, Path, None] = None) -> Path:
    """Write settings as indented JSON, creating parent directories.

    Returns:
        The path that was written.
    """
    settings_path = Path(path) if path is not None else DEFAULT_SETTINGS_PATH
    settings_path.parent.mkdir(parents=True, exist_ok=True)

    data = settings.model_dump(exclude={"episode_context"})
    settings_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    logger.info("Saved settings to %s", settings_path)
    return settings_path
