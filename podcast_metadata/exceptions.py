"""Exception types raised by the transcript engine.

WHY: Callers (CLI, tests, a future generation workflow) need to tell an
unreadable transcript apart from a bad settings file or an I/O failure.

RULES:
- Every project exception derives from PodcastMetadataError
- Recoverable anomalies (overlaps, reordering) are warnings, never exceptions
"""


class PodcastMetadataError(Exception):
    """Base class for all podcast_metadata errors."""


class FormatNotRecognizedError(PodcastMetadataError):
    """Raised when a document has content but no known timestamp layout.

    WHY: This is the only hard failure in parsing. Malformed individual
    lines inside a recognized document are skipped instead.
    """


class SettingsError(PodcastMetadataError):
    """Raised when the settings file exists but cannot be parsed."""


class TranscriptReadError(PodcastMetadataError):
    """Raised when a transcript or SRT file is not valid UTF-8 text."""


class ManifestError(PodcastMetadataError):
    """Raised when the run manifest does not match manifest_schema.json."""
