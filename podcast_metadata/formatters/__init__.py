"""Output formatter registry — pluggable format hub.

WHY: The CLI and the output stage need a single lookup to find the right
formatter by name. A central dict makes it trivial to add new formats:
create the formatter class, import it here, add one line.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["srt"]()``.

RULES:
- Keys are snake_case identifiers (used in CLI flags)
- Values are BaseFormatter subclasses (not instances)
- Every formatter listed here must be importable without side effects
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Type

from podcast_metadata.formatters.plain_text import PlainTextFormatter
from podcast_metadata.formatters.srt_subtitles import SRTFormatter
from podcast_metadata.formatters.timestamped_text import TimestampedTextFormatter

if TYPE_CHECKING:
    from podcast_metadata.formatters.base import BaseFormatter

FORMATTERS: Dict[str, Type[BaseFormatter]] = {
    "srt": SRTFormatter,
    "plain_text": PlainTextFormatter,
    "timestamped_text": TimestampedTextFormatter,
}
