"""Segment end-time chaining and pre-SRT repair.

WHY: Parsed segments are not always well-formed. Zencastr exports only
give start times, so end times must be derived from the next segment.
Hand-edited or concatenated transcripts can be out of order, overlap, or
contain zero-length entries — none of which a subtitle player accepts.

HOW: Two passes, both building new sequences instead of editing in place:
  chain_end_times()  — forward pass: each segment ends where the next starts
  repair_segments()  — stable sort by start, clamp overlaps, fix durations,
                       collecting a warning for every change

RULES:
- One generic warning when sorting changed the order (not one per segment)
- Overlap: start < previous end → start clamped to previous end
- Invalid duration: end <= start (after clamping) → end = start + 5000
- Segment numbers in warnings are 1-based positions in sorted order
- Every message starts with "Warning:"; is_valid is True iff all do
- Repairing an already-repaired sequence is a no-op with no warnings
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import List, Sequence

from podcast_metadata.config import INVALID_DURATION_FIX_MS
from podcast_metadata.core.ir import TranscriptSegment

logger = logging.getLogger(__name__)

WARNING_PREFIX = "Warning:"

REORDER_WARNING = (
    "Warning: Segments were not in chronological order and have been sorted."
)


@dataclass(frozen=True)
class RepairResult:
    """Repaired segments plus the warnings raised while repairing them."""

    segments: List[TranscriptSegment]
    warnings: List[str]

    @property
    def is_valid(self) -> bool:
        # TODO: confirm with product whether a non-warning class of repair
        # error should exist; every message produced here is a warning.
        return all(w.startswith(WARNING_PREFIX) for w in self.warnings)


def chain_end_times(segments: Sequence[TranscriptSegment]) -> List[TranscriptSegment]:
    """Set each segment's end to the next segment's start.

    The last segment keeps its own (provisional) end time.
    """
    chained = list(segments)
    for index in range(len(chained) - 1):
        chained[index] = replace(chained[index], end_ms=chained[index + 1].start_ms)
    return chained


def repair_segments(segments: Sequence[TranscriptSegment]) -> RepairResult:
    """Sort, de-overlap and fix degenerate durations.

    Args:
        segments: Segments in any order, possibly overlapping.

    Returns:
        RepairResult with non-overlapping, positive-duration segments in
        start order, and the ordered list of warnings.
    """
    warnings: List[str] = []

    order = sorted(range(len(segments)), key=lambda i: segments[i].start_ms)
    if order != list(range(len(segments))):
        warnings.append(REORDER_WARNING)

    repaired: List[TranscriptSegment] = []
    previous_end_ms = 0

    for number, index in enumerate(order, 1):
        segment = segments[index]

        if segment.start_ms < previous_end_ms:
            warnings.append(
                "Warning: Segment {} overlaps with previous segment. "
                "Adjusted start time.".format(number)
            )
            segment = replace(segment, start_ms=previous_end_ms)

        if segment.end_ms <= segment.start_ms:
            warnings.append(
                "Warning: Segment {} has invalid duration. "
                "Adjusted end time.".format(number)
            )
            segment = replace(segment, end_ms=segment.start_ms + INVALID_DURATION_FIX_MS)

        repaired.append(segment)
        previous_end_ms = segment.end_ms

    if warnings:
        logger.info("Repaired %d segments with %d warnings", len(repaired), len(warnings))

    return RepairResult(segments=repaired, warnings=warnings)
