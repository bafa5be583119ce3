"""Podcast Metadata Generator — transcript parsing and subtitle engine.

WHY: Podcast transcripts arrive in several inconsistent timestamped layouts
(Zencastr exports, time-range logs, SRT files, or plain prose). Titles,
descriptions, chapter markers and subtitle files all need the same clean,
time-ordered view of who said what and when.

HOW: Four-stage pipeline — detect (which layout is this?), build (one
parser per layout into the Transcript IR), repair (sort, de-overlap, fix
degenerate durations), emit (SRT, plain text, timestamped text, chapters,
manifest). Each stage is a pure function and independently testable.

RULES:
- All formatters consume the same Transcript IR
- Adding a new input layout = one detector pattern + one builder, no other changes
- The IR is the stable contract between parsing and formatting
"""

__version__ = "0.1.0"
