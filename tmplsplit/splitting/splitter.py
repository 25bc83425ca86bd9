"""Segment splitting of rendered text at document separators."""

from __future__ import annotations

import logging
from typing import Iterable

from ..core.models import Segment
from .directives import (
    ConfigLine,
    ContentLine,
    FileDirectiveLine,
    LineEvent,
    SeparatorLine,
    scan,
)

logger = logging.getLogger(__name__)


class _SegmentBuilder:
    """Accumulates lines for the segment currently being read."""

    def __init__(self) -> None:
        self.lines: list[str] = []
        self.path: str | None = None

    def close(self, ordinal: int) -> Segment | None:
        content = "".join(f"{line}\n" for line in self.lines)
        path = self.path
        self.lines = []
        self.path = None

        # Content decides: a file directive alone does not make a segment.
        if not content:
            if path:
                logger.debug(f"Dropping empty segment for file directive {path}")
            return None
        return Segment(content=content, path=path, ordinal=ordinal)


def reduce_events(events: Iterable[LineEvent]) -> list[Segment]:
    """Build segments from a stream of line events.

    The ordinal of a segment is the number of segments emitted before it;
    dropped empty segments do not consume an ordinal.

    Args:
        events: Classified lines of one rendered block

    Returns:
        Non-empty segments in document order
    """
    segments: list[Segment] = []
    builder = _SegmentBuilder()

    for event in events:
        if isinstance(event, SeparatorLine):
            segment = builder.close(len(segments))
            if segment is not None:
                segments.append(segment)
        elif isinstance(event, FileDirectiveLine):
            builder.path = event.path
        elif isinstance(event, ContentLine):
            builder.lines.append(event.text)
        elif isinstance(event, ConfigLine):
            # Applied by the caller before splitting.
            continue

    segment = builder.close(len(segments))
    if segment is not None:
        segments.append(segment)

    logger.debug(f"Split rendered output into {len(segments)} segment(s)")
    return segments


def split_segments(text: str) -> list[Segment]:
    """Split rendered text, already stripped of its config line, into segments."""
    return reduce_events(scan(text, detect_config=False))


def single_segment(text: str) -> list[Segment]:
    """Treat the whole text as one segment with no explicit path.

    Separators and file directives are kept verbatim as content.
    """
    if not text:
        return []
    return [Segment(content=text, path=None, ordinal=0)]
