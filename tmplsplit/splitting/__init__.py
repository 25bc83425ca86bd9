"""Directive parsing, segment splitting and output naming."""

from .directives import (
    ConfigLine,
    parse_config_line,
    parse_file_directive,
    scan,
    split_config,
)
from .naming import output_file_name
from .splitter import reduce_events, single_segment, split_segments

__all__ = [
    "ConfigLine",
    "output_file_name",
    "parse_config_line",
    "parse_file_directive",
    "reduce_events",
    "scan",
    "single_segment",
    "split_config",
    "split_segments",
]
