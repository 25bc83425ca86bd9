"""Directive recognition for rendered template output.

Rendered text may carry two kinds of structured comment lines:

* ``# config <ignored> <ignored> key=value ...`` on the very first line,
  overriding the output extension (``ext``) and splitting (``separate``)
  for the current block only.
* ``# file: <relative/path>`` inside a segment, naming that segment's
  output file.

Every line is classified into one of four events consumed by the splitter.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

from ..core.models import ConfigDirective

logger = logging.getLogger(__name__)

CONFIG_PREFIX = ("#", "config")
FILE_PREFIX = "# file:"
SEPARATOR = "---"


@dataclass(frozen=True, slots=True)
class ConfigLine:
    directive: ConfigDirective


@dataclass(frozen=True, slots=True)
class FileDirectiveLine:
    path: str


@dataclass(frozen=True, slots=True)
class SeparatorLine:
    pass


@dataclass(frozen=True, slots=True)
class ContentLine:
    text: str


LineEvent = ConfigLine | FileDirectiveLine | SeparatorLine | ContentLine


def parse_config_line(line: str) -> ConfigDirective | None:
    """Parse a ``# config`` directive line.

    Args:
        line: Candidate line, without its line terminator

    Returns:
        Parsed directive, or None when the line is not a config directive
    """
    tokens = line.split()
    if tuple(tokens[:2]) != CONFIG_PREFIX:
        return None

    extension: str | None = None
    separate: bool | None = None
    for token in tokens[2:]:
        key, sep, value = token.partition("=")
        if not sep:
            continue
        if key == "ext":
            extension = value.removeprefix(".")
        elif key == "separate":
            if value == "true":
                separate = True
            elif value == "false":
                separate = False
            else:
                logger.debug(f"Ignoring invalid separate value: {value!r}")
        else:
            logger.debug(f"Ignoring unknown config key: {key!r}")

    return ConfigDirective(extension=extension, separate=separate)


def parse_file_directive(line: str) -> str | None:
    """Return the path named by a ``# file:`` line, or None."""
    stripped = line.strip()
    if not stripped.startswith(FILE_PREFIX):
        return None
    path = stripped[len(FILE_PREFIX) :].strip()
    return path or None


def is_separator(line: str) -> bool:
    return line.strip() == SEPARATOR


def split_lines(text: str) -> list[str]:
    """Split text on ``\\n``; a trailing newline does not start a new line."""
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def classify(line: str, *, first: bool = False) -> LineEvent:
    """Classify a single line.

    Args:
        line: Line without its terminator
        first: Whether this is the first line of the block; only the first
            line may be a config directive

    Returns:
        The tagged event for the line
    """
    if first:
        directive = parse_config_line(line)
        if directive is not None:
            return ConfigLine(directive)
    if is_separator(line):
        return SeparatorLine()
    path = parse_file_directive(line)
    if path is not None:
        return FileDirectiveLine(path)
    return ContentLine(line)


def scan(text: str, *, detect_config: bool = True) -> Iterator[LineEvent]:
    """Yield one event per line of ``text``."""
    for index, line in enumerate(split_lines(text)):
        yield classify(line, first=detect_config and index == 0)


def split_config(text: str) -> tuple[ConfigDirective | None, str]:
    """Detach a leading config directive from a rendered block.

    Returns:
        The directive (or None) and the remaining text, unchanged otherwise
    """
    first, newline, rest = text.partition("\n")
    directive = parse_config_line(first)
    if directive is None:
        return None, text
    logger.debug(f"Config directive: {directive}")
    return directive, rest if newline else ""
