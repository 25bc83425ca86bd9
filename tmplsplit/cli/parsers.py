"""CLI argument parsers and validators."""

from __future__ import annotations

import typer


def parse_file_mode(value: str) -> int:
    """Parse octal file mode string."""
    try:
        return int(value, 8)
    except ValueError as e:
        raise typer.BadParameter(f"Invalid octal mode: {value!r}") from e


def parse_extension(value: str | None) -> str | None:
    """Parse an output extension, with or without a leading dot."""
    if value is None:
        return None
    ext = value.strip().removeprefix(".")
    if "/" in ext or "\\" in ext:
        raise typer.BadParameter(f"Extension must not contain a path: {value!r}")
    return ext
