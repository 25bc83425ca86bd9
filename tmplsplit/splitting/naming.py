"""Output file naming for segments without an explicit path."""

from __future__ import annotations


def output_file_name(extension: str, prefix: str, ordinal: int = 0) -> str:
    """Compute the file name of a segment.

    Args:
        extension: Output extension without a leading dot, may be empty
        prefix: File name prefix
        ordinal: Zero-based position of the segment

    Returns:
        ``prefix[.ext]`` for the first segment, ``prefix-NN[.ext]`` after it
    """
    if ordinal < 0:
        raise ValueError(f"Ordinal must be non-negative, got {ordinal}")

    name = f"{prefix}-{ordinal:02d}" if ordinal > 0 else prefix
    return f"{name}.{extension}" if extension else name
