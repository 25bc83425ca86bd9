"""YAML data loading for templates."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from ..core.errors import DecodeError, NotFoundError

logger = logging.getLogger(__name__)


def data_path_for(template_path: Path, data_file: str) -> Path:
    """Return the data file that sits next to a template."""
    return template_path.parent / data_file


def load_data(data_path: Path) -> Any:
    """Load the data value of a unit from a YAML file.

    Args:
        data_path: YAML file path

    Returns:
        Decoded value; None for an empty document
    """
    if not data_path.is_file():
        raise NotFoundError(f"Data file not found: {data_path}")

    logger.info(f"Using data file: {data_path}")
    try:
        with data_path.open(encoding="utf-8") as fh:
            return yaml.safe_load(fh)
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        raise DecodeError(data_path, e) from e
