"""Template discovery under a source directory."""

from __future__ import annotations

import logging
from pathlib import Path

from ..core.errors import NotFoundError
from ..core.settings import ALL_TEMPLATES, Settings

logger = logging.getLogger(__name__)


def _single_mode_hint(source_dir: Path, settings: Settings) -> str:
    return (
        "If you want to process multiple templates from subdirectories, "
        "use the --multiple flag:\n"
        f"  tmplsplit gen --multiple {source_dir}\n\n"
        "Otherwise, make sure you have the following files in your source "
        "directory:\n"
        f"  - {settings.template_file}\n"
        f"  - {settings.data_file}"
    )


def find_single(source_dir: Path, settings: Settings) -> list[Path]:
    """Locate the template of a single-directory source.

    Both the template and its data file must be present in ``source_dir``.
    """
    template_path = source_dir / settings.template_file
    data_path = source_dir / settings.data_file

    if not template_path.is_file():
        raise NotFoundError(
            f"Template file not found in {source_dir}: {template_path}",
            hint=_single_mode_hint(source_dir, settings),
        )
    if not data_path.is_file():
        raise NotFoundError(
            f"Data file not found in {source_dir}: {data_path}",
            hint=_single_mode_hint(source_dir, settings),
        )

    return [template_path]


def find_templates(
    source_dir: Path, settings: Settings, template_name: str = ALL_TEMPLATES
) -> list[Path]:
    """Locate templates in a multi-directory source.

    Args:
        source_dir: Directory holding one subdirectory per template
        settings: Settings naming the template file
        template_name: Subdirectory to select, or ``ALL`` for every template

    Returns:
        Template paths in sorted order
    """
    if not source_dir.is_dir():
        raise NotFoundError(f"Source directory not found: {source_dir}")

    logger.info(f"Searching for templates in {source_dir}")

    if template_name == ALL_TEMPLATES:
        templates = sorted(
            path
            for path in source_dir.rglob(settings.template_file)
            if path.is_file()
        )
        if not templates:
            raise NotFoundError(
                f"No {settings.template_file} files found in {source_dir}"
            )
        for path in templates:
            logger.debug(f"Found template: {path}")
        return templates

    template_path = source_dir / template_name / settings.template_file
    logger.debug(f"Looking for template at: {template_path}")
    if not template_path.exists():
        raise NotFoundError(
            f"Template '{template_name}' not found in {source_dir}",
            hint=f"Expected a file at {template_path}",
        )
    if not template_path.is_file():
        raise NotFoundError(f"Template '{template_name}' is a directory")
    return [template_path]
