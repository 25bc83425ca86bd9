"""Template rendering engine."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateError,
    TemplateNotFound,
)

from ..core.errors import NotFoundError, RenderError

logger = logging.getLogger(__name__)


def load_template(template_path: Path) -> Template:
    """Load a Jinja2 template from a file path.

    Args:
        template_path: Path to the template file

    Returns:
        Compiled Jinja2 template
    """
    if not template_path.is_file():
        raise NotFoundError(f"Template not found: {template_path}")

    # Use template's parent directory as loader search path
    loader = FileSystemLoader(str(template_path.parent))
    env = Environment(
        loader=loader,
        undefined=StrictUndefined,
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )

    try:
        return env.get_template(template_path.name)
    except TemplateNotFound as e:
        raise NotFoundError(f"Template not found: {template_path}") from e
    except TemplateError as e:
        raise RenderError(template_path, e) from e


def build_context(data: Any) -> dict[str, Any]:
    """Expose the data value to a template.

    The value is always available as ``data``; mapping keys are also
    top-level variables.
    """
    context: dict[str, Any] = {"data": data}
    if isinstance(data, Mapping):
        context.update({str(k): v for k, v in data.items()})
    return context


def render_template(template_path: Path, data: Any) -> str:
    """Render a template file against a data value.

    Args:
        template_path: Template file path
        data: Decoded data value

    Returns:
        Rendered text
    """
    logger.debug(f"Rendering template: {template_path}")

    template = load_template(template_path)
    try:
        rendered_text = template.render(build_context(data))
    except TemplateError as e:
        raise RenderError(template_path, e) from e

    logger.debug(f"Template output:\n{rendered_text}")
    return rendered_text
