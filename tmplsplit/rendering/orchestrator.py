"""Per-unit orchestration: render, split, name and write."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Iterable

from ..core.errors import TmplSplitError
from ..core.models import RunResult, Segment, UnitResult, UnitSettings
from ..core.settings import Settings
from ..splitting import (
    ConfigLine,
    output_file_name,
    reduce_events,
    scan,
    single_segment,
    split_config,
)
from .data import data_path_for, load_data
from .engine import render_template
from .io import clean_dir, write_text

logger = logging.getLogger(__name__)

Renderer = Callable[[Path, Any], str]
DataLoader = Callable[[Path], Any]


def template_name(template_path: Path) -> str:
    """Name of a template: the directory it lives in."""
    return template_path.resolve().parent.name


def resolve_output_path(output_dir: Path, relative: str) -> Path:
    """Join a segment path onto ``output_dir``.

    An absolute path loses its anchor, so ``/abs/x`` lands at
    ``output_dir/abs/x``.
    """
    path = Path(relative)
    if path.anchor:
        path = path.relative_to(path.anchor)
    return output_dir / path


class Orchestrator:
    """Processes template/data units against a fixed settings snapshot.

    Args:
        settings: Process-wide defaults, never mutated
        separate: Default for splitting at document separators
        renderer: Callable rendering (template path, data) to text
        data_loader: Callable decoding a data file path
        file_mode: Permissions of written files
    """

    def __init__(
        self,
        settings: Settings,
        *,
        separate: bool = True,
        renderer: Renderer = render_template,
        data_loader: DataLoader = load_data,
        file_mode: int = 0o644,
    ) -> None:
        self.settings = settings
        self.separate = separate
        self.renderer = renderer
        self.data_loader = data_loader
        self.file_mode = file_mode

    def output_dir_for(self, template_path: Path, multiple: bool) -> Path:
        if multiple:
            return self.settings.output_dir / template_name(template_path)
        return self.settings.output_dir

    def unit_defaults(self, template_path: Path, multiple: bool) -> UnitSettings:
        prefix = template_name(template_path) if multiple else None
        return self.settings.unit_defaults(self.separate, prefix)

    def plan(self, text: str, defaults: UnitSettings, name: str) -> list[tuple[str, str]]:
        """Turn a rendered block into (relative path, content) pairs.

        Args:
            text: Rendered block
            defaults: Effective settings before the block's config directive
            name: Template name, used for non-separated output

        Returns:
            Output files in write order
        """
        events = list(scan(text))
        directive = None
        if events and isinstance(events[0], ConfigLine):
            directive = events[0].directive
        unit = defaults.apply(directive)

        segments: list[Segment]
        if unit.separate:
            segments = reduce_events(events)
            prefix = unit.prefix
        else:
            # Verbatim text, so separators and file directives stay content.
            segments = single_segment(split_config(text)[1])
            prefix = name or unit.prefix

        return [
            (
                segment.path
                or output_file_name(unit.extension, prefix, segment.ordinal),
                segment.content,
            )
            for segment in segments
        ]

    def write_block(
        self, text: str, output_dir: Path, defaults: UnitSettings, name: str
    ) -> list[Path]:
        """Split a rendered block and write its segments under ``output_dir``.

        Stops at the first write failure; later segments are not attempted.
        """
        logger.info(f"Output directory: {output_dir}")

        written: list[Path] = []
        for relative, content in self.plan(text, defaults, name):
            output_path = resolve_output_path(output_dir, relative)
            write_text(output_path, content, mode=self.file_mode)
            written.append(output_path)
        return written

    def process_unit(self, template_path: Path, multiple: bool = False) -> UnitResult:
        """Render one template against its data file and write the output.

        Args:
            template_path: Template file path
            multiple: Whether output goes to a per-template subdirectory

        Returns:
            Unit result listing the written files
        """
        logger.info(f"Processing template: {template_path}")

        data = self.data_loader(data_path_for(template_path, self.settings.data_file))
        logger.debug(f"Template data: {data!r}")

        text = self.renderer(template_path, data)

        output_dir = self.output_dir_for(template_path, multiple)
        written = self.write_block(
            text,
            output_dir,
            self.unit_defaults(template_path, multiple),
            template_name(template_path),
        )
        return UnitResult(
            template_path=template_path, output_dir=output_dir, written=written
        )

    def run(
        self,
        templates: Iterable[Path],
        multiple: bool = False,
        *,
        clean: bool = False,
        keep_going: bool = False,
    ) -> RunResult:
        """Process templates in order.

        Args:
            templates: Template paths
            multiple: Whether output goes to per-template subdirectories
            clean: Remove and recreate the output root first
            keep_going: Continue with the next unit after a failure

        Returns:
            Run result holding the unit results and the first error
        """
        result = RunResult()

        if clean:
            try:
                clean_dir(self.settings.output_dir)
            except TmplSplitError as e:
                logger.error(str(e))
                result.error = e
                return result

        for template_path in templates:
            try:
                result.units.append(self.process_unit(template_path, multiple))
            except TmplSplitError as e:
                logger.error(f"Failed to process {template_path}: {e}")
                if result.error is None:
                    result.error = e
                if not keep_going:
                    break

        logger.info(f"Wrote {len(result.written)} file(s)")
        return result
