"""Domain models for rendered-output splitting and run bookkeeping."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .errors import TmplSplitError


class ConfigDirective(BaseModel):
    """Overrides parsed from a leading ``# config`` line."""

    model_config = ConfigDict(frozen=True)

    extension: str | None = Field(default=None, description="Output extension")
    separate: bool | None = Field(
        default=None, description="Split at document separators"
    )


class UnitSettings(BaseModel):
    """Effective settings for a single template/data unit."""

    model_config = ConfigDict(frozen=True)

    extension: str = Field(default="", description="Output extension, no dot")
    separate: bool = Field(default=True, description="Split at separators")
    prefix: str = Field(default="file", description="File name prefix")

    def apply(self, directive: ConfigDirective | None) -> UnitSettings:
        """Return a copy with the directive's overrides applied."""
        if directive is None:
            return self

        update: dict[str, object] = {}
        if directive.extension is not None:
            update["extension"] = directive.extension
        if directive.separate is not None:
            update["separate"] = directive.separate
        return self.model_copy(update=update)


class Segment(BaseModel):
    """A span of rendered content destined for one output file."""

    model_config = ConfigDict(frozen=True)

    content: str = Field(..., description="Newline-terminated content")
    path: str | None = Field(default=None, description="Explicit output path")
    ordinal: int = Field(default=0, ge=0, description="Position among segments")


class UnitResult(BaseModel):
    """Outcome of processing one template/data unit."""

    template_path: Path = Field(..., description="Template file path")
    output_dir: Path = Field(..., description="Unit output directory")
    written: list[Path] = Field(default_factory=list, description="Written files")


class RunResult(BaseModel):
    """Outcome of processing a sequence of units."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    units: list[UnitResult] = Field(default_factory=list)
    error: TmplSplitError | None = Field(
        default=None, description="First error encountered"
    )

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def written(self) -> list[Path]:
        return [path for unit in self.units for path in unit.written]

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error
