"""Exception hierarchy for template rendering and output splitting."""

from __future__ import annotations

from pathlib import Path


class TmplSplitError(Exception):
    """Base error for all tmplsplit failures."""


class ConfigError(TmplSplitError):
    """Raised when the settings file cannot be read or is malformed."""


class NotFoundError(TmplSplitError):
    """Raised when a template, data file or source directory is missing."""

    def __init__(self, message: str, hint: str | None = None) -> None:
        self.hint = hint
        super().__init__(f"{message}\n\n{hint}" if hint else message)


class DecodeError(TmplSplitError):
    """Raised when a data file is not valid YAML."""

    def __init__(self, data_path: Path, cause: Exception) -> None:
        self.data_path = data_path
        self.cause = cause
        super().__init__(f"Failed to decode YAML data {data_path}: {cause}")


class RenderError(TmplSplitError):
    """Raised when the template engine fails to render a template."""

    def __init__(self, template_path: Path, cause: Exception) -> None:
        self.template_path = template_path
        self.cause = cause
        super().__init__(f"Failed to render template {template_path}: {cause}")


class WriteError(TmplSplitError):
    """Raised when an output file or directory cannot be written."""

    def __init__(self, path: Path, cause: Exception) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write {path}: {cause}")
