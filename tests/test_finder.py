from pathlib import Path

import pytest

from tmplsplit.core.errors import NotFoundError
from tmplsplit.core.settings import Settings
from tmplsplit.rendering.finder import find_single, find_templates


def _make_template(root: Path, name: str, data: bool = True) -> Path:
    directory = root / name
    directory.mkdir(parents=True)
    template_path = directory / "template.j2"
    template_path.write_text("{{ value }}\n", encoding="utf-8")
    if data:
        (directory / "data.yaml").write_text("value: 1\n", encoding="utf-8")
    return template_path


def test_find_single(tmp_path: Path) -> None:
    template_path = _make_template(tmp_path, "example")
    assert find_single(tmp_path / "example", Settings()) == [template_path]


def test_find_single_missing_template_has_hint(tmp_path: Path) -> None:
    with pytest.raises(NotFoundError) as excinfo:
        find_single(tmp_path, Settings())
    assert "--multiple" in str(excinfo.value)
    assert "template.j2" in excinfo.value.hint
    assert "data.yaml" in excinfo.value.hint


def test_find_single_missing_data_file(tmp_path: Path) -> None:
    _make_template(tmp_path, "example", data=False)
    with pytest.raises(NotFoundError, match="Data file not found"):
        find_single(tmp_path / "example", Settings())


def test_find_all_templates_sorted(tmp_path: Path) -> None:
    second = _make_template(tmp_path, "b")
    first = _make_template(tmp_path, "a")
    nested = _make_template(tmp_path, "c/deep")
    (tmp_path / "ignored.txt").write_text("x", encoding="utf-8")

    assert find_templates(tmp_path, Settings()) == [first, second, nested]


def test_find_all_templates_none_found(tmp_path: Path) -> None:
    with pytest.raises(NotFoundError, match="No template.j2 files"):
        find_templates(tmp_path, Settings())


def test_find_named_template(tmp_path: Path) -> None:
    _make_template(tmp_path, "a")
    wanted = _make_template(tmp_path, "b")
    assert find_templates(tmp_path, Settings(), "b") == [wanted]


def test_find_named_template_missing(tmp_path: Path) -> None:
    _make_template(tmp_path, "a")
    with pytest.raises(NotFoundError, match="'missing' not found"):
        find_templates(tmp_path, Settings(), "missing")


def test_find_named_template_that_is_a_directory(tmp_path: Path) -> None:
    (tmp_path / "odd" / "template.j2").mkdir(parents=True)
    with pytest.raises(NotFoundError, match="is a directory"):
        find_templates(tmp_path, Settings(), "odd")


def test_find_templates_missing_source(tmp_path: Path) -> None:
    with pytest.raises(NotFoundError, match="Source directory not found"):
        find_templates(tmp_path / "nowhere", Settings())


def test_find_templates_uses_configured_file_name(tmp_path: Path) -> None:
    directory = tmp_path / "x"
    directory.mkdir()
    (directory / "main.tmpl").write_text("", encoding="utf-8")
    settings = Settings(template_file="main.tmpl")
    assert find_templates(tmp_path, settings) == [directory / "main.tmpl"]
