from tmplsplit.core.models import ConfigDirective
from tmplsplit.splitting.directives import (
    ConfigLine,
    ContentLine,
    FileDirectiveLine,
    SeparatorLine,
    classify,
    parse_config_line,
    parse_file_directive,
    scan,
    split_config,
    split_lines,
)


def test_parse_config_line_reads_ext_and_separate():
    directive = parse_config_line("# config x y ext=md separate=false")
    assert directive == ConfigDirective(extension="md", separate=False)


def test_parse_config_line_skips_prefix_tokens_only():
    directive = parse_config_line("# config ext=yaml")
    assert directive.extension == "yaml"
    assert directive.separate is None


def test_parse_config_line_strips_leading_dot_from_ext():
    assert parse_config_line("# config ext=.txt").extension == "txt"


def test_parse_config_line_ignores_invalid_separate_value():
    directive = parse_config_line("# config separate=yes")
    assert directive is not None
    assert directive.separate is None


def test_parse_config_line_ignores_unknown_and_malformed_tokens():
    directive = parse_config_line("# config color=blue novalue ext=json")
    assert directive == ConfigDirective(extension="json", separate=None)


def test_parse_config_line_without_overrides():
    assert parse_config_line("# config") == ConfigDirective()


def test_parse_config_line_rejects_other_lines():
    assert parse_config_line("hello") is None
    assert parse_config_line("#config ext=md") is None
    assert parse_config_line("# configure ext=md") is None
    assert parse_config_line("") is None


def test_parse_file_directive_trims_path():
    assert parse_file_directive("# file:   custom/out.txt  ") == "custom/out.txt"
    assert parse_file_directive("   # file: a.yaml") == "a.yaml"


def test_parse_file_directive_empty_path_is_not_a_directive():
    assert parse_file_directive("# file:") is None
    assert parse_file_directive("# file:    ") is None
    assert classify("# file:") == ContentLine("# file:")


def test_parse_file_directive_rejects_content():
    assert parse_file_directive("file: a.txt") is None
    assert parse_file_directive("# files: a.txt") is None


def test_classify_separator_ignores_surrounding_whitespace():
    assert classify("  ---  ") == SeparatorLine()
    assert classify("----") == ContentLine("----")
    assert classify("--- x") == ContentLine("--- x")


def test_config_line_only_recognized_on_first_line():
    assert isinstance(classify("# config ext=md", first=True), ConfigLine)
    assert classify("# config ext=md") == ContentLine("# config ext=md")


def test_scan_yields_tagged_events():
    events = list(scan("# config ext=md\n# file: a.txt\nA\n---\n"))
    assert events == [
        ConfigLine(ConfigDirective(extension="md")),
        FileDirectiveLine("a.txt"),
        ContentLine("A"),
        SeparatorLine(),
    ]


def test_split_lines_handles_trailing_newline():
    assert split_lines("") == []
    assert split_lines("A") == ["A"]
    assert split_lines("A\n") == ["A"]
    assert split_lines("A\n\nB\n") == ["A", "", "B"]


def test_split_config_detaches_first_line():
    directive, rest = split_config("# config ext=md\nHello\n")
    assert directive == ConfigDirective(extension="md")
    assert rest == "Hello\n"


def test_split_config_without_directive_returns_text_unchanged():
    text = "Hello\n# config ext=md\n"
    assert split_config(text) == (None, text)


def test_split_config_directive_only():
    directive, rest = split_config("# config separate=true")
    assert directive.separate is True
    assert rest == ""
