"""Tests for prompt format string rendering."""

import pytest
from rich.style import Style

from smart_directory.config import DEFAULT_FORMAT, DEFAULT_REPO_ROOT_FORMAT
from smart_directory.core.formatter import (
    FormatError,
    GroupNode,
    StringFormatter,
    TextNode,
    VariableNode,
    parse_style,
    to_ansi,
)

STYLES = {"style": "cyan bold", "read_only_style": "red"}


class TestParseStyle:
    """Tests for parse_style function."""

    def test_color_and_attribute(self) -> None:
        style = parse_style("cyan bold")
        assert style.color is not None
        assert style.color.name == "cyan"
        assert style.bold is True

    def test_foreground_and_background(self) -> None:
        style = parse_style("fg:red bg:#1e1e1e")
        assert style.color is not None and style.color.name == "red"
        assert style.bgcolor is not None and style.bgcolor.name == "#1e1e1e"

    def test_named_attributes(self) -> None:
        style = parse_style("italic underline dimmed inverted strikethrough")
        assert style.italic and style.underline and style.dim and style.reverse and style.strike

    def test_purple_maps_to_magenta(self) -> None:
        style = parse_style("purple")
        assert style.color is not None and style.color.name == "magenta"

    def test_bright_and_numbered_colors(self) -> None:
        assert parse_style("bright-red").color == parse_style("bright_red").color
        style = parse_style("208")
        assert style.color is not None and style.color.number == 208

    def test_case_insensitive(self) -> None:
        assert parse_style("Bold CYAN") == parse_style("bold cyan")

    def test_none_resets(self) -> None:
        assert not parse_style("bold none")

    def test_empty_style_is_plain(self) -> None:
        assert parse_style("") == Style()

    def test_unknown_color_raises(self) -> None:
        with pytest.raises(FormatError, match="notacolor"):
            parse_style("bold notacolor")


class TestParsing:
    """Tests for how format strings are parsed."""

    def test_text_and_variables(self) -> None:
        formatter = StringFormatter("in $path now")
        assert formatter.nodes == [TextNode("in "), VariableNode("path"), TextNode(" now")]

    def test_group_with_style(self) -> None:
        formatter = StringFormatter("[$path]($style)")
        assert formatter.nodes == [GroupNode(style="$style", children=[VariableNode("path")])]

    def test_nested_groups(self) -> None:
        formatter = StringFormatter("[a[$b](red)](bold)")
        group = formatter.nodes[0]
        assert isinstance(group, GroupNode)
        assert group.variables() == ["b"]

    def test_default_formats_parse(self) -> None:
        StringFormatter(DEFAULT_FORMAT)
        StringFormatter(DEFAULT_REPO_ROOT_FORMAT)

    @pytest.mark.parametrize(
        "format_str",
        ["[$path", "[$path]", "$path]", "[$path](bold", "[[$path](red)"],
    )
    def test_malformed_formats_raise(self, format_str: str) -> None:
        with pytest.raises(FormatError):
            StringFormatter(format_str)


class TestRender:
    """Tests for StringFormatter.render."""

    def test_substitutes_variables(self) -> None:
        text = StringFormatter(DEFAULT_FORMAT).render({"path": "~/code"}, STYLES)
        assert text.plain == "~/code "

    def test_styles_variable(self) -> None:
        text = StringFormatter("[$path]($style)").render({"path": "~/code"}, STYLES)
        assert len(text.spans) == 1
        span_style = text.spans[0].style
        assert isinstance(span_style, Style)
        assert span_style.color is not None and span_style.color.name == "cyan"
        assert span_style.bold is True

    def test_unset_group_is_dropped(self) -> None:
        """The read-only marker only shows up when set."""
        formatter = StringFormatter(DEFAULT_FORMAT)
        assert formatter.render({"path": "/etc", "read_only": None}, STYLES).plain == "/etc "
        assert formatter.render({"path": "/etc", "read_only": "🔒"}, STYLES).plain == "/etc🔒 "

    def test_group_without_variables_always_renders(self) -> None:
        text = StringFormatter("[on ](bold)$path").render({"path": "x"})
        assert text.plain == "on x"

    def test_unknown_variable_renders_empty(self) -> None:
        text = StringFormatter("<$missing>").render({})
        assert text.plain == "<>"

    def test_escapes(self) -> None:
        text = StringFormatter(r"\[$path\] \$path").render({"path": "x"})
        assert text.plain == "[x] $path"

    def test_lone_dollar_is_literal(self) -> None:
        assert StringFormatter("$ $path").render({"path": "x"}).plain == "$ x"

    def test_nested_styles_layer(self) -> None:
        text = StringFormatter("[a[b](red)](bold)").render({})
        assert text.plain == "ab"
        inner = text.spans[-1].style
        assert isinstance(inner, Style)
        assert inner.bold is True
        assert inner.color is not None and inner.color.name == "red"

    def test_repo_root_format(self) -> None:
        styles = {
            **STYLES,
            "before_repo_root_style": "cyan",
            "repo_root_style": "bold green",
            "after_repo_root_style": "cyan",
        }
        variables = {
            "before_root_path": "~/c/",
            "repo_root": "app",
            "after_root_path": "/s/models",
            "read_only": None,
        }
        text = StringFormatter(DEFAULT_REPO_ROOT_FORMAT).render(variables, styles)
        assert text.plain == "~/c/app/s/models "

    def test_unknown_style_variable_raises(self) -> None:
        with pytest.raises(FormatError, match="nope"):
            StringFormatter("[$path]($nope)").render({"path": "x"}, STYLES)

    def test_bad_literal_style_raises(self) -> None:
        with pytest.raises(FormatError):
            StringFormatter("[$path](sparkly)").render({"path": "x"})


class TestToAnsi:
    """Tests for to_ansi function."""

    def test_emits_escape_codes(self) -> None:
        text = StringFormatter("[$path]($style)").render({"path": "~/x"}, STYLES)
        rendered = to_ansi(text)
        assert "\x1b[" in rendered
        assert "~/x" in rendered
        assert not rendered.endswith("\n")

    def test_bash_wrapping(self) -> None:
        text = StringFormatter("[$path]($style)").render({"path": "~/x"}, STYLES)
        rendered = to_ansi(text, "bash")
        assert "\\[\x1b[" in rendered
        assert rendered.count("\\[") == rendered.count("\\]")

    def test_zsh_wrapping(self) -> None:
        text = StringFormatter("[$path]($style)").render({"path": "~/x"}, STYLES)
        rendered = to_ansi(text, "zsh")
        assert "%{\x1b[" in rendered

    def test_unknown_shell_is_unwrapped(self) -> None:
        text = StringFormatter("[$path]($style)").render({"path": "~/x"}, STYLES)
        assert to_ansi(text, "fish") == to_ansi(text)

    def test_plain_text_has_no_escapes(self) -> None:
        text = StringFormatter("$path").render({"path": "~/x"})
        assert to_ansi(text) == "~/x"
