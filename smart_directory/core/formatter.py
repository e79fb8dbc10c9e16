"""Render prompt format strings such as `[$path]($style)` into styled text.

A format string mixes literal text, `$variables` and styled groups written as
`[content](style)`. Groups nest, and a group whose variables are all unset is
left out entirely, which is how optional pieces like `$read_only` disappear.
"""

import io
import re
from collections.abc import Mapping
from dataclasses import dataclass, field

from rich.color import Color, ColorParseError
from rich.console import Console
from rich.style import Style
from rich.text import Text

_VARIABLE_CHARS = re.compile(r"[A-Za-z0-9_]")
_ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")

_ATTRIBUTES = {
    "bold": "bold",
    "italic": "italic",
    "underline": "underline",
    "dimmed": "dim",
    "inverted": "reverse",
    "blink": "blink",
    "hidden": "conceal",
    "strikethrough": "strike",
}

_COLOR_ALIASES = {"purple": "magenta"}

# Escape wrappers telling each shell that a sequence takes no columns
SHELL_ESCAPE_WRAPPERS = {
    "bash": ("\\[", "\\]"),
    "zsh": ("%{", "%}"),
}


class FormatError(ValueError):
    """Raised when a format or style string cannot be parsed."""


@dataclass
class TextNode:
    text: str


@dataclass
class VariableNode:
    name: str


@dataclass
class GroupNode:
    style: str
    children: list["Node"] = field(default_factory=list)

    def variables(self) -> list[str]:
        names: list[str] = []
        for child in self.children:
            if isinstance(child, VariableNode):
                names.append(child.name)
            elif isinstance(child, GroupNode):
                names.extend(child.variables())
        return names


Node = TextNode | VariableNode | GroupNode


def _parse_color(token: str) -> str:
    name = _COLOR_ALIASES.get(token, token).replace("-", "_")
    if name.isdigit():
        name = f"color({name})"
    try:
        Color.parse(name)
    except ColorParseError as e:
        raise FormatError(f"Unknown color `{token}`") from e
    return name


def parse_style(spec: str) -> Style:
    """Parse a style string like `bold fg:cyan bg:#1e1e1e` into a rich Style."""
    style = Style()
    for raw_token in spec.split():
        token = raw_token.lower()
        if token == "none":
            style = Style.null()
        elif token in _ATTRIBUTES:
            style += Style(**{_ATTRIBUTES[token]: True})
        elif token.startswith("fg:"):
            style += Style(color=_parse_color(token[3:]))
        elif token.startswith("bg:"):
            style += Style(bgcolor=_parse_color(token[3:]))
        else:
            style += Style(color=_parse_color(token))
    return style


class _Parser:
    """Recursive descent over a format string."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.pos = 0

    def _peek(self) -> str | None:
        return self.source[self.pos] if self.pos < len(self.source) else None

    def parse(self) -> list[Node]:
        return self._parse_items(in_group=False)

    def _parse_items(self, in_group: bool) -> list[Node]:
        nodes: list[Node] = []
        buffer = ""

        def flush() -> None:
            nonlocal buffer
            if buffer:
                nodes.append(TextNode(buffer))
                buffer = ""

        while (char := self._peek()) is not None:
            if char == "\\":
                self.pos += 1
                escaped = self._peek()
                if escaped is not None:
                    buffer += escaped
                    self.pos += 1
                else:
                    buffer += char
            elif char == "$":
                self.pos += 1
                name = self._read_name()
                if name:
                    flush()
                    nodes.append(VariableNode(name))
                else:
                    buffer += char
            elif char == "[":
                flush()
                self.pos += 1
                nodes.append(self._parse_group())
            elif char == "]":
                if not in_group:
                    raise FormatError(f"Unexpected `]` at position {self.pos}")
                flush()
                return nodes
            else:
                buffer += char
                self.pos += 1

        if in_group:
            raise FormatError("Unclosed `[` in format string")
        flush()
        return nodes

    def _parse_group(self) -> GroupNode:
        children = self._parse_items(in_group=True)
        # Consume the closing bracket
        self.pos += 1
        if self._peek() != "(":
            raise FormatError(f"Group is missing a `(style)` at position {self.pos}")
        end = self.source.find(")", self.pos)
        if end == -1:
            raise FormatError("Unclosed `(` in format string")
        style = self.source[self.pos + 1 : end]
        self.pos = end + 1
        return GroupNode(style=style, children=children)

    def _read_name(self) -> str:
        start = self.pos
        while (char := self._peek()) is not None and _VARIABLE_CHARS.match(char):
            self.pos += 1
        return self.source[start : self.pos]


class StringFormatter:
    """A parsed format string that can be rendered against variables and styles."""

    def __init__(self, format_str: str) -> None:
        self.format_str = format_str
        self.nodes = _Parser(format_str).parse()

    def render(
        self,
        variables: Mapping[str, str | None],
        styles: Mapping[str, str] | None = None,
    ) -> Text:
        """Render into a rich Text. Unknown variables render as empty."""
        text = Text()
        self._render_nodes(self.nodes, text, Style(), variables, styles or {})
        return text

    def _render_nodes(
        self,
        nodes: list[Node],
        text: Text,
        style: Style,
        variables: Mapping[str, str | None],
        styles: Mapping[str, str],
    ) -> None:
        for node in nodes:
            if isinstance(node, TextNode):
                text.append(node.text, style=style)
            elif isinstance(node, VariableNode):
                value = variables.get(node.name)
                if value:
                    text.append(value, style=style)
            else:
                names = node.variables()
                if names and not any(variables.get(name) for name in names):
                    continue
                group_style = style + parse_style(self._resolve_style(node.style, styles))
                self._render_nodes(node.children, text, group_style, variables, styles)

    @staticmethod
    def _resolve_style(spec: str, styles: Mapping[str, str]) -> str:
        tokens: list[str] = []
        for token in spec.split():
            if token.startswith("$"):
                name = token[1:]
                if name not in styles:
                    raise FormatError(f"Unknown style variable `{token}`")
                tokens.append(styles[name])
            else:
                tokens.append(token)
        return " ".join(tokens)


def to_ansi(text: Text, shell: str | None = None) -> str:
    """Render styled text to an ANSI string, wrapping escapes for `shell`."""
    buffer = io.StringIO()
    console = Console(
        file=buffer,
        force_terminal=True,
        color_system="truecolor",
        soft_wrap=True,
        highlight=False,
        emoji=False,
        markup=False,
    )
    console.print(text, end="")
    rendered = buffer.getvalue()

    wrapper = SHELL_ESCAPE_WRAPPERS.get(shell or "")
    if wrapper is None:
        return rendered
    start, end = wrapper
    return _ANSI_ESCAPE.sub(lambda match: f"{start}{match.group(0)}{end}", rendered)
