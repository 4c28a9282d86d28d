"""Render an outline as an indentation-sensitive, YAML-like text report.

The output is a pure function of the :class:`OverallStructure`: identical
trees always render to byte-identical text.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TypeVar

from codeoutline.models.outline import Container, OverallStructure, ParsingError, Section, Terminal
from codeoutline.models.spans import CharacterSpan, LineSpan

T = TypeVar("T")

INDENT = "  "


def format_line_span(span: LineSpan) -> str:
    (start_line, start_column), (end_line, end_column) = span.start, span.end
    return f"{{start: [{start_line},{start_column}], end: [{end_line},{end_column}]}}"


def format_character_span(span: CharacterSpan) -> str:
    return f"[{span.first}, {span.last}]"


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


def _nested(render: Callable[[T], list[str]], items: Iterable[T]) -> Iterator[str]:
    """Render each item and indent every resulting line one level."""
    for item in items:
        for line in render(item):
            yield INDENT + line


def render_section(section: Section) -> list[str]:
    """Lines for one section as a list item."""
    match section:
        case Container():
            return _render_container(section)
        case Terminal():
            return _render_terminal(section)
    raise TypeError(f"not a section: {section!r}")


def _render_container(container: Container) -> list[str]:
    lines = [
        f"- type : {container.kind}",
        f"  name : {container.name}",
        f"  locationSpan : {format_line_span(container.location_span)}",
        f"  headerSpan : {format_character_span(container.header_span)}",
        f"  footerSpan : {format_character_span(container.footer_span)}",
    ]
    if container.children:
        lines.append("  children :")
        lines.extend(_nested(render_section, container.children))
    return lines


def _render_terminal(terminal: Terminal) -> list[str]:
    return [
        f"- type : {terminal.kind}",
        f"  name : {terminal.name}",
        f"  locationSpan : {format_line_span(terminal.location_span)}",
        f"  span : {format_character_span(terminal.span)}",
    ]


def render_parsing_error(error: ParsingError) -> list[str]:
    line, column = error.location
    message = error.message.replace('"', '\\"')
    return [
        f"- location: [{line},{column}]",
        f'  message: "{message}"',
    ]


def render_report(structure: OverallStructure) -> str:
    """Render the full report for one file, lines joined by ``\\n``."""
    lines = [
        "---",
        "type : file",
        f"name : {structure.name}",
        f"locationSpan : {format_line_span(structure.location_span)}",
        f"footerSpan : {format_character_span(structure.footer_span)}",
        f"parsingErrorsDetected : {_format_bool(structure.parsing_errors_detected)}",
    ]
    if structure.children:
        lines.append("children :")
        lines.extend(_nested(render_section, structure.children))
    if structure.parsing_errors_detected:
        lines.append("parsingErrors :")
        lines.extend(_nested(render_parsing_error, structure.parsing_errors))
    return "\n".join(lines)
