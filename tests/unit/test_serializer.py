"""Tests for the outline report serializer."""

from __future__ import annotations

from codeoutline.frontend.base import Diagnostic
from codeoutline.models.outline import Container, OverallStructure, ParsingError, Terminal
from codeoutline.models.spans import CharacterSpan, LineSpan
from codeoutline.outline.builder import TreeBuilder
from codeoutline.outline.serializer import (
    format_character_span,
    format_line_span,
    render_parsing_error,
    render_report,
    render_section,
)
from tests.conftest import module_foo_result


def span(start: tuple[int, int], end: tuple[int, int]) -> LineSpan:
    return LineSpan(start=start, end=end)


class TestSpanFormatting:
    def test_line_span(self) -> None:
        assert format_line_span(span((1, 0), (5, 12))) == "{start: [1,0], end: [5,12]}"

    def test_degenerate_line_span(self) -> None:
        assert format_line_span(LineSpan.degenerate()) == "{start: [0,0], end: [0,0]}"

    def test_absent_character_span(self) -> None:
        assert format_character_span(CharacterSpan()) == "[0, -1]"

    def test_populated_character_span(self) -> None:
        assert format_character_span(CharacterSpan(first=3, last=17)) == "[3, 17]"


class TestSections:
    def test_terminal(self) -> None:
        t = Terminal(kind="function", name="M.f", location_span=span((2, 0), (3, 0)))
        assert render_section(t) == [
            "- type : function",
            "  name : M.f",
            "  locationSpan : {start: [2,0], end: [3,0]}",
            "  span : [0, -1]",
        ]

    def test_container_without_children_has_no_children_line(self) -> None:
        c = Container(kind="module", name="Foo", location_span=span((1, 0), (5, 12)))
        lines = render_section(c)
        assert lines == [
            "- type : module",
            "  name : Foo",
            "  locationSpan : {start: [1,0], end: [5,12]}",
            "  headerSpan : [0, -1]",
            "  footerSpan : [0, -1]",
        ]

    def test_nested_children_are_indented(self) -> None:
        method = Terminal(kind="function", name="A.f", location_span=span((2, 4), (3, 12)))
        inner = Container(
            kind="class", name="A", location_span=span((1, 0), (3, 12)), children=[method]
        )
        outer = Container(
            kind="module", name="M", location_span=span((1, 0), (3, 12)), children=[inner]
        )
        assert render_section(outer) == [
            "- type : module",
            "  name : M",
            "  locationSpan : {start: [1,0], end: [3,12]}",
            "  headerSpan : [0, -1]",
            "  footerSpan : [0, -1]",
            "  children :",
            "    - type : class",
            "      name : A",
            "      locationSpan : {start: [1,0], end: [3,12]}",
            "      headerSpan : [0, -1]",
            "      footerSpan : [0, -1]",
            "      children :",
            "        - type : function",
            "          name : A.f",
            "          locationSpan : {start: [2,4], end: [3,12]}",
            "          span : [0, -1]",
        ]


class TestParsingErrors:
    def test_plain_message(self) -> None:
        error = ParsingError(location=(3, 7), message="Unexpected end of input")
        assert render_parsing_error(error) == [
            "- location: [3,7]",
            '  message: "Unexpected end of input"',
        ]

    def test_double_quotes_escaped(self) -> None:
        error = ParsingError(location=(2, 0), message='Unexpected token "let"')
        assert render_parsing_error(error)[1] == '  message: "Unexpected token \\"let\\""'


class TestReport:
    def test_end_to_end_module(self, builder: TreeBuilder) -> None:
        report = render_report(builder.build("foo.fs", module_foo_result()))
        assert report == "\n".join(
            [
                "---",
                "type : file",
                "name : foo.fs",
                "locationSpan : {start: [1,0], end: [5,12]}",
                "footerSpan : [0, -1]",
                "parsingErrorsDetected : false",
                "children :",
                "  - type : module",
                "    name : Foo",
                "    locationSpan : {start: [1,0], end: [5,12]}",
                "    headerSpan : [0, -1]",
                "    footerSpan : [0, -1]",
            ]
        )

    def test_empty_structure(self) -> None:
        report = render_report(OverallStructure(name="empty.fs"))
        assert report == "\n".join(
            [
                "---",
                "type : file",
                "name : empty.fs",
                "locationSpan : {start: [0,0], end: [0,0]}",
                "footerSpan : [0, -1]",
                "parsingErrorsDetected : false",
            ]
        )
        assert "children :" not in report
        assert "parsingErrors :" not in report

    def test_parsing_errors_section(self, builder: TreeBuilder) -> None:
        diagnostics = [Diagnostic(2, 0, 'Unexpected token "let"'), Diagnostic(4, 2, "x")]
        report = render_report(builder.build("foo.fs", module_foo_result(diagnostics)))
        lines = report.split("\n")
        assert "parsingErrorsDetected : true" in lines
        index = lines.index("parsingErrors :")
        assert lines[index + 1:] == [
            "  - location: [2,0]",
            '    message: "Unexpected token \\"let\\""',
            "  - location: [4,2]",
            '    message: "x"',
        ]
        # children come before diagnostics
        assert lines.index("children :") < index

    def test_flag_matches_section_presence(self) -> None:
        with_errors = OverallStructure(
            name="e.fs", parsing_errors=[ParsingError(location=(1, 0), message="m")]
        )
        without_errors = OverallStructure(name="ok.fs")
        assert "parsingErrorsDetected : true" in render_report(with_errors)
        assert "parsingErrors :" in render_report(with_errors)
        assert "parsingErrorsDetected : false" in render_report(without_errors)
        assert "parsingErrors :" not in render_report(without_errors)

    def test_deterministic(self, recursive_builder: TreeBuilder) -> None:
        diagnostics = [Diagnostic(2, 0, "warn")]
        first = render_report(recursive_builder.build("foo.fs", module_foo_result(diagnostics)))
        second = render_report(recursive_builder.build("foo.fs", module_foo_result(diagnostics)))
        assert first == second

    def test_no_tabs_or_trailing_whitespace(self, recursive_builder: TreeBuilder) -> None:
        report = render_report(recursive_builder.build("foo.fs", module_foo_result()))
        for line in report.split("\n"):
            assert "\t" not in line
            assert line == line.rstrip()

    def test_no_trailing_newline(self) -> None:
        assert not render_report(OverallStructure(name="x")).endswith("\n")
