"""Build an outline tree from a frontend's parse result."""

from __future__ import annotations

import logging

from codeoutline.frontend.base import Declaration, Diagnostic, FrontendResult
from codeoutline.models.errors import ParseUnavailable
from codeoutline.models.outline import (
    Container,
    OverallStructure,
    ParsingError,
    Section,
    Terminal,
    location_span_of,
)
from codeoutline.models.spans import LineSpan, union_all

logger = logging.getLogger("codeoutline.builder")


def parsing_error_from(diagnostic: Diagnostic) -> ParsingError:
    return ParsingError(
        location=(diagnostic.start_line, diagnostic.start_column),
        message=diagnostic.message,
    )


class TreeBuilder:
    """Turns top-level declarations into containers of an :class:`OverallStructure`.

    By default only the outermost container per top-level unit is built and
    its ``children`` stay empty.  With ``recursive=True`` every member is
    classified as a nested :class:`Container` or a :class:`Terminal`.
    """

    def __init__(self, recursive: bool = False) -> None:
        self._recursive = recursive

    @property
    def recursive(self) -> bool:
        return self._recursive

    def build(self, file_identifier: str, result: FrontendResult) -> OverallStructure:
        """Build the outline for one file.

        Raises ``ParseUnavailable`` if the frontend produced no parse tree.
        Diagnostics never abort construction.
        """
        parsing_errors = tuple(parsing_error_from(d) for d in result.diagnostics)
        if result.parse_tree is None:
            raise ParseUnavailable(file_identifier, result.diagnostics)

        sections = tuple(self._top_level(unit) for unit in result.parse_tree.units)
        if sections:
            location_span = union_all(location_span_of(s) for s in sections)
        else:
            location_span = LineSpan.degenerate()

        logger.debug(
            "Built outline for %s (units=%d, diagnostics=%d, recursive=%s)",
            file_identifier, len(sections), len(parsing_errors), self._recursive,
        )
        return OverallStructure(
            name=file_identifier,
            location_span=location_span,
            children=sections,
            parsing_errors=parsing_errors,
        )

    # -- sections -------------------------------------------------------------

    def _top_level(self, unit: Declaration) -> Container:
        if self._recursive:
            return self._container(unit)
        member_spans = [m.range.to_line_span() for m in unit.members]
        return Container(
            kind=unit.category,
            name=unit.name,
            location_span=self._enclosing_span(unit, member_spans),
        )

    def _section(self, declaration: Declaration) -> Section:
        if declaration.is_container:
            return self._container(declaration)
        return Terminal(
            kind=declaration.category,
            name=declaration.name,
            location_span=declaration.range.to_line_span(),
        )

    def _container(self, declaration: Declaration) -> Container:
        children = tuple(self._section(m) for m in declaration.members)
        return Container(
            kind=declaration.category,
            name=declaration.name,
            location_span=self._enclosing_span(
                declaration, [location_span_of(c) for c in children]
            ),
            children=children,
        )

    @staticmethod
    def _enclosing_span(declaration: Declaration, member_spans: list[LineSpan]) -> LineSpan:
        """Union of the declaration's own range and its members' spans."""
        own = declaration.range.to_line_span()
        if not member_spans:
            return own
        return own.union(union_all(member_spans))
