"""Pydantic models for outlines and source spans."""

from codeoutline.models.errors import ParseUnavailable
from codeoutline.models.outline import (
    Container,
    OverallStructure,
    ParsingError,
    Section,
    Terminal,
    location_span_of,
)
from codeoutline.models.spans import (
    EMPTY_CHARACTER_SPAN,
    CharacterSpan,
    LineSpan,
    SpanUnionOnEmptySet,
    union_all,
)

__all__ = [
    "EMPTY_CHARACTER_SPAN",
    "CharacterSpan",
    "Container",
    "LineSpan",
    "OverallStructure",
    "ParseUnavailable",
    "ParsingError",
    "Section",
    "SpanUnionOnEmptySet",
    "Terminal",
    "location_span_of",
    "union_all",
]
