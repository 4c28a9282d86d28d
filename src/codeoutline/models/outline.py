"""Outline tree: containers, terminals, diagnostics and the per-file root."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from codeoutline.models.spans import EMPTY_CHARACTER_SPAN, CharacterSpan, LineSpan


class Terminal(BaseModel):
    """A declaration with no nested constructs (function, field, binding)."""

    model_config = ConfigDict(frozen=True)

    variant: Literal["terminal"] = "terminal"
    kind: str = Field(min_length=1)
    name: str = Field(min_length=1)
    location_span: LineSpan
    span: CharacterSpan = EMPTY_CHARACTER_SPAN


class Container(BaseModel):
    """A construct owning nested declarations (module, namespace, class)."""

    model_config = ConfigDict(frozen=True)

    variant: Literal["container"] = "container"
    kind: str = Field(min_length=1)
    name: str = Field(min_length=1)
    location_span: LineSpan
    header_span: CharacterSpan = EMPTY_CHARACTER_SPAN
    footer_span: CharacterSpan = EMPTY_CHARACTER_SPAN
    children: tuple[Section, ...] = ()


Section = Annotated[Container | Terminal, Field(discriminator="variant")]

Container.model_rebuild()


def location_span_of(section: Section) -> LineSpan:
    """Location span of either section variant."""
    match section:
        case Container(location_span=span):
            return span
        case Terminal(location_span=span):
            return span
    raise TypeError(f"not a section: {section!r}")


class ParsingError(BaseModel):
    """A located diagnostic reported by a frontend."""

    model_config = ConfigDict(frozen=True)

    location: tuple[int, int]  # (one-relative line, zero-relative column)
    message: str


class OverallStructure(BaseModel):
    """Root outline document for one source file."""

    model_config = ConfigDict(frozen=True)

    name: str
    location_span: LineSpan = Field(default_factory=LineSpan.degenerate)
    footer_span: CharacterSpan = EMPTY_CHARACTER_SPAN
    children: tuple[Section, ...] = ()
    parsing_errors: tuple[ParsingError, ...] = ()

    @property
    def parsing_errors_detected(self) -> bool:
        return len(self.parsing_errors) > 0
