"""Abstract frontend: parse source text into position-annotated declarations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from codeoutline.models.spans import LineSpan


@dataclass(frozen=True)
class SourceRange:
    """Syntactic range reported by a frontend, half-open like :class:`LineSpan`."""

    start_line: int
    start_column: int
    end_line: int
    end_column: int

    def to_line_span(self) -> LineSpan:
        return LineSpan(
            start=(self.start_line, self.start_column),
            end=(self.end_line, self.end_column),
        )


@dataclass(frozen=True)
class Declaration:
    """A declarative unit with its category, dotted name and range.

    ``is_container`` tells the tree builder whether the declaration owns
    nested declarations (class, mapping) or is a leaf (function, scalar).
    """

    category: str
    name: str
    range: SourceRange
    members: list[Declaration] = field(default_factory=list)
    is_container: bool = False


@dataclass(frozen=True)
class Diagnostic:
    """A located, recoverable issue reported by a frontend."""

    start_line: int
    start_column: int
    message: str


@dataclass
class ParseTree:
    """Top-level declarative units of one file, in declaration order."""

    units: list[Declaration] = field(default_factory=list)


@dataclass
class FrontendResult:
    """Output of :meth:`Frontend.parse`; ``parse_tree`` is None when parsing failed."""

    parse_tree: ParseTree | None
    diagnostics: list[Diagnostic] = field(default_factory=list)


class Frontend(ABC):
    """Abstract base for all language frontends."""

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def suffixes(self) -> tuple[str, ...]:
        """File suffixes (with leading dot) handled by this frontend."""

    @abstractmethod
    def parse(self, file_identifier: str, source: str) -> FrontendResult:
        """Parse ``source`` and return its declarations plus diagnostics."""
