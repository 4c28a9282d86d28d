"""Line/column and character-offset intervals used to locate constructs."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, model_validator

# (line, column): one-relative line, zero-relative character column.
Position = tuple[int, int]


class SpanUnionOnEmptySet(ValueError):
    """Raised when a union is requested over zero spans."""

    def __init__(self) -> None:
        super().__init__("cannot compute the union of an empty set of spans")


class LineSpan(BaseModel):
    """Half-open ``[start, end)`` interval of (line, column) positions.

    ``end`` points one character past the construct, either on the same
    line or at column 0 of the following line.  The degenerate span
    ``((0, 0), (0, 0))`` marks an outline with no content.
    """

    model_config = ConfigDict(frozen=True)

    start: Position
    end: Position

    @model_validator(mode="after")
    def _check_order(self) -> LineSpan:
        for line, column in (self.start, self.end):
            if line < 0 or column < 0:
                raise ValueError(f"negative position in span {self.start}->{self.end}")
        if self.start > self.end:
            raise ValueError(f"span start {self.start} follows its end {self.end}")
        return self

    @classmethod
    def degenerate(cls) -> LineSpan:
        return cls(start=(0, 0), end=(0, 0))

    def union(self, other: LineSpan) -> LineSpan:
        """Smallest span enclosing both ``self`` and ``other``."""
        return LineSpan(start=min(self.start, other.start), end=max(self.end, other.end))

    def encloses(self, other: LineSpan) -> bool:
        return self.start <= other.start and other.end <= self.end


def union_all(spans: Iterable[LineSpan]) -> LineSpan:
    """Fold :meth:`LineSpan.union` over a non-empty sequence of spans."""
    result: LineSpan | None = None
    for span in spans:
        result = span if result is None else result.union(span)
    if result is None:
        raise SpanUnionOnEmptySet()
    return result


class CharacterSpan(BaseModel):
    """Closed ``[first, last]`` interval of zero-relative character offsets."""

    model_config = ConfigDict(frozen=True)

    first: int = 0
    last: int = -1

    @property
    def is_empty(self) -> bool:
        return self.last < self.first


# Sub-spans the builder does not compute.
EMPTY_CHARACTER_SPAN = CharacterSpan()
