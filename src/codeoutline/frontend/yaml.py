"""YAML frontend with position tracking via ruamel.yaml's composer."""

from __future__ import annotations

from ruamel.yaml import YAML
from ruamel.yaml.error import MarkedYAMLError, YAMLError
from ruamel.yaml.nodes import MappingNode, Node, ScalarNode, SequenceNode

from codeoutline.frontend.base import (
    Declaration,
    Diagnostic,
    Frontend,
    FrontendResult,
    ParseTree,
    SourceRange,
)
from codeoutline.frontend.registry import FrontendRegistry

Position = tuple[int, int]


def _category(node: Node) -> str:
    if isinstance(node, MappingNode):
        return "mapping"
    if isinstance(node, SequenceNode):
        return "sequence"
    return "scalar"


def _printable(text: str) -> str:
    """Escape control characters so a name always stays on one report line."""
    if text.isprintable():
        return text
    return "".join(c if c.isprintable() else repr(c)[1:-1] for c in text)


def _key_text(node: Node) -> str:
    if isinstance(node, ScalarNode) and node.value != "":
        return _printable(str(node.value))
    return f"<{_category(node)}>"


def _start(node: Node) -> Position:
    # ruamel.yaml marks are zero-relative in both line and column
    return node.start_mark.line + 1, node.start_mark.column


def _end(node: Node) -> Position:
    return node.end_mark.line + 1, node.end_mark.column


def _source_range(start: Position, end: Position) -> SourceRange:
    return SourceRange(start[0], start[1], end[0], end[1])


@FrontendRegistry.register
class YAMLFrontend(Frontend):
    """Outlines YAML documents: one unit per key of a root mapping.

    Uses ruamel.yaml which keeps start/end marks on every composed node.
    The composer hands back the anchored node for every alias, so a node
    seen a second time is reported as an ``alias`` leaf positioned at the
    referring key (or, for sequence items, at the end of the previous item)
    rather than at the anchor.
    """

    def __init__(self) -> None:
        self._yaml = YAML()

    @property
    def name(self) -> str:
        return "yaml"

    @property
    def suffixes(self) -> tuple[str, ...]:
        return (".yaml", ".yml")

    def parse(self, file_identifier: str, source: str) -> FrontendResult:
        try:
            documents = list(self._yaml.compose_all(source))
        except MarkedYAMLError as exc:
            mark = exc.problem_mark or exc.context_mark
            line, column = (mark.line + 1, mark.column) if mark is not None else (1, 0)
            message = " ".join(part for part in (exc.context, exc.problem) if part)
            return FrontendResult(
                parse_tree=None,
                diagnostics=[Diagnostic(line, column, _printable(message or str(exc)))],
            )
        except YAMLError as exc:
            return FrontendResult(
                parse_tree=None, diagnostics=[Diagnostic(1, 0, _printable(str(exc)))]
            )

        diagnostics: list[Diagnostic] = []
        units: list[Declaration] = []
        for index, root in enumerate(documents):
            visited: set[int] = {id(root)}
            if isinstance(root, MappingNode):
                units.extend(self._entries(root, "", diagnostics, visited))
            else:
                visited.clear()
                units.append(
                    self._declaration(
                        f"document[{index}]", _start(root), _start(root), root, diagnostics, visited
                    )
                )
        return FrontendResult(parse_tree=ParseTree(units=units), diagnostics=diagnostics)

    # -- declarations ---------------------------------------------------------

    def _entries(
        self,
        mapping: MappingNode,
        prefix: str,
        diagnostics: list[Diagnostic],
        visited: set[int],
    ) -> list[Declaration]:
        declarations: list[Declaration] = []
        seen: set[str] = set()
        cursor = _start(mapping)
        for key_node, value_node in mapping.value:
            if id(key_node) in visited:
                # Aliased key: its marks belong to the anchor
                key_start = key_end = cursor
            else:
                visited.add(id(key_node))
                key_start, key_end = _start(key_node), _end(key_node)
            key = _key_text(key_node)
            if key in seen:
                diagnostics.append(
                    Diagnostic(key_start[0], key_start[1], f'duplicate key "{key}" in mapping')
                )
            seen.add(key)
            name = f"{prefix}.{key}" if prefix else key
            declaration = self._declaration(
                name, key_start, key_end, value_node, diagnostics, visited
            )
            declarations.append(declaration)
            cursor = max(cursor, (declaration.range.end_line, declaration.range.end_column))
        return declarations

    def _items(
        self,
        sequence: SequenceNode,
        prefix: str,
        diagnostics: list[Diagnostic],
        visited: set[int],
    ) -> list[Declaration]:
        declarations: list[Declaration] = []
        cursor = _start(sequence)
        for i, item in enumerate(sequence.value):
            start = cursor if id(item) in visited else max(cursor, _start(item))
            declaration = self._declaration(
                f"{prefix}[{i}]", start, cursor, item, diagnostics, visited
            )
            declarations.append(declaration)
            cursor = max(cursor, (declaration.range.end_line, declaration.range.end_column))
        return declarations

    def _declaration(
        self,
        name: str,
        start: Position,
        alias_end: Position,
        value: Node,
        diagnostics: list[Diagnostic],
        visited: set[int],
    ) -> Declaration:
        """Declaration for ``value`` introduced at ``start``.

        ``alias_end`` closes the range when ``value`` was already outlined.
        """
        if id(value) in visited:
            return Declaration("alias", name, _source_range(start, max(start, alias_end)))
        visited.add(id(value))
        source_range = _source_range(start, max(start, _end(value)))
        if isinstance(value, MappingNode):
            members = self._entries(value, name, diagnostics, visited)
        elif isinstance(value, SequenceNode):
            members = self._items(value, name, diagnostics, visited)
        else:
            return Declaration("scalar", name, source_range)
        return Declaration(_category(value), name, source_range, members, is_container=True)
