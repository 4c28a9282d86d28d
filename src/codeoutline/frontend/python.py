"""Python frontend built on the standard library ``ast`` module."""

from __future__ import annotations

import ast
import warnings
from pathlib import PurePath

from codeoutline.frontend.base import (
    Declaration,
    Diagnostic,
    Frontend,
    FrontendResult,
    ParseTree,
    SourceRange,
)
from codeoutline.frontend.registry import FrontendRegistry


def module_name_for(file_identifier: str) -> str:
    """Dotted module name for a file: ``pkg/sub/mod.py`` -> ``pkg.sub.mod``.

    Absolute paths and paths escaping the working directory fall back to
    the bare file stem.
    """
    path = PurePath(file_identifier)
    parts = list(path.parts)
    if not parts:
        return file_identifier or "<module>"
    if path.is_absolute() or ".." in parts:
        parts = [path.name]
    parts[-1] = PurePath(parts[-1]).stem
    if parts[-1] == "__init__" and len(parts) > 1:
        parts.pop()
    return ".".join(parts)


class _ColumnMap:
    """Converts ``ast`` UTF-8 byte columns to character columns."""

    def __init__(self, source: str) -> None:
        # ast counts "\r\n", "\r" and "\n" each as one line break
        self._lines = source.replace("\r\n", "\n").replace("\r", "\n").split("\n")

    def to_character(self, line: int, byte_offset: int) -> int:
        if not 0 < line <= len(self._lines):
            return byte_offset
        text = self._lines[line - 1]
        if text.isascii():
            return byte_offset
        return len(text.encode("utf-8")[:byte_offset].decode("utf-8", errors="replace"))


@FrontendRegistry.register
class PythonFrontend(Frontend):
    """Outlines Python modules: one ``module`` unit per file."""

    @property
    def name(self) -> str:
        return "python"

    @property
    def suffixes(self) -> tuple[str, ...]:
        return (".py", ".pyi")

    def parse(self, file_identifier: str, source: str) -> FrontendResult:
        diagnostics: list[Diagnostic] = []
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            try:
                tree = ast.parse(source, filename=file_identifier)
            except SyntaxError as exc:
                diagnostics.extend(self._warning_diagnostics(caught))
                diagnostics.append(
                    Diagnostic(
                        start_line=max(exc.lineno or 1, 1),
                        start_column=max((exc.offset or 1) - 1, 0),
                        message=exc.msg,
                    )
                )
                return FrontendResult(parse_tree=None, diagnostics=diagnostics)
            except ValueError as exc:
                # e.g. null bytes in the source on older interpreters
                diagnostics.extend(self._warning_diagnostics(caught))
                diagnostics.append(Diagnostic(start_line=1, start_column=0, message=str(exc)))
                return FrontendResult(parse_tree=None, diagnostics=diagnostics)
        diagnostics.extend(self._warning_diagnostics(caught))

        columns = _ColumnMap(source)
        module_name = module_name_for(file_identifier)
        unit = Declaration(
            category="module",
            name=module_name,
            range=SourceRange(1, 0, 1, 0),
            members=self._members(tree.body, module_name, columns),
            is_container=True,
        )
        return FrontendResult(parse_tree=ParseTree(units=[unit]), diagnostics=diagnostics)

    @staticmethod
    def _warning_diagnostics(caught: list[warnings.WarningMessage]) -> list[Diagnostic]:
        return [
            Diagnostic(
                start_line=max(warning.lineno or 1, 1),
                start_column=0,
                message=f"{warning.category.__name__}: {warning.message}",
            )
            for warning in caught
        ]

    # -- declarations ---------------------------------------------------------

    def _members(self, body: list[ast.stmt], prefix: str, columns: _ColumnMap) -> list[Declaration]:
        return [
            self._declaration(stmt, prefix, columns, first=index == 0)
            for index, stmt in enumerate(body)
        ]

    def _declaration(
        self, stmt: ast.stmt, prefix: str, columns: _ColumnMap, first: bool
    ) -> Declaration:
        source_range = self._range(stmt, columns)
        match stmt:
            case ast.ClassDef(name=name, body=body):
                qualified = f"{prefix}.{name}"
                return Declaration(
                    category="class",
                    name=qualified,
                    range=source_range,
                    members=self._members(body, qualified, columns),
                    is_container=True,
                )
            case ast.FunctionDef(name=name):
                return Declaration("function", f"{prefix}.{name}", source_range)
            case ast.AsyncFunctionDef(name=name):
                return Declaration("async function", f"{prefix}.{name}", source_range)
            case ast.Assign(targets=targets):
                names = ", ".join(ast.unparse(target) for target in targets)
                return Declaration("assignment", f"{prefix}.{names}", source_range)
            case ast.AnnAssign(target=target) | ast.AugAssign(target=target):
                return Declaration("assignment", f"{prefix}.{ast.unparse(target)}", source_range)
            case ast.Import(names=aliases) | ast.ImportFrom(names=aliases):
                bound = ", ".join(alias.asname or alias.name for alias in aliases)
                return Declaration("import", f"{prefix}.{bound}", source_range)
            case ast.Expr(value=ast.Constant(value=str())) if first:
                return Declaration("docstring", f"{prefix}.__doc__", source_range)
            case ast.Expr():
                return Declaration("expression", "<expression>", source_range)
        category = type(stmt).__name__.lower()
        return Declaration(category, f"<{category}>", source_range)

    @staticmethod
    def _range(stmt: ast.stmt, columns: _ColumnMap) -> SourceRange:
        start_line, start_byte = stmt.lineno, stmt.col_offset
        # Decorators precede the def/class keyword at the same indentation
        for decorator in getattr(stmt, "decorator_list", []):
            position = (decorator.lineno, stmt.col_offset)
            if position < (start_line, start_byte):
                start_line, start_byte = position
        end_line = stmt.end_lineno or stmt.lineno
        end_byte = stmt.end_col_offset if stmt.end_col_offset is not None else stmt.col_offset
        return SourceRange(
            start_line,
            columns.to_character(start_line, start_byte),
            end_line,
            columns.to_character(end_line, end_byte),
        )
