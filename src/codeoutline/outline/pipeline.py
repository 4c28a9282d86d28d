"""Orchestrates the outline pipeline: Source → Frontend → Tree → Report."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from codeoutline.frontend.base import Diagnostic, FrontendResult
from codeoutline.frontend.registry import FrontendRegistry
from codeoutline.models.outline import OverallStructure
from codeoutline.outline.builder import TreeBuilder
from codeoutline.outline.serializer import render_report
from codeoutline.settings import Settings

logger = logging.getLogger("codeoutline.pipeline")


@dataclass
class OutlineResult:
    """The outline of one file and its rendered report."""

    structure: OverallStructure
    report: str
    frontend: str


class OutlinePipeline:
    """Orchestrates: Source → Frontend → Tree building → Report."""

    def __init__(self, settings: Settings | None = None, recursive: bool | None = None) -> None:
        self._settings = settings or Settings()
        if recursive is None:
            recursive = self._settings.outline_recursive
        self._builder = TreeBuilder(recursive=recursive)

    def outline_source(
        self,
        file_identifier: str,
        source: str,
        frontend_name: str | None = None,
    ) -> OutlineResult:
        """Outline in-memory source text.

        The frontend is chosen by name, or from the identifier's suffix.
        Raises ``ParseUnavailable`` when no parse tree could be produced.
        """
        if frontend_name is not None:
            frontend = FrontendRegistry.get(frontend_name)
        else:
            frontend = FrontendRegistry.for_path(file_identifier)

        # Phase 1: Parse (size limit applies to every frontend)
        limit = self._settings.max_document_size
        if len(source) > limit:
            result = FrontendResult(
                parse_tree=None,
                diagnostics=[
                    Diagnostic(
                        1, 0,
                        f"document exceeds maximum size ({len(source):,} chars > {limit:,} limit)",
                    )
                ],
            )
        else:
            result = frontend.parse(file_identifier, source)
        if result.diagnostics:
            logger.info(
                "%s: frontend '%s' reported %d diagnostic(s)",
                file_identifier, frontend.name, len(result.diagnostics),
            )

        # Phase 2: Tree building
        structure = self._builder.build(file_identifier, result)

        # Phase 3: Rendering
        return OutlineResult(
            structure=structure,
            report=render_report(structure),
            frontend=frontend.name,
        )

    def outline_file(self, path: Path, frontend_name: str | None = None) -> OutlineResult:
        """Read ``path`` and outline its contents."""
        with path.open("r", encoding=self._settings.source_encoding) as handle:
            source = handle.read()
        logger.debug("Read %s (%d chars)", path, len(source))
        return self.outline_source(str(path), source, frontend_name=frontend_name)
