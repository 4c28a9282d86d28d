"""Errors raised while building an outline."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from codeoutline.frontend.base import Diagnostic


class ParseUnavailable(Exception):
    """Raised when the frontend produced no parse tree for a file.

    Fatal for that file: no outline and no report are produced.  The
    frontend's diagnostics travel with the exception so callers can
    surface them.
    """

    def __init__(self, file_identifier: str, diagnostics: list[Diagnostic] | None = None) -> None:
        self.file_identifier = file_identifier
        self.diagnostics = list(diagnostics or [])
        super().__init__(f"Cannot parse file: {file_identifier}.")
