"""Language frontend plugin system."""

# Import frontends to trigger registration
import codeoutline.frontend.python as _python  # noqa: F401
import codeoutline.frontend.yaml as _yaml  # noqa: F401
from codeoutline.frontend.base import (
    Declaration,
    Diagnostic,
    Frontend,
    FrontendResult,
    ParseTree,
    SourceRange,
)
from codeoutline.frontend.registry import FrontendRegistry, UnsupportedFrontendError

__all__ = [
    "Declaration",
    "Diagnostic",
    "Frontend",
    "FrontendRegistry",
    "FrontendResult",
    "ParseTree",
    "SourceRange",
    "UnsupportedFrontendError",
]
