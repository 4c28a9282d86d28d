"""Outline building, rendering and the end-to-end pipeline."""

from codeoutline.outline.builder import TreeBuilder
from codeoutline.outline.pipeline import OutlinePipeline, OutlineResult
from codeoutline.outline.serializer import render_report

__all__ = [
    "OutlinePipeline",
    "OutlineResult",
    "TreeBuilder",
    "render_report",
]
