"""Shared test fixtures for codeoutline."""

from __future__ import annotations

import pytest

from codeoutline.frontend.base import (
    Declaration,
    Diagnostic,
    FrontendResult,
    ParseTree,
    SourceRange,
)
from codeoutline.outline.builder import TreeBuilder
from codeoutline.outline.pipeline import OutlinePipeline
from codeoutline.settings import Settings


@pytest.fixture
def builder() -> TreeBuilder:
    return TreeBuilder()


@pytest.fixture
def recursive_builder() -> TreeBuilder:
    return TreeBuilder(recursive=True)


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment and any local .env file."""
    return Settings(_env_file=None, log_level="DEBUG", outline_recursive=False)


@pytest.fixture
def pipeline(settings: Settings) -> OutlinePipeline:
    return OutlinePipeline(settings)


def module_foo_result(diagnostics: list[Diagnostic] | None = None) -> FrontendResult:
    """One module ``Foo`` whose two members span lines 1-5."""
    unit = Declaration(
        category="module",
        name="Foo",
        range=SourceRange(1, 0, 1, 10),
        members=[
            Declaration("let", "Foo.x", SourceRange(2, 4, 2, 20)),
            Declaration("let", "Foo.f", SourceRange(4, 4, 5, 12)),
        ],
        is_container=True,
    )
    return FrontendResult(parse_tree=ParseTree(units=[unit]), diagnostics=diagnostics or [])


SAMPLE_PYTHON_SOURCE = '''\
"""Sample module."""

import os


@decorator
class Greeter:
    greeting = "hello"

    def greet(self, name):
        return f"{self.greeting}, {name}"


async def main():
    pass
'''


SAMPLE_YAML = """\
name: demo
version: 2
services:
  web:
    image: nginx
  db:
    image: postgres
ports:
  - 80
  - 443
"""
