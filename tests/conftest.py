"""
Shared pytest fixtures for the deflang test suite.

Provides:
- Parsing helpers that run source text through the tokenizer and parser
- Settings with known scaffolding, independent of the environment
- Sample .src files on disk
"""

from pathlib import Path

import pytest

from deflang.core.config import Settings
from deflang.parser import FunctionDef, Parser, Tokenizer


@pytest.fixture
def parse_source():
    """Parse source text straight to a FunctionDef."""
    def _parse(source: str) -> FunctionDef:
        return Parser(Tokenizer().tokenize(source)).parse()
    return _parse


@pytest.fixture
def settings() -> Settings:
    """Settings with the default scaffolding and no log file."""
    return Settings(
        LOG_LEVEL="WARNING",
        LOG_FORMAT="text",
        LOG_FILE=None,
        ENCODING="utf-8",
        OUTPUT_SUFFIX=".js",
        RUNTIME_PREAMBLE="function add(x, y) { return x + y };",
        TEST_TRAILER="console.log(f(1,2));",
    )


@pytest.fixture
def src_file(tmp_path: Path) -> Path:
    """A valid program on disk."""
    path = tmp_path / "test.src"
    path.write_text("def f(x, y)\n  add(x, y)\nend\n", encoding="utf-8")
    return path


@pytest.fixture
def bad_src_file(tmp_path: Path) -> Path:
    """A program that fails to tokenize."""
    path = tmp_path / "bad.src"
    path.write_text("def f(x) # end\n", encoding="utf-8")
    return path
