import os
import sys

import pytest

# The modules live at the repo root; make them importable from tests/.
REPO_ROOT = os.path.dirname(os.path.dirname(__file__))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from lexer import Lexer  # noqa: E402
from parser import Parser  # noqa: E402


@pytest.fixture
def make_parser():
    """Return a factory building a fresh parser over the given source."""

    def _make(src: str) -> Parser:
        return Parser(Lexer(src))

    return _make
