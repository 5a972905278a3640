"""
Pytest configuration and shared fixtures.
"""

import io
import logging

import pytest

from md2typst.MarkdownToTypst import MarkdownToTypst
from md2typst.marko_adapter import MarkoToNodeAdapter
from md2typst.nodes import Node


PREAMBLE = (
    '#set page(paper: "a4")\n'
    '#set text(font: "SimSun", size: 12pt, lang: "zh")\n'
    '#set par(leading: 1.5em, first-line-indent: 2em)\n'
    '\n'
)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by the CLI so they never outlive a test."""
    yield
    logger = logging.getLogger('md2typst')
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def adapter():
    """Create a Marko adapter instance."""
    return MarkoToNodeAdapter()


@pytest.fixture
def render():
    """Render a node tree (body only) and return the Typst text."""
    def _render(root, config=None):
        buf = io.StringIO()
        MarkdownToTypst(buf, config=config).render_body(root)
        return buf.getvalue()
    return _render


@pytest.fixture
def document():
    """Build a Document node from the given children."""
    def _document(*children):
        return Node('Document', children=list(children))
    return _document
