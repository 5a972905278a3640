"""
md2typst - Convert Markdown to Typst markup

This package converts Markdown documents with optional YAML front matter into
Typst source, ready to be compiled by the Typst engine.
"""

from .MarkdownToTypst import MarkdownToTypst
from .marko_adapter import MarkoToNodeAdapter
from .nodes import Node, walk
from .frontmatter_parser import (
    FrontMatterHandler,
    Metadata,
    split_frontmatter,
    parse_metadata,
    parse_markdown_string_with_frontmatter,
)
from .config import TypstConfig, DEFAULT_CONFIG
from .exceptions import Md2TypstError, InputError, FrontmatterError
from .converter_api import convert_string, convert_bytes, convert_stream

__version__ = "0.1.0"
__all__ = [
    "MarkdownToTypst",
    "MarkoToNodeAdapter",
    "Node",
    "walk",
    "FrontMatterHandler",
    "Metadata",
    "split_frontmatter",
    "parse_metadata",
    "parse_markdown_string_with_frontmatter",
    "TypstConfig",
    "DEFAULT_CONFIG",
    "Md2TypstError",
    "InputError",
    "FrontmatterError",
    "convert_string",
    "convert_bytes",
    "convert_stream",
]
