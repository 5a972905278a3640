"""
High-level convenience API for md2typst.

Provides simple functions to convert Markdown strings, bytes or streams to
Typst without needing to understand the internal pipeline.
"""

import io
import logging

from .marko_adapter import MarkoToNodeAdapter
from .frontmatter_parser import parse_markdown_string_with_frontmatter
from .MarkdownToTypst import MarkdownToTypst
from .exceptions import InputError

logger = logging.getLogger('md2typst')

# Arbitrary bytes survive decode/encode unchanged
ENCODING = 'utf-8'
ERRORS = 'surrogateescape'


def convert_string(markdown_string, config=None):
    """Convert a Markdown string to Typst markup.

    Args:
        markdown_string: Markdown-formatted text (may include YAML frontmatter)
        config: Optional TypstConfig instance. Uses DEFAULT_CONFIG if None.

    Returns:
        Typst markup as a string.

    Raises:
        FrontmatterError: If the front matter block is not valid YAML metadata.
    """
    metadata, md_content = parse_markdown_string_with_frontmatter(markdown_string)

    root = MarkoToNodeAdapter().parse(md_content)

    buf = io.StringIO()
    converter = MarkdownToTypst(buf, config=config)
    converter.write_preamble(metadata)
    converter.render_body(root)
    return buf.getvalue()


def convert_bytes(data, config=None):
    """Convert raw Markdown bytes to Typst bytes (UTF-8)."""
    text = data.decode(ENCODING, ERRORS)
    return convert_string(text, config=config).encode(ENCODING, ERRORS)


def convert_stream(instream, outstream, config=None):
    """Read a whole binary stream, convert it, and write the result once.

    Nothing is written to outstream unless the conversion succeeds.

    Args:
        instream: Binary file-like object to read Markdown from
        outstream: Binary file-like object to write Typst to
        config: Optional TypstConfig instance.

    Raises:
        InputError: If the input stream cannot be read.
        FrontmatterError: If the front matter block is invalid.
    """
    try:
        data = instream.read()
    except OSError as e:
        raise InputError(f"error reading input: {e}") from e

    logger.debug("Read %d bytes of input", len(data))
    result = convert_bytes(data, config=config)
    outstream.write(result)
    outstream.flush()
