"""
YAML front matter parser built on python-frontmatter's YAML handler.

Splitting is lenient: a document whose header is not terminated is treated as
having no header at all. Decoding is strict: a terminated header that is not
valid YAML metadata raises FrontmatterError.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import yaml
from frontmatter.default_handlers import YAMLHandler

from .exceptions import FrontmatterError

logger = logging.getLogger('md2typst')

NULL_TAG = 'tag:yaml.org,2002:null'


class FrontMatterHandler(YAMLHandler):
    """YAML handler with the delimiter rules used for Presto documents.

    The opening delimiter must be a line that is exactly ``---``. The closing
    delimiter is the next line that starts with ``---``; anything after the
    dashes on that line is discarded along with the line itself.
    """

    OPENING_DELIMITERS = ('---\n', '---\r\n')

    def detect(self, text: str) -> bool:
        return text.startswith(self.OPENING_DELIMITERS)

    def split(self, text: str) -> tuple[str, str]:
        """
        Split text into (metadata, body).

        Raises:
            ValueError: If text has no opening or no closing delimiter.
        """
        if text.startswith('---\r\n'):
            start = 5
        elif text.startswith('---\n'):
            start = 4
        else:
            raise ValueError("Missing opening front matter delimiter")

        # Search from the opening line's newline so an empty header is found
        closing = text.find('\n---', start - 1)
        if closing < 0:
            raise ValueError("Missing closing front matter delimiter")

        metadata = text[start:closing]
        if start == 5 and metadata.endswith('\r'):
            metadata = metadata[:-1]

        end_of_line = text.find('\n', closing + 1)
        body = '' if end_of_line < 0 else text[end_of_line + 1:]
        return metadata, body

    def title_text(self, fm: str) -> str:
        """
        Return the ``title`` value as written in the source.

        Plain scalars keep their spelling (``yes``, ``0x1F``, ``1.50``) instead
        of the YAML 1.1 value PyYAML resolves them to. A null title is empty.

        Raises:
            FrontmatterError: If the title is a list or mapping.
        """
        root = yaml.compose(fm, Loader=yaml.SafeLoader)
        if not isinstance(root, yaml.MappingNode):
            return ''

        title = ''
        # Later duplicates win, as in the loaded mapping
        for key_node, value_node in root.value:
            if not (isinstance(key_node, yaml.ScalarNode) and key_node.value == 'title'):
                continue
            if not isinstance(value_node, yaml.ScalarNode):
                raise FrontmatterError(
                    f"Front matter 'title' must be a scalar, got {value_node.id}"
                )
            title = '' if value_node.tag == NULL_TAG else value_node.value
        return title


@dataclass(frozen=True)
class Metadata:
    """Front matter fields. Only ``title`` is used for rendering."""

    title: str = ''
    fields: dict = field(default_factory=dict)


def split_frontmatter(text: str, handler: FrontMatterHandler | None = None) -> tuple[str | None, str]:
    """
    Separate a leading front matter block from the Markdown body.

    Args:
        text: Full document text
        handler: Optional handler overriding the delimiter rules

    Returns:
        (metadata_text or None, body). Without a complete header the whole
        input is returned as body.
    """
    handler = handler or FrontMatterHandler()
    if not handler.detect(text):
        return None, text

    try:
        metadata, body = handler.split(text)
    except ValueError as e:
        logger.debug("Treating document as body only: %s", e)
        return None, text

    logger.debug("Split front matter: %d chars of metadata, %d chars of body", len(metadata), len(body))
    return metadata, body


def parse_metadata(metadata_text: str | None, handler: FrontMatterHandler | None = None) -> Metadata:
    """
    Decode a front matter block into a Metadata record.

    Args:
        metadata_text: YAML text between the delimiters, or None
        handler: Optional handler used for YAML loading

    Returns:
        Metadata record (empty when there is nothing to decode)

    Raises:
        FrontmatterError: If the YAML is invalid, is not a mapping, or has a
            non-scalar title.
    """
    if not metadata_text:
        return Metadata()

    handler = handler or FrontMatterHandler()
    try:
        data = handler.load(metadata_text)
    except yaml.YAMLError as e:
        raise FrontmatterError(f"Invalid YAML front matter: {e}") from e

    if data is None:
        return Metadata()
    if not isinstance(data, dict):
        raise FrontmatterError(
            f"Front matter must be a mapping, got {type(data).__name__}"
        )
    return Metadata(title=handler.title_text(metadata_text), fields=dict(data))


def parse_markdown_string_with_frontmatter(markdown_text: str) -> tuple[Metadata, str]:
    """
    Parse a Markdown string with YAML front matter.

    Args:
        markdown_text: Markdown content as string

    Returns:
        (Metadata, markdown_content_without_frontmatter)
    """
    handler = FrontMatterHandler()
    metadata_text, body = split_frontmatter(markdown_text, handler)
    return parse_metadata(metadata_text, handler), body
