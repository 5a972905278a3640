from __future__ import annotations

import logging
from typing import Union

from marko import Markdown

from . import nodes
from .nodes import Node

logger = logging.getLogger('md2typst')


class MarkoToNodeAdapter:
    """Converts Marko AST to the md2typst Node tree."""

    def __init__(self):
        # Plain CommonMark, no extensions
        self.md = Markdown()

    def parse(self, markdown_text: str) -> Node:
        """
        Parse markdown and return the root Document node.

        Returns:
            Node(kind='Document') whose children are the top-level blocks
        """
        doc = self.md.parse(markdown_text)

        root = Node(nodes.DOCUMENT)
        self._convert_blocks(doc.children, root)
        logger.debug("Parsed %d top-level blocks", len(root.children))
        return root

    def _convert_blocks(self, children, parent: Node) -> None:
        for child in children:
            block = self._convert_block(child)
            if block is not None:
                parent.append(block)

    def _convert_block(self, element) -> Union[Node, None]:
        """Convert a Marko block element to a Node."""
        elem_type = type(element).__name__

        if elem_type in ('Heading', 'SetextHeading'):
            node = Node(nodes.HEADING, level=getattr(element, 'level', 1))
            self._convert_inlines(element.children, node)
            return node
        elif elem_type == 'Paragraph':
            return self._convert_paragraph(element)
        elif elem_type == 'List':
            node = Node(nodes.LIST)
            self._convert_blocks(element.children, node)
            return node
        elif elem_type == 'ListItem':
            node = Node(nodes.LIST_ITEM)
            self._convert_blocks(element.children, node)
            return node
        elif elem_type == 'FencedCode':
            return Node(nodes.FENCED_CODE_BLOCK, lines=self._code_lines(element))
        elif elem_type == 'CodeBlock':
            return Node(nodes.CODE_BLOCK, lines=self._code_lines(element))
        elif elem_type == 'ThematicBreak':
            return Node(nodes.THEMATIC_BREAK)
        elif elem_type == 'Quote':
            node = Node(nodes.BLOCK_QUOTE)
            self._convert_blocks(element.children, node)
            return node
        elif elem_type == 'HTMLBlock':
            return Node(nodes.HTML_BLOCK, content=getattr(element, 'children', ''))
        elif elem_type == 'BlankLine':
            return None  # Skip blank lines
        elif elem_type == 'LinkRefDef':
            return None  # Skip link reference definitions (resolved during parsing)

        return None

    def _convert_paragraph(self, elem) -> Node:
        """Paragraph -> Paragraph, or TextBlock inside a tight list"""
        kind = nodes.TEXT_BLOCK if getattr(elem, '_tight', False) else nodes.PARAGRAPH
        node = Node(kind)
        self._convert_inlines(elem.children, node)
        return node

    def _code_lines(self, elem) -> list[str]:
        """Code block content split into lines, line endings kept."""
        code = ''
        for child in elem.children:
            if hasattr(child, 'children'):
                code += child.children
            else:
                code += str(child)
        return code.splitlines(keepends=True)

    def _convert_inlines(self, children, parent: Node) -> None:
        """Convert Marko inline children and append them to parent."""
        if children is None:
            return
        if isinstance(children, str):
            parent.append(Node(nodes.TEXT, content=children))
            return

        for child in children:
            if type(child).__name__ == 'LineBreak':
                # Hard breaks (trailing spaces, backslash) write nothing
                if getattr(child, 'soft', True):
                    self._attach_line_break(parent)
                continue
            inline = self._convert_inline(child)
            if inline is not None:
                parent.append(inline)

    def _attach_line_break(self, parent: Node) -> None:
        """
        Mark a soft line break.

        Line breaks belong to the text run before them. When the line ends
        with something else (code span, emphasis), an empty text run carries
        the break instead.
        """
        if parent.children and parent.children[-1].kind == nodes.TEXT:
            parent.children[-1].soft_break = True
        else:
            parent.append(Node(nodes.TEXT, soft_break=True))

    def _convert_inline(self, elem) -> Union[Node, None]:
        """Convert a Marko inline element to a Node."""
        elem_type = type(elem).__name__

        if elem_type == 'RawText':
            return Node(nodes.TEXT, content=getattr(elem, 'children', ''))
        elif elem_type == 'Literal':
            # Keep the backslash; it is also a Typst escape
            return Node(nodes.TEXT, content='\\' + getattr(elem, 'children', ''))
        elif elem_type in ('Emphasis', 'StrongEmphasis'):
            node = Node(nodes.EMPHASIS, strong=(elem_type == 'StrongEmphasis'))
            self._convert_inlines(elem.children, node)
            return node
        elif elem_type == 'CodeSpan':
            return Node(nodes.CODE_SPAN, content=getattr(elem, 'children', ''))
        elif elem_type == 'Link':
            node = Node(nodes.LINK, content=getattr(elem, 'dest', ''))
            self._convert_inlines(elem.children, node)
            return node
        elif elem_type == 'Image':
            node = Node(nodes.IMAGE, content=getattr(elem, 'dest', ''))
            self._convert_inlines(elem.children, node)
            return node
        elif elem_type == 'AutoLink':
            # The label is the URL itself; no text children
            return Node(nodes.AUTO_LINK, content=getattr(elem, 'dest', ''))
        elif elem_type == 'InlineHTML':
            return Node(nodes.RAW_HTML, content=getattr(elem, 'children', ''))

        if isinstance(elem, str):
            return Node(nodes.TEXT, content=elem)

        return None
