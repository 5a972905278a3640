"""
Document tree produced by the Markdown adapter and consumed by the renderer.

Every node is a single ``Node`` record tagged by ``kind``; only the fields
relevant to that kind are filled in.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

# Kinds with a Typst rendering
DOCUMENT = 'Document'
HEADING = 'Heading'
PARAGRAPH = 'Paragraph'
TEXT = 'Text'
LIST = 'List'
LIST_ITEM = 'ListItem'
EMPHASIS = 'Emphasis'
THEMATIC_BREAK = 'ThematicBreak'
CODE_SPAN = 'CodeSpan'
FENCED_CODE_BLOCK = 'FencedCodeBlock'

# Kinds the parser produces but the renderer does not translate
TEXT_BLOCK = 'TextBlock'  # paragraph inside a tight list item
CODE_BLOCK = 'CodeBlock'  # indented code
BLOCK_QUOTE = 'BlockQuote'
LINK = 'Link'
IMAGE = 'Image'
AUTO_LINK = 'AutoLink'
HTML_BLOCK = 'HTMLBlock'
RAW_HTML = 'RawHTML'


@dataclass
class Node:
    kind: str
    children: list[Node] = field(default_factory=list)
    level: int = 0             # Heading
    content: str = ''          # Text, CodeSpan, raw HTML
    soft_break: bool = False   # Text
    strong: bool = False       # Emphasis
    lines: list[str] = field(default_factory=list)  # code blocks, newlines kept

    def append(self, child: Node) -> Node:
        self.children.append(child)
        return child


def walk(root: Node) -> Iterator[tuple[Node, bool]]:
    """
    Walk the tree depth first, yielding ``(node, entering)`` pairs.

    Each node is entered once and exited once, with all of its children
    visited in order between the two events.
    """
    stack = [(root, True)]
    while stack:
        node, entering = stack.pop()
        yield node, entering
        if entering:
            stack.append((node, False))
            stack.extend((child, True) for child in reversed(node.children))
