import logging

from . import nodes
from .config import DEFAULT_CONFIG
from .nodes import walk

logger = logging.getLogger('md2typst')


class MarkdownToTypst:
    """
    Writes Typst markup for a parsed Markdown document.

    Output goes to ``out`` (anything with a ``write(str)`` method) strictly in
    call order: the preamble first, then the body in tree order.
    """

    def __init__(self, out, config=None):
        self.out = out
        self.config = config or DEFAULT_CONFIG

    @staticmethod
    def escape_string(value):
        """Escape value for use inside a Typst string literal (without quotes)."""
        result = []
        for ch in value:
            if ch == '\\':
                result.append('\\\\')
            elif ch == '"':
                result.append('\\"')
            elif ch == '\n':
                result.append('\\n')
            elif ch == '\r':
                result.append('\\r')
            elif ch == '\t':
                result.append('\\t')
            elif ord(ch) < 0x20 or ord(ch) == 0x7f:
                result.append('\\u{%x}' % ord(ch))
            else:
                result.append(ch)
        return ''.join(result)

    def _write(self, text):
        self.out.write(text)

    def _writeln(self, text=''):
        self.out.write(text + '\n')

    # --- Preamble ---

    def write_preamble(self, metadata):
        """
        Write page setup, text/paragraph defaults and the optional title block.

        Args:
            metadata: Metadata record from the front matter
        """
        cfg = self.config
        self._writeln(f'#set page(paper: "{cfg.PAPER}")')
        self._writeln(f'#set text(font: "{cfg.FONT}", size: {cfg.FONT_SIZE}, lang: "{cfg.LANG}")')
        self._writeln(f'#set par(leading: {cfg.PAR_LEADING}, first-line-indent: {cfg.PAR_FIRST_LINE_INDENT})')
        self._writeln()

        title = metadata.title
        if title:
            self._writeln(f'#let title = "{self.escape_string(title)}"')
            self._writeln()
            self._writeln(
                f'#align({cfg.TITLE_ALIGN}, text(size: {cfg.TITLE_SIZE}, '
                f'weight: "{cfg.TITLE_WEIGHT}")[{title}])'
            )
            self._writeln(f'#v({cfg.TITLE_SPACING})')
            self._writeln()

    # --- Body ---

    def render_body(self, root):
        """Walk the document tree and write Typst for each supported node."""
        for node, entering in walk(root):
            self._render_node(node, entering)

    def _render_node(self, node, entering):
        kind = node.kind

        if kind == nodes.HEADING:
            if entering:
                self._write(f'#heading(level: {node.level})[')
            else:
                self._writeln(']')
                self._writeln()

        elif kind == nodes.PARAGRAPH:
            if not entering:
                self._writeln()
                self._writeln()

        elif kind == nodes.TEXT:
            if entering:
                self._write(node.content)
                if node.soft_break:
                    self._writeln()

        elif kind == nodes.LIST:
            if not entering:
                self._writeln()

        elif kind == nodes.LIST_ITEM:
            if entering:
                self._write(self.config.LIST_BULLET)
            else:
                self._writeln()

        elif kind == nodes.EMPHASIS:
            if entering:
                self._write('#strong[' if node.strong else '#emph[')
            else:
                self._write(']')

        elif kind == nodes.THEMATIC_BREAK:
            if entering:
                self._writeln(f'#line(length: {self.config.THEMATIC_BREAK_LENGTH})')
                self._writeln()

        elif kind == nodes.CODE_SPAN:
            if entering:
                self._write(f'#raw("{self.escape_string(node.content)}")')

        elif kind == nodes.FENCED_CODE_BLOCK:
            if entering:
                content = ''.join(node.lines).rstrip('\n')
                self._write(f'```\n{content}\n```\n\n')

        else:
            # Document, tight-list text blocks, links, images, quotes, indented
            # code and raw HTML have no markup of their own. Their children
            # are still visited.
            return
