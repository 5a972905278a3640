"""
Unit tests for the Typst writer (preamble and body rendering).
"""

import io

import pytest

from md2typst.MarkdownToTypst import MarkdownToTypst
from md2typst.config import TypstConfig
from md2typst.frontmatter_parser import Metadata
from md2typst.nodes import Node

from .conftest import PREAMBLE


def _text(content, soft_break=False):
    return Node('Text', content=content, soft_break=soft_break)


def _preamble(metadata, config=None):
    buf = io.StringIO()
    MarkdownToTypst(buf, config=config).write_preamble(metadata)
    return buf.getvalue()


class TestPreamble:
    """Tests for write_preamble."""

    def test_without_title(self):
        assert _preamble(Metadata()) == PREAMBLE

    def test_with_title(self):
        assert _preamble(Metadata(title="Hello")) == PREAMBLE + (
            '#let title = "Hello"\n'
            '\n'
            '#align(center, text(size: 22pt, weight: "bold")[Hello])\n'
            '#v(1em)\n'
            '\n'
        )

    def test_title_binding_is_escaped(self):
        output = _preamble(Metadata(title='Say "hi" \\ bye'))
        assert '#let title = "Say \\"hi\\" \\\\ bye"\n' in output
        # The content block keeps the literal title
        assert '[Say "hi" \\ bye])' in output

    def test_config_override(self):
        class LetterConfig(TypstConfig):
            PAPER = 'us-letter'
            LANG = 'en'

        output = _preamble(Metadata(), config=LetterConfig())
        assert output.startswith('#set page(paper: "us-letter")\n')
        assert 'lang: "en"' in output


class TestEscapeString:
    """Tests for escape_string."""

    @pytest.mark.parametrize("raw, escaped", [
        ('plain', 'plain'),
        ('a"b', 'a\\"b'),
        ('a\\b', 'a\\\\b'),
        ('a\nb\tc\rd', 'a\\nb\\tc\\rd'),
        ('bell\x07', 'bell\\u{7}'),
        ('中文', '中文'),
    ])
    def test_escape(self, raw, escaped):
        assert MarkdownToTypst.escape_string(raw) == escaped


class TestRenderBody:
    """Tests for render_body node mapping."""

    def test_heading(self, render, document):
        root = document(Node('Heading', level=2, children=[_text('Hi')]))
        assert render(root) == '#heading(level: 2)[Hi]\n\n'

    def test_paragraph(self, render, document):
        root = document(Node('Paragraph', children=[_text('World')]))
        assert render(root) == 'World\n\n'

    def test_soft_break(self, render, document):
        root = document(Node('Paragraph', children=[_text('one', soft_break=True), _text('two')]))
        assert render(root) == 'one\ntwo\n\n'

    def test_text_is_not_escaped(self, render, document):
        root = document(Node('Paragraph', children=[_text('#set [x] $y$ "z"')]))
        assert render(root) == '#set [x] $y$ "z"\n\n'

    def test_strong_and_emph(self, render, document):
        root = document(Node('Paragraph', children=[
            Node('Emphasis', strong=True, children=[_text('bold')]),
            _text(' '),
            Node('Emphasis', strong=False, children=[_text('it')]),
        ]))
        assert render(root) == '#strong[bold] #emph[it]\n\n'

    def test_nested_emphasis(self, render, document):
        root = document(Node('Paragraph', children=[
            Node('Emphasis', children=[Node('Emphasis', strong=True, children=[_text('x')])]),
        ]))
        assert render(root) == '#emph[#strong[x]]\n\n'

    def test_list(self, render, document):
        root = document(Node('List', children=[
            Node('ListItem', children=[Node('TextBlock', children=[_text('a')])]),
            Node('ListItem', children=[Node('TextBlock', children=[_text('b')])]),
        ]))
        assert render(root) == '- a\n- b\n\n'

    def test_thematic_break(self, render, document):
        assert render(document(Node('ThematicBreak'))) == '#line(length: 100%)\n\n'

    def test_code_span_is_escaped(self, render, document):
        root = document(Node('Paragraph', children=[Node('CodeSpan', content='say "hi"\\n')]))
        assert render(root) == '#raw("say \\"hi\\"\\\\n")\n\n'

    def test_fenced_code_block_trims_trailing_newlines(self, render, document):
        root = document(Node('FencedCodeBlock', lines=['a\n', 'b\n']))
        assert render(root) == '```\na\nb\n```\n\n'

    def test_fenced_code_block_keeps_inner_blank_lines(self, render, document):
        root = document(Node('FencedCodeBlock', lines=['a\n', '\n', 'b\n', '\n', '\n']))
        assert render(root) == '```\na\n\nb\n```\n\n'

    def test_empty_fenced_code_block(self, render, document):
        assert render(document(Node('FencedCodeBlock'))) == '```\n\n```\n\n'


class TestUnsupportedNodes:
    """Node kinds without a Typst mapping write nothing of their own."""

    @pytest.mark.parametrize("kind", ['HTMLBlock', 'RawHTML', 'AutoLink', 'CodeBlock', 'Table', 'Footnote'])
    def test_leaf_kinds_write_nothing(self, render, document, kind):
        root = document(Node(kind, content='<div>http://example.com</div>', lines=['x = 1\n']))
        assert render(root) == ''

    def test_link_children_still_rendered(self, render, document):
        root = document(Node('Paragraph', children=[
            _text('see '),
            Node('Link', content='http://example.com', children=[_text('docs')]),
        ]))
        assert render(root) == 'see docs\n\n'

    def test_block_quote_children_still_rendered(self, render, document):
        root = document(Node('BlockQuote', children=[Node('Paragraph', children=[_text('q')])]))
        assert render(root) == 'q\n\n'

    def test_image_writes_alt_text_only(self, render, document):
        root = document(Node('Paragraph', children=[
            Node('Image', content='pic.png', children=[_text('alt')]),
        ]))
        output = render(root)
        assert output == 'alt\n\n'
        assert 'pic.png' not in output
