"""
Configuration constants for md2typst converter.

This module centralizes the Typst page setup and title styling written at the
top of every document. Values can be overridden by passing a subclass of
TypstConfig (or an instance with modified attributes) to the converter API.
"""


class TypstConfig:
    """Default configuration values for Typst output."""

    # === Page Setup ===
    PAPER = 'a4'

    # === Body Text ===
    FONT = 'SimSun'
    FONT_SIZE = '12pt'
    LANG = 'zh'

    # === Paragraphs ===
    PAR_LEADING = '1.5em'
    PAR_FIRST_LINE_INDENT = '2em'

    # === Title Block ===
    TITLE_SIZE = '22pt'
    TITLE_WEIGHT = 'bold'
    TITLE_ALIGN = 'center'
    TITLE_SPACING = '1em'  # Vertical space below the title

    # === Lists ===
    # Ordered and bullet lists share one marker; numbering is not tracked
    LIST_BULLET = '- '

    # === Rules ===
    THEMATIC_BREAK_LENGTH = '100%'


# Global default config instance
DEFAULT_CONFIG = TypstConfig()
