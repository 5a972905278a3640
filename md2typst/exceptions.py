"""
Custom exception classes for md2typst converter.
"""


class Md2TypstError(Exception):
    """Base exception for all md2typst errors."""
    pass


class InputError(Md2TypstError):
    """Error reading the input document."""
    pass


class FrontmatterError(Md2TypstError):
    """Front matter block is present but is not valid YAML metadata."""
    pass
