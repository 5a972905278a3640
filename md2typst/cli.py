"""
md2typst - Markdown to Typst Converter

Reads Markdown (with optional YAML front matter) from stdin and writes Typst
markup to stdout.
"""

import argparse
import sys
import logging

from .converter_api import convert_stream
from .exceptions import Md2TypstError
from .resources import MANIFEST, EXAMPLE, manifest_version

logger = logging.getLogger('md2typst')


def setup_logging(verbose=False, quiet=False):
    """Configure logging based on CLI flags.

    Args:
        verbose: If True, show DEBUG level messages
        quiet: If True, suppress all non-error output
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    root_logger = logging.getLogger('md2typst')
    root_logger.setLevel(level)
    if not root_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        root_logger.addHandler(handler)


def _write_stdout(data):
    sys.stdout.buffer.write(data)
    sys.stdout.buffer.flush()


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="md2typst",
        description="Convert Markdown on stdin to Typst on stdout.",
        epilog="Examples:\n"
               "  md2typst < input.md > output.typ\n"
               "  md2typst --example | md2typst\n"
               "  md2typst --manifest",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument("--manifest", action="store_true", default=False,
                        help="Output the bundled manifest.json")
    parser.add_argument("--example", action="store_true", default=False,
                        help="Output the bundled example.md")
    parser.add_argument("--version", action="store_true", default=False,
                        help="Output the version from the manifest")
    parser.add_argument("--verbose", action="store_true", default=False,
                        help="Show detailed debug output")
    parser.add_argument("-q", "--quiet", action="store_true", default=False,
                        help="Suppress all non-error output")

    args = parser.parse_args(argv)

    # Set up logging
    setup_logging(verbose=args.verbose, quiet=args.quiet)

    if args.version:
        version = manifest_version()
        if version is not None:
            print(version)
        return

    if args.manifest:
        _write_stdout(MANIFEST)
        return

    if args.example:
        _write_stdout(EXAMPLE)
        return

    try:
        convert_stream(sys.stdin.buffer, sys.stdout.buffer)
    except Md2TypstError as e:
        logger.error("%s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
