"""
Static files bundled with the package.

Both files are read once at import time and exposed as immutable bytes.
"""

import json
import os

PKG_DIR = os.path.dirname(os.path.abspath(__file__))


def _read_resource(name):
    with open(os.path.join(PKG_DIR, name), 'rb') as f:
        return f.read()


MANIFEST = _read_resource('manifest.json')
EXAMPLE = _read_resource('example.md')


def manifest_version():
    """Return the ``version`` field of the bundled manifest, or None."""
    return json.loads(MANIFEST).get('version')
