import re
import md2typst
from md2typst.resources import EXAMPLE

HTML_TAG_RE = re.compile(rb'<html|<script|<iframe|<img|<link|<!DOCTYPE|<div|<span', re.IGNORECASE)

def verify():
    print("Converting bundled example...")
    output = md2typst.convert_bytes(EXAMPLE)

    print("\n--- Verifying output format ---")
    if HTML_TAG_RE.search(output):
        print("FAILURE: Output contains HTML")
    else:
        print("SUCCESS: No HTML in output")

    first_line = output.split(b'\n', 1)[0]
    if first_line.startswith(b'#'):
        print("SUCCESS: First line is a Typst directive")
    else:
        print(f"FAILURE: First line is not a Typst directive: {first_line!r}")

    print("\n--- Verifying determinism ---")
    if md2typst.convert_bytes(EXAMPLE) == output:
        print("SUCCESS: Repeated conversion is identical")
    else:
        print("FAILURE: Repeated conversion differs")

if __name__ == "__main__":
    verify()
