import sys
import os
import md2typst

def convert_md_to_typst(input_file, output_file):
    """
    Converts a Markdown file to a Typst source file.
    """
    if not os.path.exists(input_file):
        print(f"Error: Input file '{input_file}' not found.")
        return

    with open(input_file, 'rb') as f:
        markdown_bytes = f.read()

    try:
        typst_bytes = md2typst.convert_bytes(markdown_bytes)
    except md2typst.Md2TypstError as e:
        print(f"An error occurred during conversion: {e}")
        return

    with open(output_file, 'wb') as f:
        f.write(typst_bytes)
    print(f"Successfully converted '{input_file}' to '{output_file}'.")

if __name__ == "__main__":
    if len(sys.argv) < 3:
        print("Usage: python3 converter.py <input.md> <output.typ>")
    else:
        convert_md_to_typst(sys.argv[1], sys.argv[2])
