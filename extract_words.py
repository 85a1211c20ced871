"""Compatibility wrapper for extracting words from the PDFs in a directory.

Use the packaged CLI instead:
    python -m pdf_word_extractor.cli extract
or install the package and run `pdf-word-extractor extract`.
"""

from pdf_word_extractor.cli import extract_cli


if __name__ == "__main__":
    extract_cli()
