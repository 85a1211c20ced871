from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from pdfminer.high_level import extract_text
from pdfminer.psparser import PSException

LOGGER = logging.getLogger(__name__)

TextExtractor = Callable[[Path], str]


class PdfParseError(RuntimeError):
    """Raised when a PDF cannot be read or parsed into text."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Could not extract text from {path.name}: {reason}")
        self.path = path
        self.reason = reason


def extract_raw_text(path: Path) -> str:
    """Return the full text of the PDF at ``path``.

    pdfminer syntax, encryption and stream errors are re-raised as
    :class:`PdfParseError` with the original exception chained.
    """

    LOGGER.debug("Extracting text from %s", path)
    try:
        text = extract_text(str(path))
    except PSException as exc:
        raise PdfParseError(path, str(exc) or type(exc).__name__) from exc
    except OSError as exc:
        raise PdfParseError(path, exc.strerror or str(exc)) from exc
    return text or ""
