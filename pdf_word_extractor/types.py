from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple, TypedDict

from nltk import FreqDist


@dataclass(frozen=True)
class DocumentStatistics:
    """Word counts derived from a single document's token sequence.

    Frozen only at the attribute level: ``frequency_table`` is a mutable
    ``FreqDist`` and callers must not update it after construction.
    """

    total_word_count: int
    unique_word_count: int
    frequency_table: FreqDist


@dataclass(frozen=True)
class ExtractionResult:
    """Everything the report formatters need for one document."""

    source_name: str
    tokens: Tuple[str, ...]
    statistics: DocumentStatistics
    generated_on: str


class ReportMetadata(TypedDict):
    totalWords: int
    uniqueWords: int
    generatedOn: str
    sourceFile: str
    encoding: str


class WordReport(TypedDict):
    """Structured report written as ``{base}_words.json``."""

    metadata: ReportMetadata
    words: List[str]
    wordFrequency: Dict[str, int]
