"""Extract words and word frequencies from PDF documents."""

from .extraction import PdfParseError, extract_raw_text
from .frequency import build_frequency_table, compute_statistics, rank_frequencies
from .pipeline import PipelineConfig, process_document, run_batch, run_directory
from .tokenizer import TokenizerOptions, tokenize
from .types import DocumentStatistics, ExtractionResult

__all__ = [
    "tokenize",
    "TokenizerOptions",
    "build_frequency_table",
    "compute_statistics",
    "rank_frequencies",
    "extract_raw_text",
    "PdfParseError",
    "PipelineConfig",
    "process_document",
    "run_batch",
    "run_directory",
    "DocumentStatistics",
    "ExtractionResult",
]
