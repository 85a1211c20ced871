from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Callable, Dict, Iterable, List

from pdf_word_extractor.extraction import PdfParseError, TextExtractor, extract_raw_text
from pdf_word_extractor.frequency import compute_statistics
from pdf_word_extractor.reports import write_frequency_csv, write_json_report, write_text_report
from pdf_word_extractor.tokenizer import TokenizerOptions, tokenize
from pdf_word_extractor.types import ExtractionResult

LOGGER = logging.getLogger(__name__)

PDF_SUFFIX = ".pdf"
TIMESTAMP_FORMAT = "%a %b %d %H:%M:%S %Z %Y"

ReportWriter = Callable[[ExtractionResult, Path], Path]


@dataclass(frozen=True)
class PipelineConfig:
    """Locations and options for an extraction run."""

    input_dir: Path = Path(".")
    output_dir: Path = Path("output")
    tokenizer: TokenizerOptions = field(default_factory=TokenizerOptions)
    recursive: bool = False
    write_csv: bool = False


@dataclass
class DocumentReport:
    """Outcome of processing a single PDF."""

    source: Path
    outputs: Dict[str, Path] = field(default_factory=dict)
    errors: Dict[str, str] = field(default_factory=dict)
    total_words: int | None = None
    unique_words: int | None = None

    @property
    def ok(self) -> bool:
        return not self.errors


@dataclass
class BatchReport:
    documents: List[DocumentReport] = field(default_factory=list)

    @property
    def succeeded(self) -> List[DocumentReport]:
        return [document for document in self.documents if document.ok]

    @property
    def failed(self) -> List[DocumentReport]:
        return [document for document in self.documents if not document.ok]


def env_path(var_name: str, default: str) -> Path:
    return Path(os.getenv(var_name, default))


def env_int(var_name: str, default: int) -> int:
    return int(os.getenv(var_name, str(default)))


def timestamp() -> str:
    return datetime.now().astimezone().strftime(TIMESTAMP_FORMAT)


def find_pdf_files(input_dir: Path, recursive: bool = False) -> List[Path]:
    """Return the PDF files in ``input_dir``, sorted by path."""

    if not input_dir.exists():
        raise FileNotFoundError(f"Input directory does not exist: {input_dir}")
    if not input_dir.is_dir():
        raise NotADirectoryError(f"Input path is not a directory: {input_dir}")

    candidates = input_dir.rglob("*") if recursive else input_dir.iterdir()
    return sorted(path for path in candidates if path.is_file() and path.suffix.lower() == PDF_SUFFIX)


def ensure_output_dir(output_dir: Path) -> Path:
    if not output_dir.is_dir():
        LOGGER.info("Creating output directory %s", output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    return output_dir


def extract_document(
    pdf_path: Path,
    config: PipelineConfig,
    extractor: TextExtractor = extract_raw_text,
) -> ExtractionResult:
    """Run extraction, tokenization and aggregation for one PDF."""

    text = extractor(pdf_path)
    tokens = tuple(tokenize(text, config.tokenizer))
    return ExtractionResult(
        source_name=pdf_path.stem,
        tokens=tokens,
        statistics=compute_statistics(tokens),
        generated_on=timestamp(),
    )


def _report_writers(config: PipelineConfig) -> List[tuple[str, ReportWriter]]:
    writers: List[tuple[str, ReportWriter]] = [
        ("text", write_text_report),
        ("json", write_json_report),
    ]
    if config.write_csv:
        writers.append(("csv", write_frequency_csv))
    return writers


def _record_failure(report: DocumentReport, step: str, exc: BaseException) -> None:
    LOGGER.error("Error processing %s (%s): %s", report.source.name, step, exc)
    report.errors[step] = str(exc)


def process_document(
    pdf_path: Path,
    config: PipelineConfig,
    extractor: TextExtractor | None = None,
) -> DocumentReport:
    """Extract one PDF and write its reports.

    Each report writer is attempted even when another one fails.
    """

    report = DocumentReport(source=pdf_path)
    LOGGER.info("Processing %s", pdf_path.name)

    try:
        ensure_output_dir(config.output_dir)
    except OSError as exc:
        _record_failure(report, "output_dir", exc)
        return report

    try:
        result = extract_document(pdf_path, config, extractor or extract_raw_text)
    except PdfParseError as exc:
        _record_failure(report, "extract", exc)
        return report

    report.total_words = result.statistics.total_word_count
    report.unique_words = result.statistics.unique_word_count
    LOGGER.info(
        "Extracted %d words (%d unique) from %s",
        report.total_words,
        report.unique_words,
        pdf_path.name,
    )

    for step, writer in _report_writers(config):
        try:
            report.outputs[step] = writer(result, config.output_dir)
        except OSError as exc:
            _record_failure(report, step, exc)

    return report


def run_batch(
    pdf_paths: Iterable[Path],
    config: PipelineConfig,
    extractor: TextExtractor | None = None,
) -> BatchReport:
    """Process documents one at a time; a failing document never stops the batch."""

    batch = BatchReport()
    written: Dict[str, Path] = {}
    for pdf_path in pdf_paths:
        # Outputs are keyed by stem, case-insensitively.
        name_key = pdf_path.stem.casefold()
        if name_key in written:
            report = DocumentReport(source=pdf_path)
            _record_failure(
                report,
                "duplicate_name",
                ValueError(f"{pdf_path} has the same base name as {written[name_key]}; skipped to keep its reports"),
            )
            batch.documents.append(report)
            continue

        try:
            report = process_document(pdf_path, config, extractor)
        except Exception as exc:
            LOGGER.exception("Unexpected error processing %s", pdf_path.name)
            report = DocumentReport(source=pdf_path, errors={"unexpected": str(exc) or type(exc).__name__})
        if report.outputs:
            written[name_key] = pdf_path
        batch.documents.append(report)
        if report.ok:
            LOGGER.info("Successfully processed %s", pdf_path.name)

    LOGGER.info(
        "Processed %d documents: %d succeeded, %d failed",
        len(batch.documents),
        len(batch.succeeded),
        len(batch.failed),
    )
    return batch


def run_directory(config: PipelineConfig, extractor: TextExtractor | None = None) -> BatchReport:
    pdf_paths = find_pdf_files(config.input_dir, recursive=config.recursive)
    if not pdf_paths:
        LOGGER.warning("No PDF files found in %s", config.input_dir)
        return BatchReport()
    LOGGER.info("Found %d PDF files in %s", len(pdf_paths), config.input_dir)
    return run_batch(pdf_paths, config, extractor)
