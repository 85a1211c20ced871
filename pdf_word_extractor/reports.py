from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import List

from pdf_word_extractor.frequency import rank_frequencies
from pdf_word_extractor.types import ExtractionResult, WordReport

LOGGER = logging.getLogger(__name__)

REPORT_TITLE = "PDF Word Extraction Results"
SOURCE_EXTENSION = ".pdf"
OUTPUT_ENCODING = "UTF-8"


def text_report_path(output_dir: Path, source_name: str) -> Path:
    return output_dir / f"{source_name}_words.txt"


def json_report_path(output_dir: Path, source_name: str) -> Path:
    return output_dir / f"{source_name}_words.json"


def csv_report_path(output_dir: Path, source_name: str) -> Path:
    return output_dir / f"{source_name}_frequency.csv"


def _heading(title: str, underline: str) -> List[str]:
    return [title, underline * len(title)]


def render_text_report(result: ExtractionResult) -> str:
    """Render the human-readable report for one document."""

    statistics = result.statistics
    lines = _heading(REPORT_TITLE, "=")
    lines.extend(
        [
            f"Total words: {statistics.total_word_count}",
            f"Unique words: {statistics.unique_word_count}",
            f"Generated on: {result.generated_on}",
            "",
        ]
    )

    lines.extend(_heading("All Words (in order of appearance):", "-"))
    lines.extend(f"{index}. {token}" for index, token in enumerate(result.tokens, start=1))

    lines.append("")
    lines.extend(_heading("Word Frequency (sorted by frequency):", "-"))
    lines.extend(f"{token}: {count}" for token, count in rank_frequencies(statistics))
    return "\n".join(lines) + "\n"


def build_json_report(result: ExtractionResult) -> WordReport:
    statistics = result.statistics
    return {
        "metadata": {
            "totalWords": statistics.total_word_count,
            "uniqueWords": statistics.unique_word_count,
            "generatedOn": result.generated_on,
            "sourceFile": f"{result.source_name}{SOURCE_EXTENSION}",
            "encoding": OUTPUT_ENCODING,
        },
        "words": list(result.tokens),
        "wordFrequency": dict(rank_frequencies(statistics)),
    }


def write_text_report(result: ExtractionResult, output_dir: Path) -> Path:
    path = text_report_path(output_dir, result.source_name)
    content = render_text_report(result)
    LOGGER.info("Writing text report to %s", path)
    with path.open("w", encoding="utf-8") as outfile:
        outfile.write(content)
    return path


def write_json_report(result: ExtractionResult, output_dir: Path) -> Path:
    path = json_report_path(output_dir, result.source_name)
    report = build_json_report(result)
    LOGGER.info("Writing JSON report to %s", path)
    with path.open("w", encoding="utf-8") as outfile:
        json.dump(report, outfile, ensure_ascii=False, indent=2)
    return path


def write_frequency_csv(result: ExtractionResult, output_dir: Path) -> Path:
    """Write the frequency ranking as ``rank,word,count`` rows."""

    path = csv_report_path(output_dir, result.source_name)
    LOGGER.info("Writing frequency CSV to %s", path)
    with path.open("w", encoding="utf-8", newline="") as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=["rank", "word", "count"])
        writer.writeheader()
        writer.writerows(
            {"rank": rank, "word": token, "count": count}
            for rank, (token, count) in enumerate(rank_frequencies(result.statistics), start=1)
        )
    return path
