from __future__ import annotations

from typing import Iterable, List, Sequence

from nltk import FreqDist

from pdf_word_extractor.types import DocumentStatistics


def build_frequency_table(tokens: Iterable[str]) -> FreqDist:
    """Count token occurrences.

    Keys are inserted in first-occurrence order, which :func:`rank_frequencies`
    relies on for its tiebreak.
    """

    return FreqDist(tokens)


def compute_statistics(tokens: Sequence[str]) -> DocumentStatistics:
    table = build_frequency_table(tokens)
    return DocumentStatistics(
        total_word_count=len(tokens),
        unique_word_count=len(table),
        frequency_table=table,
    )


def rank_frequencies(statistics: DocumentStatistics, top_n: int | None = None) -> List[tuple[str, int]]:
    """Return ``(token, count)`` pairs by descending count.

    Equal counts keep first-occurrence order (``sorted`` is stable over the
    table's insertion order).
    """

    if top_n is not None and top_n < 0:
        raise ValueError(f"top_n must not be negative, got {top_n}.")

    ranked = sorted(statistics.frequency_table.items(), key=lambda item: item[1], reverse=True)
    return ranked if top_n is None else ranked[:top_n]
