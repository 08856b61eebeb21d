"""CSV export of ranked word counts."""
from typing import Iterable

from models.word_count import WordCount

CSV_HEADER = "Word,Count"
CSV_FILENAME = "word_frequencies.csv"
CSV_MEDIA_TYPE = "text/csv; charset=utf-8"


def to_csv(words: Iterable[WordCount]) -> str:
    """
    Serialize word counts as CSV text with a Word,Count header.

    Values are joined with commas as-is. Tokens only contain word characters,
    so no quoting is applied.
    """
    lines = [CSV_HEADER]
    lines.extend(f"{entry.word},{entry.count}" for entry in words)
    return "\n".join(lines)
