"""Word frequency counting and top-N ranking."""
import re
from collections import Counter
from typing import List

from models.word_count import WordCount


class WordRanker:
    """Counts word occurrences in text and returns the most frequent ones."""

    # Anything that is neither a word character nor whitespace is punctuation
    PUNCTUATION_PATTERN = re.compile(r"[^\w\s]")
    WHITESPACE_PATTERN = re.compile(r"\s+")

    def tokenize(self, text: str) -> List[str]:
        """
        Split text into lowercase tokens with punctuation removed.

        Args:
            text: Plain text

        Returns:
            Tokens in input order, empty tokens discarded
        """
        if not text:
            return []

        stripped = self.PUNCTUATION_PATTERN.sub("", text).lower()
        return [token for token in self.WHITESPACE_PATTERN.split(stripped) if token]

    def count(self, tokens: List[str]) -> Counter:
        """Count tokens; the Counter keeps first-appearance order of keys."""
        return Counter(tokens)

    def rank(self, text: str, top_n: int) -> List[WordCount]:
        """
        Rank the words in text by frequency.

        Ties keep the order in which the words first appeared in the text.

        Args:
            text: Plain text to analyze
            top_n: Maximum number of entries to return

        Returns:
            Up to top_n WordCount entries sorted by count descending
        """
        if top_n <= 0:
            return []

        counts = self.count(self.tokenize(text))

        # sorted() is stable, so equal counts stay in insertion order
        ordered = sorted(counts.items(), key=lambda item: -item[1])

        return [WordCount(word=word, count=count) for word, count in ordered[:top_n]]
