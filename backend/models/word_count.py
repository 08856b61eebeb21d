"""Word frequency data models."""
from dataclasses import dataclass, field
from typing import List, Dict, Any


@dataclass
class WordCount:
    """A single token and the number of times it occurs in the page text."""
    word: str  # lowercase, punctuation stripped
    count: int  # always >= 1

    def to_dict(self) -> Dict[str, Any]:
        return {"word": self.word, "count": self.count}


@dataclass
class AnalysisResult:
    """Ranked words for one analyzed URL."""
    url: str
    words: List[WordCount] = field(default_factory=list)
    total_words: int = 0
    distinct_words: int = 0
    latency_ms: int = 0
