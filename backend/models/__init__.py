"""Data models for WordMeter."""
from .word_count import WordCount, AnalysisResult
from .api import AnalysisRequest, WordCountItem, WordsResponse, ErrorResponse

__all__ = [
    "WordCount",
    "AnalysisResult",
    "AnalysisRequest",
    "WordCountItem",
    "WordsResponse",
    "ErrorResponse",
]
