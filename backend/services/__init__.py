"""Services for WordMeter."""
from .errors import ErrorInfo, AnalysisError, InvalidInputError, FetchError
from .text_extractor import TextExtractor
from .word_ranker import WordRanker
from .page_fetcher import PageFetcher
from .word_analyzer import WordAnalyzer
from .csv_export import to_csv, CSV_FILENAME

__all__ = ['ErrorInfo', 'AnalysisError', 'InvalidInputError', 'FetchError', 'TextExtractor', 'WordRanker', 'PageFetcher', 'WordAnalyzer', 'to_csv', 'CSV_FILENAME']
