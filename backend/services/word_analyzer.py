"""Fetch-extract-rank orchestration for a single URL."""
import logging
import time
from typing import Optional
from urllib.parse import urlparse

from models.word_count import AnalysisResult
from services.errors import AnalysisError, ErrorInfo, InvalidInputError
from services.page_fetcher import PageFetcher
from services.text_extractor import TextExtractor
from services.word_ranker import WordRanker

logger = logging.getLogger(__name__)


class WordAnalyzer:
    """Runs the word frequency pipeline: fetch the page, extract its text, rank the words."""

    ALLOWED_SCHEMES = ("http", "https")

    def __init__(
        self,
        fetcher: Optional[PageFetcher] = None,
        extractor: Optional[TextExtractor] = None,
        ranker: Optional[WordRanker] = None
    ):
        self.fetcher = fetcher or PageFetcher()
        self.extractor = extractor or TextExtractor()
        self.ranker = ranker or WordRanker()

    async def analyze(self, url: str, top_n: int) -> AnalysisResult:
        """
        Analyze a web page and return its most frequent words.

        Args:
            url: Absolute http(s) URL of the page
            top_n: Number of words to return, must be positive

        Returns:
            AnalysisResult with up to top_n ranked words

        Raises:
            InvalidInputError: If url or top_n is invalid (no request is made)
            FetchError: If the page cannot be retrieved
            AnalysisError: If the retrieved page cannot be processed
        """
        self.validate(url, top_n)
        url = url.strip()

        start_time = time.time()
        raw_html = await self.fetcher.fetch(url)

        try:
            text = self.extractor.extract(raw_html)
            tokens = self.ranker.tokenize(text)
            words = self.ranker.rank(text, top_n)
        except Exception as e:
            error = ErrorInfo(
                code="PROCESSING_ERROR",
                message=f"Failed to process content from {url}",
                details={"url": url, "original_error": str(e), "error_type": type(e).__name__}
            )
            logger.error(
                f"Processing error for {url}: {e}",
                exc_info=True,
                extra={"error_code": error.code, "error_details": error.details}
            )
            raise AnalysisError(error)

        latency_ms = int((time.time() - start_time) * 1000)
        result = AnalysisResult(
            url=url,
            words=words,
            total_words=len(tokens),
            distinct_words=len(set(tokens)),
            latency_ms=latency_ms
        )

        logger.info(
            f"Analyzed {url}: top_n={top_n}, total_words={result.total_words}, "
            f"distinct_words={result.distinct_words}, returned={len(words)}, "
            f"latency={latency_ms}ms"
        )
        return result

    def validate(self, url: str, top_n: int) -> None:
        """
        Reject a request before it reaches the network.

        Raises:
            InvalidInputError: With code INVALID_URL or INVALID_TOP_N
        """
        if not isinstance(url, str) or not url.strip():
            raise self._invalid("INVALID_URL", "URL is required", url=url)

        try:
            parsed = urlparse(url.strip())
            # Accessing port validates its range
            parsed.port
        except ValueError as e:
            raise self._invalid("INVALID_URL", f"URL is malformed: {e}", url=url)

        if parsed.scheme.lower() not in self.ALLOWED_SCHEMES or not parsed.netloc:
            raise self._invalid(
                "INVALID_URL",
                "URL must be an absolute http or https address",
                url=url
            )

        # bool is an int subclass; True is not a word count
        if isinstance(top_n, bool) or not isinstance(top_n, int) or top_n <= 0:
            raise self._invalid("INVALID_TOP_N", "topN must be a positive integer", top_n=top_n)

    @staticmethod
    def _invalid(code: str, message: str, **details) -> InvalidInputError:
        logger.warning(f"Rejected analysis request: {message} ({details})")
        return InvalidInputError(ErrorInfo(code=code, message=message, details=details))
