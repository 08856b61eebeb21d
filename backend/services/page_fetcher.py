"""HTTP retrieval of the page to analyze."""
import logging
import time
from typing import Optional

import httpx

from config import FETCH_TIMEOUT_SECONDS, USER_AGENT
from services.errors import ErrorInfo, FetchError

logger = logging.getLogger(__name__)


class PageFetcher:
    """Retrieves a document with a single GET request. No retries."""

    def __init__(
        self,
        timeout: float = FETCH_TIMEOUT_SECONDS,
        user_agent: str = USER_AGENT,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize PageFetcher.

        Args:
            timeout: Overall request timeout in seconds
            user_agent: User-Agent header sent with the request
            transport: Optional httpx transport (used to stub the network in tests)
        """
        self.timeout = timeout
        self.headers = {
            "User-Agent": user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.5",
        }
        self.transport = transport

    async def fetch(self, url: str) -> str:
        """
        Fetch the body of a URL as text.

        Args:
            url: Absolute http(s) URL

        Returns:
            Decoded response body

        Raises:
            FetchError: On timeout, connection failure, non-2xx status or undecodable body
        """
        start_time = time.time()

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                headers=self.headers,
                transport=self.transport
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
                body = response.text

        except httpx.TimeoutException as e:
            raise self._error(
                "TIMEOUT_ERROR",
                f"Timed out after {self.timeout:g}s fetching {url}",
                url, start_time, e
            )

        except httpx.HTTPStatusError as e:
            raise self._error(
                "HTTP_STATUS_ERROR",
                f"{url} returned HTTP {e.response.status_code}",
                url, start_time, e,
                status_code=e.response.status_code
            )

        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise self._error(
                "CONNECTION_ERROR",
                f"Could not connect to {url}",
                url, start_time, e
            )

        except (UnicodeDecodeError, LookupError) as e:
            raise self._error(
                "DECODE_ERROR",
                f"Response from {url} could not be decoded as text",
                url, start_time, e
            )

        latency_ms = int((time.time() - start_time) * 1000)
        logger.info(
            f"Fetched {url}: status={response.status_code}, "
            f"chars={len(body)}, latency={latency_ms}ms"
        )
        return body

    def _error(
        self,
        code: str,
        message: str,
        url: str,
        start_time: float,
        cause: Exception,
        **details
    ) -> FetchError:
        """Build and log a FetchError for a failed request."""
        latency_ms = int((time.time() - start_time) * 1000)
        error = ErrorInfo(
            code=code,
            message=message,
            details={
                "url": url,
                "latency_ms": latency_ms,
                "original_error": str(cause),
                "error_type": type(cause).__name__,
                **details
            }
        )
        logger.error(
            f"Fetch failed: code={code}, url={url}, latency={latency_ms}ms, error={cause}",
            extra={"error_code": error.code, "error_details": error.details}
        )
        return FetchError(error)
