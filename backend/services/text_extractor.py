"""Visible text extraction from raw HTML."""
import html
import logging
import re
from typing import Optional

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)


class TextExtractor:
    """Strips markup from an HTML document and returns its visible body text."""

    # Elements whose contents are never visible text
    REMOVED_TAGS = ["script", "style"]

    # Elements dropped when the document has no <body>
    HEAD_TAGS = ["head", "title"]

    WHITESPACE_PATTERN = re.compile(r"\s+")

    def __init__(self, parser: str = "html.parser"):
        """
        Initialize TextExtractor.

        Args:
            parser: BeautifulSoup tree builder to use
        """
        self.parser = parser

    def extract(self, raw_html: Optional[str]) -> str:
        """
        Extract plain text from the body of an HTML document.

        Script and style elements are removed with their contents, entities are
        decoded and whitespace is collapsed to single spaces.

        Args:
            raw_html: HTML document or fragment

        Returns:
            Normalized body text, or an empty string if nothing is recoverable
        """
        if not raw_html:
            return ""

        try:
            soup = BeautifulSoup(raw_html, self.parser)

            for element in soup(self.REMOVED_TAGS):
                element.decompose()

            body = soup.body
            if body is None:
                # Fragment without <body>: everything outside <head> is body text
                for element in soup(self.HEAD_TAGS):
                    element.decompose()
                body = soup

            text = body.get_text()
        except Exception as e:
            logger.warning(f"Failed to parse HTML ({len(raw_html)} chars): {e}")
            return ""

        # The parser decodes entities once; double-encoded ones like &amp;amp; survive
        text = html.unescape(text)

        return self.normalize_whitespace(text)

    @classmethod
    def normalize_whitespace(cls, text: str) -> str:
        """Collapse whitespace runs into single spaces and trim the ends."""
        return cls.WHITESPACE_PATTERN.sub(" ", text).strip()
