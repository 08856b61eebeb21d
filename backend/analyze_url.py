"""
Command-line word frequency analysis for WordMeter.

Runs the same fetch/extract/rank pipeline as the API for a single URL and
prints the result as a table, or writes it as CSV.

Usage:
    python analyze_url.py https://example.com [--top 10] [--csv word_frequencies.csv] [--timeout 10]

Exit status:
    0   Success
    1   Page could not be fetched or processed
    2   Invalid URL or topN
"""
import argparse
import asyncio
import logging
import sys
from pathlib import Path

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent))

from config import DEFAULT_TOP_N, FETCH_TIMEOUT_SECONDS
from models.word_count import AnalysisResult
from services.csv_export import to_csv
from services.errors import AnalysisError, InvalidInputError
from services.page_fetcher import PageFetcher
from services.word_analyzer import WordAnalyzer

logger = logging.getLogger(__name__)


def format_table(result: AnalysisResult) -> str:
    """Render ranked words as a fixed-width text table."""
    width = max([len("Word")] + [len(entry.word) for entry in result.words])
    lines = [f"{'Word':<{width}}  Count", f"{'-' * width}  -----"]
    lines.extend(f"{entry.word:<{width}}  {entry.count}" for entry in result.words)
    lines.append("")
    lines.append(
        f"{len(result.words)} of {result.distinct_words} distinct words "
        f"({result.total_words} total) from {result.url}"
    )
    return "\n".join(lines)


def main(argv=None) -> int:
    """Main entry point for the command-line analyzer."""
    parser = argparse.ArgumentParser(
        description="Report the most frequent words on a web page"
    )
    parser.add_argument("url", help="Fully-qualified URL to analyze")
    parser.add_argument(
        "--top", "-t",
        type=int,
        default=DEFAULT_TOP_N,
        help=f"Number of words to report (default: {DEFAULT_TOP_N})"
    )
    parser.add_argument(
        "--csv",
        default=None,
        help="Write results to this CSV file instead of printing a table"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=FETCH_TIMEOUT_SECONDS,
        help=f"Fetch timeout in seconds (default: {FETCH_TIMEOUT_SECONDS:g})"
    )

    args = parser.parse_args(argv)

    analyzer = WordAnalyzer(fetcher=PageFetcher(timeout=args.timeout))

    try:
        result = asyncio.run(analyzer.analyze(args.url, args.top))
    except InvalidInputError as e:
        logger.debug(f"Rejected input: code={e.error.code}, details={e.error.details}")
        print(f"Error: {e.error.message}", file=sys.stderr)
        return 2
    except AnalysisError as e:
        logger.debug(f"Analysis failed: code={e.error.code}, details={e.error.details}")
        print(f"Error: {e.error.message}", file=sys.stderr)
        return 1

    if args.csv:
        with open(args.csv, "w", encoding="utf-8", newline="") as f:
            f.write(to_csv(result.words))
        print(f"Wrote {len(result.words)} rows to {args.csv}")
    else:
        print(format_table(result))

    return 0


if __name__ == "__main__":
    sys.exit(main())
