"""Main entry point for WordMeter API."""
import logging
from pathlib import Path
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse, Response

from config import CORS_ORIGINS, HOST, LOG_FORMAT, LOG_LEVEL, PORT
from logger import setup_logging
from models.api import AnalysisRequest, ErrorResponse, WordCountItem, WordsResponse
from models.word_count import AnalysisResult
from services.csv_export import CSV_FILENAME, CSV_MEDIA_TYPE, to_csv
from services.errors import AnalysisError, ErrorInfo, FetchError, InvalidInputError
from services.word_analyzer import WordAnalyzer

if LOG_FORMAT == "json":
    setup_logging(LOG_LEVEL)

# Initialize logging
logger = logging.getLogger(__name__)

VERSION = "1.0.0"
STATIC_DIR = Path(__file__).parent / "static"

# Initialize FastAPI app
app = FastAPI(
    title="WordMeter",
    description="Top-N word frequency analysis for web pages",
    version=VERSION
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Initialized on startup
word_analyzer: WordAnalyzer = None


@app.on_event("startup")
async def startup_event():
    """Initialize services on startup."""
    global word_analyzer

    logger.info("Initializing WordMeter services...")
    word_analyzer = WordAnalyzer()
    logger.info("All services initialized successfully")


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump()
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed payloads never reach the pipeline; answer with the error shape."""
    problems = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'] if part != 'body')}: {err['msg']}"
        for err in exc.errors()
    )
    logger.warning(f"Rejected malformed request to {request.url.path}: {problems}")
    return _error_response(400, f"Invalid request: {problems}")


@app.exception_handler(InvalidInputError)
async def invalid_input_handler(request: Request, exc: InvalidInputError):
    return _error_response(400, exc.error.message)


@app.exception_handler(FetchError)
async def fetch_error_handler(request: Request, exc: FetchError):
    return _error_response(502, f"Failed to fetch data. Please check the URL. ({exc.error.message})")


@app.exception_handler(AnalysisError)
async def analysis_error_handler(request: Request, exc: AnalysisError):
    return _error_response(500, exc.error.message)


@app.get("/", include_in_schema=False)
async def index():
    """Serve the browser UI."""
    return FileResponse(STATIC_DIR / "index.html")


@app.get("/health")
async def health():
    """Detailed health check."""
    return {
        "status": "healthy",
        "service": "wordmeter",
        "version": VERSION
    }


@app.post(
    "/api/words",
    response_model=WordsResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}, 502: {"model": ErrorResponse}}
)
async def words_endpoint(request: AnalysisRequest) -> WordsResponse:
    """
    Word frequency endpoint.

    Fetches the page at request.url, extracts its visible text and returns the
    request.top_n most frequent words.

    Args:
        request: AnalysisRequest with url and topN

    Returns:
        WordsResponse with words ordered by count descending
    """
    result = await _run_analysis(request)
    return WordsResponse(
        words=[WordCountItem(word=entry.word, count=entry.count) for entry in result.words]
    )


@app.post(
    "/api/words/csv",
    response_class=Response,
    responses={200: {"content": {"text/csv": {}}}, 400: {"model": ErrorResponse}, 502: {"model": ErrorResponse}}
)
async def words_csv_endpoint(request: AnalysisRequest) -> Response:
    """Same analysis as /api/words, returned as a CSV download."""
    result = await _run_analysis(request)
    return Response(
        content=to_csv(result.words),
        media_type=CSV_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{CSV_FILENAME}"'}
    )


async def _run_analysis(request: AnalysisRequest) -> AnalysisResult:
    """
    Run the pipeline for a validated request.

    AnalysisError subclasses propagate to the exception handlers above; anything
    else is logged and wrapped so clients always receive the error shape.
    """
    logger.info(f"Processing analysis: url={request.url[:200]}, top_n={request.top_n}")

    try:
        return await word_analyzer.analyze(request.url, request.top_n)
    except AnalysisError:
        raise
    except Exception as e:
        logger.error(f"Unexpected error analyzing {request.url}: {e}", exc_info=True)
        raise AnalysisError(ErrorInfo(
            code="UNKNOWN_ERROR",
            message=f"Internal server error: {str(e)}",
            details={"error_type": type(e).__name__}
        ))


if __name__ == "__main__":
    import uvicorn
    logger.info(f"Starting WordMeter API on port {PORT}")
    uvicorn.run(app, host=HOST, port=PORT)
