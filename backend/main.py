"""Main entry point for the sentence word counter API."""
import logging
import time
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from config import PORT, CORS_ORIGINS, LOG_LEVEL, LOG_FORMAT
from logger import setup_logging
from models.api import (
    AnalyzeRequest,
    AnalyzeResponse,
    WordCount,
    TokenizeRequest,
    TokenizeResponse,
    SentenceOut,
    TokenOut,
)
from services.tokenizer import TextTokenizer
from services.occurrence_counter import OccurrenceCounter
from services.text_input import InputValidationError, normalize_text, normalize_query_word

# Initialize logging
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Sentence Word Counter",
    description="Counts how many sentences of a text contain each query word",
    version="1.0.0"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Services are stateless, so one instance serves every request
text_tokenizer = TextTokenizer()
occurrence_counter = OccurrenceCounter()


def _validation_error(e: InputValidationError) -> HTTPException:
    logger.warning(f"Rejected input: {e.error.code}")
    return HTTPException(
        status_code=400,
        detail={
            "error": {
                "code": e.error.code,
                "message": e.error.message,
                "details": e.error.details
            }
        }
    )


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "message": "Sentence Word Counter API"}


@app.get("/health")
async def health():
    """Detailed health check."""
    return {
        "status": "healthy",
        "service": "sentence-word-counter",
        "version": "1.0.0"
    }


@app.post("/analyze", response_model=AnalyzeResponse)
async def analyze_endpoint(request: AnalyzeRequest) -> AnalyzeResponse:
    """
    Count how many sentences contain each query word.

    Args:
        request: AnalyzeRequest with the text and at least one word

    Returns:
        AnalyzeResponse with one result per word, in request order

    Raises:
        HTTPException: 400 for blank text or words, 500 for unexpected errors
    """
    start_time = time.time()

    try:
        normalized = normalize_text(request.text)
        words = [normalize_query_word(raw, index=i) for i, raw in enumerate(request.words, start=1)]

        document = text_tokenizer.tokenize(normalized.text)
        occurrences = occurrence_counter.count_occurrences(document, words)

        latency_ms = int((time.time() - start_time) * 1000)
        logger.info(f"Analyzed {len(words)} word(s) across {document.sentence_count} sentence(s) in {latency_ms}ms")

        return AnalyzeResponse(
            terminator_added=normalized.terminator_added,
            sentence_count=document.sentence_count,
            results=[
                WordCount(word=o.word, count=o.count, summary=o.summary())
                for o in occurrences
            ],
            latency_ms=latency_ms
        )

    except InputValidationError as e:
        raise _validation_error(e)
    except Exception as e:
        logger.error(f"Unexpected error analyzing text: {e}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail=f"Internal server error: {str(e)}"
        )


@app.post("/tokenize", response_model=TokenizeResponse)
async def tokenize_endpoint(request: TokenizeRequest) -> TokenizeResponse:
    """Return the sentences and tokens of a text."""
    try:
        normalized = normalize_text(request.text)
        document = text_tokenizer.tokenize(normalized.text)

        return TokenizeResponse(
            terminator_added=normalized.terminator_added,
            sentence_count=document.sentence_count,
            sentences=[
                SentenceOut(tokens=[
                    TokenOut(kind=token.kind.value, text=token.text)
                    for token in sentence.tokens
                ])
                for sentence in document.sentences
            ]
        )

    except InputValidationError as e:
        raise _validation_error(e)
    except Exception as e:
        logger.error(f"Unexpected error tokenizing text: {e}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail=f"Internal server error: {str(e)}"
        )


if __name__ == "__main__":
    import uvicorn
    setup_logging(LOG_LEVEL, LOG_FORMAT)
    logger.info(f"Starting Sentence Word Counter API on port {PORT}")
    uvicorn.run(app, host="0.0.0.0", port=PORT)
