"""Data models for the sentence word counter."""
from .token import Token, TokenKind, Word, Punctuation, is_punctuation_mark, fold_case
from .document import Document, Sentence
from .occurrence import WordOccurrence, NormalizedText
from .api import (
    AnalyzeRequest,
    AnalyzeResponse,
    WordCount,
    TokenizeRequest,
    TokenizeResponse,
    SentenceOut,
    TokenOut,
)

__all__ = [
    "Token",
    "TokenKind",
    "Word",
    "Punctuation",
    "is_punctuation_mark",
    "fold_case",
    "Document",
    "Sentence",
    "WordOccurrence",
    "NormalizedText",
    "AnalyzeRequest",
    "AnalyzeResponse",
    "WordCount",
    "TokenizeRequest",
    "TokenizeResponse",
    "SentenceOut",
    "TokenOut",
]
