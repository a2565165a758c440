"""API request and response models."""
from typing import List

from pydantic import BaseModel, Field


class AnalyzeRequest(BaseModel):
    """Text plus the query words to count."""
    text: str
    words: List[str] = Field(..., min_length=1)


class WordCount(BaseModel):
    word: str
    count: int
    summary: str


class AnalyzeResponse(BaseModel):
    terminator_added: bool
    sentence_count: int
    results: List[WordCount]
    latency_ms: int


class TokenizeRequest(BaseModel):
    text: str


class TokenOut(BaseModel):
    kind: str
    text: str


class SentenceOut(BaseModel):
    tokens: List[TokenOut]


class TokenizeResponse(BaseModel):
    terminator_added: bool
    sentence_count: int
    sentences: List[SentenceOut]
