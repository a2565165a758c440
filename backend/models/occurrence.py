"""Occurrence result models."""
from dataclasses import dataclass


@dataclass(frozen=True)
class WordOccurrence:
    """Number of sentences containing a query word."""
    word: str
    count: int  # >= 0

    def summary(self) -> str:
        return f'"{self.word}" is in {self.count} sentence(s)'


@dataclass(frozen=True)
class NormalizedText:
    """Trimmed input text ready for tokenization."""
    text: str
    terminator_added: bool = False
