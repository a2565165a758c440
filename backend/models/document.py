"""Document data models."""
from dataclasses import dataclass
from typing import Tuple

from .token import Token, TokenKind, Word


@dataclass(frozen=True)
class Sentence:
    """Represents one sentence as its tokens in source order."""
    tokens: Tuple[Token, ...]

    @property
    def words(self) -> Tuple[Word, ...]:
        return tuple(t for t in self.tokens if t.kind is TokenKind.WORD)

    def __len__(self) -> int:
        return len(self.tokens)


@dataclass(frozen=True)
class Document:
    """Represents a tokenized text."""
    sentences: Tuple[Sentence, ...]

    @property
    def sentence_count(self) -> int:
        return len(self.sentences)

    @property
    def token_count(self) -> int:
        return sum(len(s) for s in self.sentences)
