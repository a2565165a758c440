"""Token data models."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from config import PUNCTUATION_MARKS


class TokenKind(str, Enum):
    """Tag distinguishing the two token variants."""
    WORD = "word"
    PUNCTUATION = "punctuation"


def is_punctuation_mark(piece: str) -> bool:
    """Return True if piece is exactly one recognised punctuation character."""
    return len(piece) == 1 and piece in PUNCTUATION_MARKS


def _fold_char(char: str) -> str:
    # Single-character mappings only: "ß" stays "ß", "ſ" folds to "s"
    upper = char.upper()
    if len(upper) != 1:
        upper = char
    # "İ" lowercases to "i" plus a combining dot; keep the base letter
    return upper.lower()[0]


def fold_case(text: str) -> str:
    """Fold case character by character, keeping the length unchanged."""
    return "".join(_fold_char(char) for char in text)


@dataclass(frozen=True)
class Word:
    """A word token holding the matched substring verbatim."""
    text: str
    kind: TokenKind = field(default=TokenKind.WORD, init=False)

    def __post_init__(self):
        if not self.text:
            raise ValueError("Word text cannot be empty")

    def matches(self, query: str) -> bool:
        """Case-insensitive whole-word comparison, one character at a time."""
        return fold_case(self.text) == fold_case(query)


@dataclass(frozen=True)
class Punctuation:
    """A single punctuation mark from PUNCTUATION_MARKS."""
    mark: str
    kind: TokenKind = field(default=TokenKind.PUNCTUATION, init=False)

    def __post_init__(self):
        if not is_punctuation_mark(self.mark):
            raise ValueError(f"Not a punctuation mark: {self.mark!r}")

    @property
    def text(self) -> str:
        return self.mark


Token = Union[Word, Punctuation]
