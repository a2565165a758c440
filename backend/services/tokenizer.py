"""Sentence and word tokenizer."""
import logging
import re
from typing import List

from models.document import Document, Sentence
from models.token import Token, Word, Punctuation, is_punctuation_mark
from config import SENTENCE_TERMINATORS, PUNCTUATION_MARKS, TRIM_CHARS

logger = logging.getLogger(__name__)


class TextTokenizer:
    """Segments text into sentences of word and punctuation tokens."""

    def __init__(self):
        """Compile the sentence boundary and piece patterns."""
        # Split after a terminator, consuming any whitespace that follows it
        self._sentence_boundary = re.compile(rf"(?<=[{re.escape(SENTENCE_TERMINATORS)}])\s*", re.ASCII)

        # A single mark, or a run of anything that is neither whitespace nor a mark
        marks = re.escape(PUNCTUATION_MARKS)
        self._piece_pattern = re.compile(rf"[{marks}]|[^\s{marks}]+", re.ASCII)

    def tokenize(self, text: str) -> Document:
        """
        Tokenize text into a Document.

        Abbreviations and decimal points are not special-cased: "Dr. Smith"
        is two sentences. Apostrophes are split out as well, so "don't"
        becomes don / ' / t.

        Args:
            text: Non-empty text, normally ending in a terminator

        Returns:
            Document with one Sentence per non-empty sentence string

        Raises:
            ValueError: If text is empty or whitespace only
        """
        if not text or not text.strip(TRIM_CHARS):
            raise ValueError("Text to tokenize must not be empty")

        sentences = []
        for sentence_text in self.split_sentences(text.strip(TRIM_CHARS)):
            tokens = [self.classify(piece) for piece in self.split_pieces(sentence_text)]
            sentences.append(Sentence(tokens=tuple(tokens)))

        document = Document(sentences=tuple(sentences))
        logger.debug(
            "Tokenized text",
            extra={"extra": {
                "sentences": document.sentence_count,
                "tokens": document.token_count,
            }}
        )
        return document

    def split_sentences(self, text: str) -> List[str]:
        """
        Split text after every terminator.

        Returns:
            Trimmed, non-empty sentence strings in source order
        """
        parts = self._sentence_boundary.split(text)
        return [part.strip(TRIM_CHARS) for part in parts if part.strip(TRIM_CHARS)]

    def split_pieces(self, sentence_text: str) -> List[str]:
        """Split a sentence string into trimmed, non-empty word and punctuation pieces."""
        pieces = self._piece_pattern.findall(sentence_text)
        return [piece.strip(TRIM_CHARS) for piece in pieces if piece.strip(TRIM_CHARS)]

    def classify(self, piece: str) -> Token:
        """Classify a piece as Punctuation or Word."""
        if is_punctuation_mark(piece):
            return Punctuation(mark=piece)
        return Word(text=piece)


_default_tokenizer = TextTokenizer()


def tokenize(text: str) -> Document:
    """Tokenize text with the default terminators and punctuation marks."""
    return _default_tokenizer.tokenize(text)
