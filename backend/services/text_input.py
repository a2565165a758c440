"""Validation and normalisation of user-supplied text and query words."""
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict

from models.occurrence import NormalizedText
from config import SENTENCE_TERMINATORS, DEFAULT_TERMINATOR, TRIM_CHARS

logger = logging.getLogger(__name__)

# User-facing prompts and messages
TEXT_PROMPT = "Please enter the text:"
EMPTY_TEXT_MESSAGE = "Text cannot be empty. Please try again."
TERMINATOR_ADDED_MESSAGE = "Text was missing a sentence-ending punctuation, a period was added."
WORD_COUNT_PROMPT = "Enter the number of words to search for (positive integer):"
INVALID_NUMBER_MESSAGE = "Please enter a valid number."
NON_POSITIVE_COUNT_MESSAGE = "The number of words must be positive. Please try again."
WORD_PROMPT = "Enter word #{index}:"
EMPTY_WORD_MESSAGE = "Word cannot be empty. Please enter again."
RESULTS_HEADER = "\nWord(s):"

# Counts must fit a signed 32-bit integer written in ASCII digits
INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass
class InputError:
    """Structured description of rejected input."""
    code: str
    message: str
    details: Dict[str, Any] = field(default_factory=dict)


class InputValidationError(Exception):
    """Raised when user input fails validation; message is safe to show."""

    def __init__(self, error: InputError):
        self.error = error
        super().__init__(error.message)


def ends_with_terminator(text: str) -> bool:
    """Return True if the last character of text ends a sentence."""
    return bool(text) and text[-1] in SENTENCE_TERMINATORS


def normalize_text(raw: str) -> NormalizedText:
    """
    Trim text and make sure it ends in a sentence terminator.

    Args:
        raw: Text as typed or posted by the user

    Returns:
        NormalizedText whose terminator_added flag is set when a period was appended

    Raises:
        InputValidationError: If the text is blank
    """
    text = (raw or "").strip(TRIM_CHARS)
    if not text:
        raise InputValidationError(InputError(code="EMPTY_TEXT", message=EMPTY_TEXT_MESSAGE))

    if ends_with_terminator(text):
        return NormalizedText(text=text)

    logger.debug("Appending missing sentence terminator")
    return NormalizedText(text=text + DEFAULT_TERMINATOR, terminator_added=True)


def parse_word_count(raw: str) -> int:
    """
    Parse the number of query words.

    Raises:
        InputValidationError: If raw is not a 32-bit integer or is not positive
    """
    digits = (raw or "").strip(TRIM_CHARS)
    value = int(digits) if _INTEGER_PATTERN.fullmatch(digits) else None
    if value is None or not INT_MIN <= value <= INT_MAX:
        raise InputValidationError(InputError(
            code="INVALID_NUMBER",
            message=INVALID_NUMBER_MESSAGE,
            details={"value": raw}
        ))

    if value <= 0:
        raise InputValidationError(InputError(
            code="NON_POSITIVE_COUNT",
            message=NON_POSITIVE_COUNT_MESSAGE,
            details={"value": value}
        ))
    return value


def normalize_query_word(raw: str, index: int = 1) -> str:
    """
    Trim a query word.

    Args:
        raw: Word as supplied by the user
        index: 1-based position of the word, reported on failure

    Raises:
        InputValidationError: If the word is blank
    """
    word = (raw or "").strip(TRIM_CHARS)
    if not word:
        raise InputValidationError(InputError(
            code="EMPTY_WORD",
            message=EMPTY_WORD_MESSAGE,
            details={"index": index}
        ))
    return word
