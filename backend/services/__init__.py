"""Services for the sentence word counter."""
from .tokenizer import TextTokenizer, tokenize
from .occurrence_counter import OccurrenceCounter, count_occurrences
from .text_input import (
    InputError,
    InputValidationError,
    ends_with_terminator,
    normalize_text,
    parse_word_count,
    normalize_query_word,
)

__all__ = ['TextTokenizer', 'tokenize', 'OccurrenceCounter', 'count_occurrences', 'InputError', 'InputValidationError', 'ends_with_terminator', 'normalize_text', 'parse_word_count', 'normalize_query_word']
