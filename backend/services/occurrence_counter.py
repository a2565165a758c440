"""Sentence-level word occurrence counting."""
import logging
from typing import List, Sequence

from models.document import Document, Sentence
from models.occurrence import WordOccurrence

logger = logging.getLogger(__name__)


class OccurrenceCounter:
    """
    Counts, per query word, how many sentences contain it.

    A sentence counts once no matter how often the word repeats inside it.
    Matching is whole-word and case-insensitive; punctuation never matches.
    """

    def count_occurrences(
        self,
        document: Document,
        queries: Sequence[str]
    ) -> List[WordOccurrence]:
        """
        Count sentences containing each query word.

        Args:
            document: Tokenized text
            queries: Query words; duplicates each get their own row

        Returns:
            One WordOccurrence per query, in query order
        """
        results = []
        for query in queries:
            count = sum(1 for sentence in document.sentences if self.contains_word(sentence, query))
            results.append(WordOccurrence(word=query, count=count))

        logger.debug(
            "Counted occurrences",
            extra={"extra": {
                "queries": len(results),
                "sentences": document.sentence_count,
            }}
        )
        return results

    @staticmethod
    def contains_word(sentence: Sentence, query: str) -> bool:
        """Check if a sentence has a word token equal to query, ignoring case."""
        return any(word.matches(query) for word in sentence.words)


_default_counter = OccurrenceCounter()


def count_occurrences(document: Document, queries: Sequence[str]) -> List[WordOccurrence]:
    """Count sentences containing each query word."""
    return _default_counter.count_occurrences(document, queries)
