"""
Command-line interface for the sentence word counter.

Interactive mode prompts for the text, the number of query words and each
word, re-prompting until the input is valid. Passing --text and --word runs
the same pipeline without prompts.

Usage:
    python cli.py
    python cli.py --text "The dog ran. A dog barked." --word dog --word cat
"""
import argparse
import logging
import sys
from typing import Callable, List, Optional

from config import CLI_LOG_LEVEL, LOG_FORMAT
from logger import setup_logging
from models.occurrence import NormalizedText, WordOccurrence
from services.tokenizer import TextTokenizer
from services.occurrence_counter import OccurrenceCounter
from services.text_input import (
    InputValidationError,
    normalize_text,
    parse_word_count,
    normalize_query_word,
    TEXT_PROMPT,
    TERMINATOR_ADDED_MESSAGE,
    WORD_COUNT_PROMPT,
    WORD_PROMPT,
    RESULTS_HEADER,
)

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class InteractiveSession:
    """Prompt loop over injectable reader and writer callables."""

    def __init__(
        self,
        read: Optional[Callable[[], str]] = None,
        write: Optional[Callable[[str], None]] = None,
        tokenizer: Optional[TextTokenizer] = None,
        counter: Optional[OccurrenceCounter] = None
    ):
        self.read = read or input
        self.write = write or print
        self.tokenizer = tokenizer or TextTokenizer()
        self.counter = counter or OccurrenceCounter()

    def prompt_text(self) -> NormalizedText:
        while True:
            self.write(TEXT_PROMPT)
            try:
                normalized = normalize_text(self.read())
            except InputValidationError as e:
                self.write(e.error.message)
                continue

            if normalized.terminator_added:
                self.write(TERMINATOR_ADDED_MESSAGE)
            return normalized

    def prompt_word_count(self) -> int:
        while True:
            self.write(WORD_COUNT_PROMPT)
            try:
                return parse_word_count(self.read())
            except InputValidationError as e:
                self.write(e.error.message)

    def prompt_words(self, count: int) -> List[str]:
        words = []
        for index in range(1, count + 1):
            while True:
                self.write(WORD_PROMPT.format(index=index))
                try:
                    words.append(normalize_query_word(self.read(), index=index))
                    break
                except InputValidationError as e:
                    self.write(e.error.message)
        return words

    def report(self, results: List[WordOccurrence]) -> None:
        self.write(RESULTS_HEADER)
        for occurrence in results:
            self.write(occurrence.summary())

    def analyze(self, text: str, words: List[str]) -> List[WordOccurrence]:
        document = self.tokenizer.tokenize(text)
        logger.debug(f"Analyzing {len(words)} word(s) across {document.sentence_count} sentence(s)")
        return self.counter.count_occurrences(document, words)

    def run(self) -> List[WordOccurrence]:
        """Run the full prompt sequence and print the results."""
        normalized = self.prompt_text()
        count = self.prompt_word_count()
        words = self.prompt_words(count)

        results = self.analyze(normalized.text, words)
        self.report(results)
        return results


def run_once(session: InteractiveSession, text: str, raw_words: List[str]) -> List[WordOccurrence]:
    """
    Validate command-line text and words, then analyze and print.

    Raises:
        InputValidationError: If the text or any word is blank
    """
    normalized = normalize_text(text)
    if normalized.terminator_added:
        session.write(TERMINATOR_ADDED_MESSAGE)

    words = [normalize_query_word(raw, index=i) for i, raw in enumerate(raw_words, start=1)]
    results = session.analyze(normalized.text, words)
    session.report(results)
    return results


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Count how many sentences of a text contain each query word"
    )
    parser.add_argument(
        "--text",
        help="Text to analyze (prompts interactively when omitted)"
    )
    parser.add_argument(
        "--word",
        dest="words",
        action="append",
        default=[],
        help="Query word; repeat for several words"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=CLI_LOG_LEVEL,
        help=f"Logging level (default: {CLI_LOG_LEVEL})"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command-line interface."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level, LOG_FORMAT)

    session = InteractiveSession()

    if args.text is not None or args.words:
        if args.text is None or not args.words:
            parser.error("--text and at least one --word must be given together")
        try:
            run_once(session, args.text, args.words)
        except InputValidationError as e:
            logger.warning(f"Rejected input: {e.error.code}")
            print(e.error.message, file=sys.stderr)
            return 2
        return 0

    try:
        session.run()
    except (EOFError, KeyboardInterrupt):
        logger.warning("Input ended before all prompts were answered")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
