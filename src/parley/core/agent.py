# src/parley/core/agent.py
"""
Agent: one independent responder.

Each agent owns its frequency table, conversation memory and rating log,
and reads from a lexical store that may be shared with other agents.

Two ways to reply:
  generate_reply               - example sentence for the most important word
  generate_reply_from_history  - best-rated past response mentioning that word
"""

import logging
import random
from collections.abc import Iterable
from pathlib import Path

from parley.config import (
    DEFINITION_NOT_FOUND,
    MEMORY_LIMIT,
    NOT_ENOUGH_INFO,
    NOT_ENOUGH_INFO_ABOUT,
    NOT_UNDERSTOOD,
    TALK_MORE,
)
from parley.core.frequency import FrequencyTracker
from parley.core.ingest import load_dictionary
from parley.core.lexicon import LexicalStore
from parley.core.memory import ConversationMemory, ConversationTurn
from parley.core.ratings import RatedResponse, RatingLog, pick_response
from parley.core.stopwords import load_stopwords
from parley.core.tokenize import tokenize

logger = logging.getLogger(__name__)


class Agent:
    def __init__(
        self,
        name: str,
        lexicon: LexicalStore,
        stopwords: Iterable[str] = (),
        memory_limit: int = MEMORY_LIMIT,
        rng: random.Random | None = None,
    ):
        self._name = name
        self.lexicon = lexicon
        self.frequency = FrequencyTracker(stopwords)
        self.memory = ConversationMemory(self.frequency, memory_limit)
        self.ratings = RatingLog()
        self.rng = rng or random.Random()

    @classmethod
    def from_files(
        cls,
        name: str,
        lexicon: LexicalStore,
        stopwords_path: str | Path,
        dictionary_path: str | Path | None = None,
        **kwargs,
    ) -> "Agent":
        """Build an agent from a stopword file and, optionally, a dictionary file."""
        stopwords = load_stopwords(stopwords_path)
        if dictionary_path is not None:
            load_dictionary(dictionary_path, lexicon)
        return cls(name, lexicon, stopwords, **kwargs)

    @property
    def name(self) -> str:
        return self._name

    def _important_word(self, text: str) -> tuple[str | None, str | None]:
        """(word, None) on success, (None, fallback reply) otherwise."""
        words = tokenize(text)
        if not words:
            return None, NOT_UNDERSTOOD

        word = self.frequency.select_important_word(words)
        if word is None:
            return None, NOT_ENOUGH_INFO

        logger.debug(f"{self._name}: important word {word!r} (count {self.frequency.importance_of(word)})")
        return word, None

    def sentence_for(self, word: str) -> str:
        examples = self.lexicon.get_examples(word)
        if examples:
            return examples[0]
        return NOT_ENOUGH_INFO_ABOUT.format(word=word)

    def generate_reply(self, text: str) -> str:
        word, fallback = self._important_word(text)
        if word is None:
            return fallback
        return TALK_MORE.format(word=word) + self.sentence_for(word)

    def generate_reply_from_history(self, text: str) -> str:
        word, fallback = self._important_word(text)
        if word is None:
            return fallback

        best = self.ratings.best_responses(word)
        if best:
            return pick_response(best, self.rng.randrange)

        return self.generate_reply(text)

    def define(self, word: str) -> str:
        definition = self.lexicon.get_definition(word)
        return definition if definition is not None else DEFINITION_NOT_FOUND

    def record_turn(self, user_input: str, bot_response: str) -> ConversationTurn:
        return self.memory.record_turn(user_input, bot_response)

    def rate(self, user_input: str, bot_response: str, rating: int) -> RatedResponse:
        return self.ratings.rate(user_input, bot_response, rating)

    def __repr__(self) -> str:
        return f"Agent({self._name!r}, turns={len(self.memory)}, ratings={len(self.ratings)})"
