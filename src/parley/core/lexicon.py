# src/parley/core/lexicon.py
"""
Lexical store: word -> definition and up to two example sentences.

Storage in Redis, one hash per word:
  {prefix}:word:{word}  -> {definition, example1, example2}
  {prefix}:words        -> set of stored words

Writes replace the whole row. Redis failures are logged and the call
degrades to an empty result instead of raising.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

import redis

logger = logging.getLogger(__name__)

MAX_EXAMPLES = 2


def positional(examples) -> tuple[str, ...]:
    """Keep examples in their columns; only trailing empty fields are dropped."""
    examples = list(examples)
    while examples and not examples[-1]:
        examples.pop()
    return tuple(examples)


@dataclass(frozen=True)
class DictionaryEntry:
    """examples[i] is column example{i+1}; an empty string marks an empty column."""

    word: str
    definition: str = ""
    examples: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "examples", positional(self.examples))
        if len(self.examples) > MAX_EXAMPLES:
            raise ValueError(f"At most {MAX_EXAMPLES} examples per word, got {len(self.examples)}")

    def to_row(self) -> dict[str, str]:
        padded = list(self.examples) + [""] * (MAX_EXAMPLES - len(self.examples))
        return {
            "definition": self.definition,
            "example1": padded[0],
            "example2": padded[1],
        }

    @classmethod
    def from_row(cls, word: str, row: dict[str, str]) -> "DictionaryEntry":
        examples = (row.get("example1", ""), row.get("example2", ""))
        return cls(
            word=word,
            definition=row.get("definition", ""),
            examples=examples,
        )


class LexicalStore(ABC):
    """Exact-key lookup of dictionary entries."""

    @abstractmethod
    def upsert(self, entry: DictionaryEntry) -> bool:
        """Insert or replace a word's row. Returns False if the write failed."""

    @abstractmethod
    def get_entry(self, word: str) -> DictionaryEntry | None:
        pass

    @abstractmethod
    def words(self) -> list[str]:
        pass

    @abstractmethod
    def clear(self) -> None:
        pass

    def add(self, word: str, definition: str = "", *examples: str) -> bool:
        return self.upsert(DictionaryEntry(word, definition, examples))

    def get_definition(self, word: str) -> str | None:
        entry = self.get_entry(word)
        return entry.definition if entry else None

    def get_examples(self, word: str) -> list[str]:
        """Non-empty examples in stored order, [] for unknown words."""
        entry = self.get_entry(word)
        return [e for e in entry.examples if e] if entry else []

    def __len__(self) -> int:
        return len(self.words())

    def __contains__(self, word: str) -> bool:
        return self.get_entry(word) is not None


class Lexicon(LexicalStore):
    def __init__(self, client: redis.Redis, prefix: str = "lex"):
        self.client = client
        self.prefix = prefix

    def _word_key(self, word: str) -> str:
        return f"{self.prefix}:word:{word}"

    def _index_key(self) -> str:
        return f"{self.prefix}:words"

    def upsert(self, entry: DictionaryEntry) -> bool:
        key = self._word_key(entry.word)
        try:
            pipe = self.client.pipeline(transaction=True)
            pipe.delete(key)
            pipe.hset(key, mapping=entry.to_row())
            pipe.sadd(self._index_key(), entry.word)
            pipe.execute()
        except redis.RedisError as e:
            logger.error(f"Failed to store {key}: {e}")
            return False
        return True

    def get_entry(self, word: str) -> DictionaryEntry | None:
        key = self._word_key(word)
        try:
            row = self.client.hgetall(key)
        except redis.RedisError as e:
            logger.error(f"Failed to read {key}: {e}")
            return None

        if not row:
            return None
        decoded = {k.decode(): v.decode() for k, v in row.items()}
        return DictionaryEntry.from_row(word, decoded)

    def words(self) -> list[str]:
        try:
            members = self.client.smembers(self._index_key())
        except redis.RedisError as e:
            logger.error(f"Failed to list {self._index_key()}: {e}")
            return []
        return sorted(m.decode() for m in members)

    def __len__(self) -> int:
        try:
            return self.client.scard(self._index_key())
        except redis.RedisError as e:
            logger.error(f"Failed to count {self._index_key()}: {e}")
            return 0

    def clear(self) -> None:
        """Clear all lexicon data. Useful for tests."""
        try:
            for key in self.client.scan_iter(f"{self.prefix}:*"):
                self.client.delete(key)
        except redis.RedisError as e:
            logger.error(f"Failed to clear {self.prefix}: {e}")


class InMemoryLexicon(LexicalStore):
    """Dict-backed store with the same contract, for tests and --dict runs."""

    def __init__(self, entries: list[DictionaryEntry] | None = None):
        self._entries: dict[str, DictionaryEntry] = {}
        for entry in entries or []:
            self.upsert(entry)

    def upsert(self, entry: DictionaryEntry) -> bool:
        self._entries[entry.word] = entry
        return True

    def get_entry(self, word: str) -> DictionaryEntry | None:
        return self._entries.get(word)

    def words(self) -> list[str]:
        return sorted(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        self._entries.clear()
