# src/parley/core/frequency.py
"""
Word frequency tracking and importance selection.

A word's importance is how often it has appeared in recorded user input.
Stopwords are never counted and never selected.
"""

from collections import Counter
from collections.abc import Iterable

from parley.core.tokenize import tokenize


class FrequencyTracker:
    def __init__(self, stopwords: Iterable[str] = ()):
        self.stopwords = frozenset(stopwords)
        self.counts: Counter[str] = Counter()

    def is_stopword(self, word: str) -> bool:
        return word in self.stopwords

    def record(self, text: str) -> None:
        for word in tokenize(text):
            if not self.is_stopword(word):
                self.counts[word] += 1

    def importance_of(self, word: str) -> int:
        return self.counts[word]

    def select_important_word(self, tokens: Iterable[str]) -> str | None:
        """
        Highest-count non-stopword token.

        Unseen words count 0 and can still win. Ties go to the token that
        comes first in `tokens`. Returns None when every token is a stopword.
        """
        best = None
        best_count = -1
        for word in tokens:
            if self.is_stopword(word):
                continue
            count = self.counts[word]
            if count > best_count:
                best, best_count = word, count
        return best

    def most_common(self, n: int | None = None) -> list[tuple[str, int]]:
        return self.counts.most_common(n)

    def __len__(self) -> int:
        return len(self.counts)
