# src/parley/core/ratings.py
"""
Human-rated responses, kept for the lifetime of the process.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class RatedResponse:
    user_input: str
    bot_response: str
    rating: int


class RatingLog:
    def __init__(self):
        self.entries: list[RatedResponse] = []

    def rate(self, user_input: str, bot_response: str, rating: int) -> RatedResponse:
        """Append unconditionally: no range check, no dedup."""
        entry = RatedResponse(user_input, bot_response, rating)
        self.entries.append(entry)
        return entry

    def group_by_rating(self, word: str) -> dict[int, list[str]]:
        """Responses whose user input contains `word` (substring match), by rating."""
        groups: dict[int, list[str]] = {}
        for entry in self.entries:
            if word in entry.user_input:
                groups.setdefault(entry.rating, []).append(entry.bot_response)
        return groups

    def best_responses(self, word: str) -> list[str]:
        """The top-rated group for `word`, or [] if nothing matches."""
        groups = self.group_by_rating(word)
        if not groups:
            return []
        return groups[max(groups)]

    def __len__(self) -> int:
        return len(self.entries)


def pick_response(candidates: Sequence[str], randrange: Callable[[int], int]) -> str:
    """Pick one candidate; `randrange(n)` must return an index in [0, n)."""
    if not candidates:
        raise ValueError("No candidates to pick from")
    return candidates[randrange(len(candidates))]
