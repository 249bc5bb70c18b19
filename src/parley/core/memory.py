# src/parley/core/memory.py
"""
Conversation memory: the most recent (user input, reply) turns.

Recording a turn also feeds the user input to the frequency tracker.
"""

from collections import deque
from dataclasses import dataclass

from parley.config import MEMORY_LIMIT
from parley.core.frequency import FrequencyTracker


@dataclass(frozen=True)
class ConversationTurn:
    user_input: str
    bot_response: str

    def to_dict(self) -> dict:
        return {"user_input": self.user_input, "bot_response": self.bot_response}


class ConversationMemory:
    def __init__(self, tracker: FrequencyTracker, limit: int = MEMORY_LIMIT):
        if limit < 1:
            raise ValueError(f"Memory limit must be positive, got {limit}")
        self.tracker = tracker
        self.limit = limit
        self._turns: deque[ConversationTurn] = deque()

    def record_turn(self, user_input: str, bot_response: str) -> ConversationTurn:
        turn = ConversationTurn(user_input, bot_response)
        self._turns.append(turn)
        self.tracker.record(user_input)
        if len(self._turns) > self.limit:
            self._turns.popleft()
        return turn

    @property
    def turns(self) -> list[ConversationTurn]:
        return list(self._turns)

    def __len__(self) -> int:
        return len(self._turns)
