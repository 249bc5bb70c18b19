# src/parley/core/pool.py
"""
Agent pool and plurality voting.

Every agent answers the same input; the reply given by the most agents wins.
Ties go to the reply that was seen first, i.e. from the earliest-registered
agent among the tied ones.
"""

import logging
from collections import Counter
from collections.abc import Iterable, Iterator

from parley.config import NO_RESPONSE
from parley.core.agent import Agent

logger = logging.getLogger(__name__)


def tally(candidates: Iterable[str]) -> Counter[str]:
    """Count non-empty candidates, keeping first-seen order."""
    return Counter(c for c in candidates if c)


def plurality(candidates: Iterable[str], fallback: str = NO_RESPONSE) -> str:
    votes = tally(candidates)
    if not votes:
        return fallback
    # max() keeps the first of equal keys, and Counter keeps insertion order
    return max(votes, key=votes.__getitem__)


class AgentPool:
    def __init__(self, agents: Iterable[Agent] = ()):
        self._agents: dict[str, Agent] = {}
        for agent in agents:
            self.add(agent)

    def add(self, agent: Agent) -> Agent:
        """Register a fully configured agent. The pool keeps the object itself."""
        if agent.name in self._agents:
            raise ValueError(f"Agent already registered: {agent.name}")
        self._agents[agent.name] = agent
        return agent

    def get(self, name: str) -> Agent | None:
        return self._agents.get(name)

    @property
    def names(self) -> list[str]:
        return list(self._agents)

    def __iter__(self) -> Iterator[Agent]:
        return iter(self._agents.values())

    def __len__(self) -> int:
        return len(self._agents)

    def candidates(self, text: str, from_history: bool = False) -> list[str]:
        """One reply per agent, in registration order."""
        replies = []
        for agent in self:
            if from_history:
                replies.append(agent.generate_reply_from_history(text))
            else:
                replies.append(agent.generate_reply(text))
        return replies

    def best_reply(self, text: str, from_history: bool = False) -> str:
        replies = self.candidates(text, from_history)
        best = plurality(replies)
        logger.debug(f"Votes for {text!r}: {dict(tally(replies))} -> {best!r}")
        return best

    def respond(self, text: str, from_history: bool = False) -> str:
        """Vote on a reply, then record the turn with every agent."""
        reply = self.best_reply(text, from_history)
        self.record(text, reply)
        return reply

    def record(self, user_input: str, reply: str) -> None:
        """Record one turn with every agent."""
        for agent in self:
            agent.record_turn(user_input, reply)

    def rate(self, user_input: str, bot_response: str, rating: int) -> None:
        for agent in self:
            agent.rate(user_input, bot_response, rating)
