# src/parley/core/roster.py
"""
Agents registered in Redis.

The roster is a list at {prefix}:agents, in registration order. Each agent
reads its own lexicon stored under {prefix}:{name}. Names may not contain
":", otherwise one agent's keys could overlap another's.
"""

from collections.abc import Iterable

import redis

from parley.config import KEY_PREFIX, MEMORY_LIMIT
from parley.core.agent import Agent
from parley.core.lexicon import Lexicon
from parley.core.pool import AgentPool


def _roster_key(prefix: str) -> str:
    return f"{prefix}:agents"


def validate_agent_name(name: str) -> str:
    if not name:
        raise ValueError("Agent name must not be empty")
    if ":" in name:
        raise ValueError(f"Agent name must not contain ':': {name}")
    return name


def list_agents(client: redis.Redis, prefix: str = KEY_PREFIX) -> list[str]:
    return [n.decode() for n in client.lrange(_roster_key(prefix), 0, -1)]


def register_agent(client: redis.Redis, name: str, prefix: str = KEY_PREFIX) -> bool:
    """Add an agent to the roster. Returns False if it was already there."""
    validate_agent_name(name)
    if name in list_agents(client, prefix):
        return False
    client.rpush(_roster_key(prefix), name)
    return True


def lexicon_for(client: redis.Redis, name: str, prefix: str = KEY_PREFIX) -> Lexicon:
    return Lexicon(client, prefix=f"{prefix}:{validate_agent_name(name)}")


def build_pool(
    client: redis.Redis,
    stopwords: Iterable[str] = (),
    memory_limit: int = MEMORY_LIMIT,
    prefix: str = KEY_PREFIX,
) -> AgentPool:
    stopwords = frozenset(stopwords)
    pool = AgentPool()
    for name in list_agents(client, prefix):
        pool.add(Agent(name, lexicon_for(client, name, prefix), stopwords, memory_limit))
    return pool
