"""
Shared dependencies for routes.
"""

from functools import lru_cache

import redis

from parley.config import MEMORY_LIMIT, REDIS_DB, REDIS_HOST, REDIS_PORT, STOPWORDS_FILE
from parley.core.pool import AgentPool
from parley.core.roster import build_pool
from parley.core.stopwords import load_stopwords


def get_redis(db: int = REDIS_DB):
    return redis.Redis(host=REDIS_HOST, port=REDIS_PORT, db=db)


@lru_cache(maxsize=1)
def get_pool() -> AgentPool:
    """One pool per process, built from the roster on first use."""
    stopwords = load_stopwords(STOPWORDS_FILE)
    return build_pool(get_redis(), stopwords, MEMORY_LIMIT)
