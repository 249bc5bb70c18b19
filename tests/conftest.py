# tests/conftest.py
"""Shared fixtures."""

import pytest
import redis

from parley.core.agent import Agent
from parley.core.lexicon import DictionaryEntry, InMemoryLexicon


STOPWORDS = frozenset({"the", "a", "I", "is", "to"})


@pytest.fixture
def redis_client():
    r = redis.Redis(host="localhost", port=6379, db=15)  # db=15 for tests
    try:
        r.ping()
    except redis.ConnectionError:
        pytest.skip("Redis not available on localhost:6379")
    yield r
    # cleanup after each test
    for key in r.scan_iter("testparley:*"):
        r.delete(key)


@pytest.fixture
def stopwords():
    return STOPWORDS


@pytest.fixture
def lexicon():
    return InMemoryLexicon([
        DictionaryEntry("cat", "A small feline.", ("A cat sat.", "Cats are pets.")),
        DictionaryEntry("hat", "A head covering.", ("A hat fits.",)),
        DictionaryEntry("tea", "A hot drink.", ()),
    ])


@pytest.fixture
def agent(lexicon, stopwords):
    return Agent("alpha", lexicon, stopwords)
