# tests/test_lexicon.py
"""Tests for the lexical store."""

import pytest
import redis

from parley.core.lexicon import DictionaryEntry, InMemoryLexicon, Lexicon


@pytest.fixture(params=["memory", "redis"])
def store(request):
    if request.param == "memory":
        return InMemoryLexicon()
    client = request.getfixturevalue("redis_client")
    return Lexicon(client, prefix="testparley:lex")


def test_entry_row_roundtrip():
    entry = DictionaryEntry("cat", "feline", ("A cat sat.",))
    row = entry.to_row()

    assert row == {"definition": "feline", "example1": "A cat sat.", "example2": ""}
    assert DictionaryEntry.from_row("cat", row) == entry


def test_entry_rejects_three_examples():
    with pytest.raises(ValueError):
        DictionaryEntry("cat", "feline", ("a", "b", "c"))


def test_add_and_lookup(store):
    assert store.add("cat", "A small feline.", "A cat sat.", "Cats are pets.")

    assert store.get_definition("cat") == "A small feline."
    assert store.get_examples("cat") == ["A cat sat.", "Cats are pets."]
    assert "cat" in store
    assert len(store) == 1


def test_lookup_missing(store):
    assert store.get_entry("nonexistent") is None
    assert store.get_definition("nonexistent") is None
    assert store.get_examples("nonexistent") == []


def test_lookup_is_exact(store):
    store.add("cat", "feline", "A cat sat.")

    assert store.get_entry("Cat") is None
    assert store.get_entry("cat.") is None


def test_upsert_replaces_whole_row(store):
    store.add("cat", "feline", "A cat sat.", "Cats are pets.")
    store.add("cat", "a pet", "New example.")

    entry = store.get_entry("cat")
    assert entry.definition == "a pet"
    assert entry.examples == ("New example.",)
    assert len(store) == 1


def test_empty_examples_skipped(store):
    store.upsert(DictionaryEntry("rain", "water", ()))

    assert store.get_examples("rain") == []
    assert store.get_definition("rain") == "water"


def test_words_and_clear(store):
    store.add("tea", "drink")
    store.add("cat", "feline")

    assert store.words() == ["cat", "tea"]

    store.clear()
    assert store.words() == []
    assert len(store) == 0


class BrokenRedis:
    """Client whose every call fails like a dropped connection."""

    def __getattr__(self, name):
        def fail(*args, **kwargs):
            raise redis.ConnectionError("connection refused")
        return fail


def test_redis_failures_degrade(caplog):
    lexicon = Lexicon(BrokenRedis(), prefix="testparley:broken")

    assert lexicon.add("cat", "feline", "A cat sat.") is False
    assert lexicon.get_entry("cat") is None
    assert lexicon.get_examples("cat") == []
    assert lexicon.words() == []
    assert len(lexicon) == 0
    assert "Failed to" in caplog.text


def test_entry_trailing_empty_examples_trimmed():
    assert DictionaryEntry("cat", "feline", ("A cat sat.", "")).examples == ("A cat sat.",)
    assert DictionaryEntry("cat", "feline", ("", "")).examples == ()


def test_entry_keeps_example_columns():
    entry = DictionaryEntry("cat", "feline", ("", "Cats purr."))

    assert entry.to_row() == {"definition": "feline", "example1": "", "example2": "Cats purr."}
    assert DictionaryEntry.from_row("cat", entry.to_row()) == entry


def test_second_example_only(store):
    store.add("cat", "feline", "", "Cats purr.")

    assert store.get_entry("cat").examples == ("", "Cats purr.")
    assert store.get_examples("cat") == ["Cats purr."]
