"""
Unit tests using FastAPI TestClient with an in-memory agent pool.
"""

import pytest
from fastapi.testclient import TestClient

from parley.core.agent import Agent
from parley.core.lexicon import InMemoryLexicon
from parley.core.pool import AgentPool
from parley.server.deps import get_pool
from parley.server.main import app


@pytest.fixture
def pool(stopwords):
    first = InMemoryLexicon()
    first.add("cat", "A small feline.", "A cat sat.", "Cats are pets.")
    second = InMemoryLexicon()
    second.add("cat", "A feline.", "Cats purr.")

    return AgentPool([
        Agent("Brain1", first, stopwords),
        Agent("Brain2", second, stopwords),
        Agent("Brain3", first, stopwords),
    ])


@pytest.fixture
def client(pool):
    app.dependency_overrides[get_pool] = lambda: pool
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_root(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["name"] == "parley API"


class TestReply:
    def test_voted_reply(self, client):
        r = client.post("/api/reply", json={"text": "the cat"})
        assert r.status_code == 200
        data = r.json()
        assert data["reply"] == "Let's talk more about cat. A cat sat."
        assert [c["agent"] for c in data["candidates"]] == ["Brain1", "Brain2", "Brain3"]
        assert data["candidates"][1]["reply"] == "Let's talk more about cat. Cats purr."

    def test_reply_records_turn(self, client, pool):
        client.post("/api/reply", json={"text": "the cat"})
        client.post("/api/reply", json={"text": "the cat", "record": False})

        for agent in pool:
            assert len(agent.memory) == 1
            assert agent.frequency.importance_of("cat") == 1

    def test_reply_fallbacks(self, client):
        assert client.post("/api/reply", json={"text": ""}).json()["reply"] == "I don't understand."
        assert client.post("/api/reply", json={"text": "the"}).json()["reply"] == (
            "I don't have enough information."
        )

    def test_reply_from_history(self, client):
        for name in ["Brain1", "Brain2"]:
            client.post(f"/api/agents/{name}/ratings", json={
                "user_input": "I love cats", "bot_response": "Cats rule", "rating": 5,
            })
            client.post(f"/api/agents/{name}/ratings", json={
                "user_input": "I love cats", "bot_response": "Meh", "rating": 1,
            })

        r = client.post("/api/reply", json={"text": "cats", "history": True, "record": False})
        assert r.json()["reply"] == "Cats rule"

    def test_missing_text(self, client):
        r = client.post("/api/reply", json={})
        assert r.status_code == 422


class TestAgents:
    def test_list_agents(self, client):
        r = client.get("/api/agents")
        assert r.status_code == 200
        agents = r.json()["agents"]
        assert [a["name"] for a in agents] == ["Brain1", "Brain2", "Brain3"]
        assert agents[0]["words"] == 1

    def test_agent_reply(self, client):
        r = client.post("/api/agents/Brain2/reply", json={"text": "cat"})
        assert r.status_code == 200
        assert r.json() == {"agent": "Brain2", "reply": "Let's talk more about cat. Cats purr."}

    def test_unknown_agent(self, client):
        r = client.post("/api/agents/nobody/reply", json={"text": "cat"})
        assert r.status_code == 404
        assert client.get("/api/agents/nobody/memory").status_code == 404

    def test_turns_and_memory(self, client):
        r = client.post("/api/agents/Brain1/turns", json={"user_input": "cat cat", "bot_response": "ok"})
        assert r.status_code == 200
        assert r.json()["memory_size"] == 1

        r = client.get("/api/agents/Brain1/memory")
        data = r.json()
        assert data["limit"] == 100
        assert data["turns"] == [{"user_input": "cat cat", "bot_response": "ok"}]
        assert data["top_words"] == [{"word": "cat", "count": 2}]

    def test_word(self, client):
        client.post("/api/agents/Brain1/turns", json={"user_input": "cat", "bot_response": "ok"})

        r = client.get("/api/agents/Brain1/words/cat")
        assert r.json() == {
            "word": "cat",
            "definition": "A small feline.",
            "examples": ["A cat sat.", "Cats are pets."],
            "importance": 1,
            "stopword": False,
        }

    def test_word_not_found(self, client):
        r = client.get("/api/agents/Brain1/words/zebra")
        assert r.json()["definition"] == "Definition not found."
        assert r.json()["examples"] == []

    def test_rating(self, client):
        r = client.post("/api/agents/Brain3/ratings", json={
            "user_input": "hi", "bot_response": "hello", "rating": 99,
        })
        assert r.status_code == 200
        assert r.json()["ratings"] == 1
