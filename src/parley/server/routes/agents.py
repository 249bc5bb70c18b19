"""
Agent routes: /api/agents
"""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from parley.core.agent import Agent
from parley.core.pool import AgentPool
from parley.server.deps import get_pool


router = APIRouter(prefix="/api/agents", tags=["agents"])

TOP_WORDS = 10


class AgentReplyRequest(BaseModel):
    text: str
    history: bool = False


class TurnRequest(BaseModel):
    user_input: str
    bot_response: str


class RatingRequest(BaseModel):
    user_input: str
    bot_response: str
    rating: int


def _get_agent(pool: AgentPool, name: str) -> Agent:
    agent = pool.get(name)
    if agent is None:
        raise HTTPException(status_code=404, detail="Agent not found")
    return agent


@router.get("")
async def list_agents(pool: AgentPool = Depends(get_pool)):
    """List all agents in the pool."""
    return {
        "agents": [
            {"name": a.name, "turns": len(a.memory), "ratings": len(a.ratings), "words": len(a.lexicon)}
            for a in pool
        ]
    }


@router.post("/{name}/reply")
async def agent_reply(name: str, req: AgentReplyRequest, pool: AgentPool = Depends(get_pool)):
    """One agent's reply, without voting or recording."""
    agent = _get_agent(pool, name)
    if req.history:
        reply = agent.generate_reply_from_history(req.text)
    else:
        reply = agent.generate_reply(req.text)
    return {"agent": name, "reply": reply}


@router.post("/{name}/turns")
async def record_turn(name: str, req: TurnRequest, pool: AgentPool = Depends(get_pool)):
    """Record a conversation turn; updates word frequencies."""
    agent = _get_agent(pool, name)
    turn = agent.record_turn(req.user_input, req.bot_response)
    return {"agent": name, "turn": turn.to_dict(), "memory_size": len(agent.memory)}


@router.post("/{name}/ratings")
async def rate(name: str, req: RatingRequest, pool: AgentPool = Depends(get_pool)):
    """Store a rated response for history-based replies."""
    agent = _get_agent(pool, name)
    agent.rate(req.user_input, req.bot_response, req.rating)
    return {"agent": name, "ratings": len(agent.ratings)}


@router.get("/{name}/memory")
async def get_memory(name: str, pool: AgentPool = Depends(get_pool)):
    """Conversation turns, oldest first, and the most frequent words."""
    agent = _get_agent(pool, name)
    return {
        "agent": name,
        "limit": agent.memory.limit,
        "turns": [t.to_dict() for t in agent.memory.turns],
        "top_words": [
            {"word": w, "count": c} for w, c in agent.frequency.most_common(TOP_WORDS)
        ],
    }


@router.get("/{name}/words/{word}")
async def get_word(name: str, word: str, pool: AgentPool = Depends(get_pool)):
    """Definition, examples and current importance of a word."""
    agent = _get_agent(pool, name)
    return {
        "word": word,
        "definition": agent.define(word),
        "examples": agent.lexicon.get_examples(word),
        "importance": agent.frequency.importance_of(word),
        "stopword": agent.frequency.is_stopword(word),
    }
