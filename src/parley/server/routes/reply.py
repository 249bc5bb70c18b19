"""
Pool reply route: /api/reply
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from parley.core.pool import AgentPool, plurality
from parley.server.deps import get_pool


router = APIRouter(prefix="/api/reply", tags=["reply"])


class ReplyRequest(BaseModel):
    text: str
    record: bool = True  # record the turn with every agent
    history: bool = False


@router.post("")
async def create_reply(req: ReplyRequest, pool: AgentPool = Depends(get_pool)):
    """Ask every agent, return the plurality reply and all candidates."""
    candidates = pool.candidates(req.text, req.history)
    best = plurality(candidates)

    if req.record:
        pool.record(req.text, best)

    return {
        "reply": best,
        "candidates": [
            {"agent": agent.name, "reply": reply}
            for agent, reply in zip(pool, candidates)
        ],
    }
