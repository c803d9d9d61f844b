"""
Chat Router
Entry points for the platform adapter: inbound messages, admin purges and
reaction feedback.
"""

import logging
import time
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel, Field

from chatlearn.services.engine import ChatEngine
from chatlearn.services.records import FeedbackRecord
from chatlearn.utils.text import sanitize_mentions

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])


class InboundRequest(BaseModel):
    author: str
    content: str
    timestamp: Optional[int] = None
    reply_to: Optional[str] = None
    seed: Optional[str] = None


class PurgeRequest(BaseModel):
    phrase: str


class FeedbackRequest(BaseModel):
    samples: List[FeedbackRecord] = Field(default_factory=list)


def get_engine(request: Request) -> ChatEngine:
    engine = getattr(request.app.state, "chat_engine", None)
    if engine is None:
        raise HTTPException(status_code=503, detail="chat engine not initialized")
    return engine


@router.post("/messages")
def inbound_message(req: InboundRequest, request: Request):
    engine = get_engine(request)
    timestamp = req.timestamp if req.timestamp is not None else int(time.time() * 1000)
    result = engine.on_inbound_text(
        req.author,
        req.content,
        timestamp,
        reply_to=req.reply_to,
        seed=req.seed,
    )
    return {
        "ok": True,
        "data": {
            "text": result.text,
            "sanitized": sanitize_mentions(result.text),
            "generated": result.generated,
            "persisted": result.persisted,
        },
    }


@router.post("/purge")
def purge_phrase(req: PurgeRequest, request: Request):
    engine = get_engine(request)
    result = engine.on_admin_purge(req.phrase)
    if not result.ok:
        raise HTTPException(status_code=400, detail=result.error)
    return {
        "ok": True,
        "data": {
            "phrase": result.phrase,
            "removed": result.report.to_dict(),
            "persisted": result.persisted,
        },
    }


@router.post("/feedback")
def record_feedback(req: FeedbackRequest, request: Request):
    engine = get_engine(request)
    result = engine.on_feedback_sample(req.samples)
    return {"ok": True, "data": {"recorded": result.recorded, "persisted": result.persisted}}


@router.get("/status")
def chat_status(request: Request):
    engine = get_engine(request)
    return {"ok": True, "data": engine.status()}
