# Roadmap API
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.deps import get_db
from app.agents.llm.base import LLMClient
from app.agents.llm.client import get_llm_client
from app.agents.schemas import RoadmapRequest
from app.agents.workflow import generate_roadmap
from app.roadmaps import store

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api")


@router.get("/roadmaps")
def list_roadmaps(db: Session = Depends(get_db)):
    try:
        return [store.to_summary(rm) for rm in store.list_roadmaps(db)]
    except SQLAlchemyError:
        logger.exception("Failed to list roadmaps")
        return JSONResponse(status_code=500, content={"error": "FAILED_TO_LIST"})


@router.delete("/roadmap/{roadmap_id}")
def delete_roadmap(roadmap_id: str, db: Session = Depends(get_db)):
    try:
        store.delete_roadmap(db, roadmap_id)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to delete roadmap %s", roadmap_id)
        return JSONResponse(status_code=500, content={"error": "FAILED_TO_DELETE"})
    return {"success": True}


@router.post("/roadmap")
def create_roadmap(
    body: RoadmapRequest,
    db: Session = Depends(get_db),
    llm: LLMClient = Depends(get_llm_client),
):
    goal = body.goal
    if not goal:
        return JSONResponse(status_code=400, content={"error": "Goal is required"})

    key = store.goal_key(goal)
    try:
        # 1. cache first
        cached = store.get_cached(db, key)
        if cached is not None:
            return cached

        # 2. model call + recovery; BadLlmJson / LLMError go to the app handlers
        doc = generate_roadmap(goal, llm).model_dump()

        store.save(db, key, goal, doc)
        return doc
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Roadmap storage error for goal key %s", key)
        return JSONResponse(
            status_code=500,
            content={"error": "INTERNAL_ERROR", "message": "Failed to generate roadmap"},
        )
