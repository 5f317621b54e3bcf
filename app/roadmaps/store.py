## Roadmap cache (get/set by goal key)
import re
from datetime import datetime, timezone
from typing import Any

from sqlalchemy.orm import Session

from app.db.models.roadmap import Roadmap


def goal_key(goal: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", goal.lower())


def get_cached(db: Session, key: str) -> dict[str, Any] | None:
    rm = db.get(Roadmap, key)
    return rm.data if rm else None


def save(db: Session, key: str, goal: str, data: dict[str, Any]) -> Roadmap:
    """Insert or overwrite the cached document for key."""
    rm = db.get(Roadmap, key)
    now = datetime.now(timezone.utc)
    if rm is None:
        rm = Roadmap(id=key, goal=goal, data=data, created_at=now)
        db.add(rm)
    else:
        rm.goal = goal
        rm.data = data
        rm.created_at = now
    db.commit()
    return rm


def list_roadmaps(db: Session) -> list[Roadmap]:
    return db.query(Roadmap).order_by(Roadmap.created_at.desc()).all()


def delete_roadmap(db: Session, key: str) -> None:
    db.query(Roadmap).filter(Roadmap.id == key).delete()
    db.commit()


def to_summary(rm: Roadmap) -> dict[str, Any]:
    created = rm.created_at
    if created.tzinfo is None:
        # SQLite drops tzinfo on the way back
        created = created.replace(tzinfo=timezone.utc)
    return {
        "id": rm.id,
        "goal": rm.goal,
        "createdAt": int(created.timestamp() * 1000),
        "data": rm.data,
    }
