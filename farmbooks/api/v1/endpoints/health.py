from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from farmbooks.db.dependencies import get_db

router = APIRouter()


@router.get("/ready", response_model=dict)
def readiness_check(db: Session = Depends(get_db)):
    """Readiness probe; checks the database answers."""
    try:
        db.execute(text("SELECT 1"))
        return {"status": "ready", "database": "healthy"}
    except SQLAlchemyError as e:
        return {"status": "not_ready", "database": f"unhealthy: {str(e)}"}


@router.get("/live", response_model=dict)
def liveness_check():
    """Liveness probe."""
    return {"status": "alive"}
