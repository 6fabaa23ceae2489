from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from farmbooks.services.record_store import RecordStore, SqlRecordStore
from .session import SessionLocal


def get_db() -> Generator[Session, None, None]:
    """
    Dependency that provides a database session.
    
    Usage:
        @app.get("/")
        def endpoint(db: Session = Depends(get_db)):
            ...
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_record_store(db: Session = Depends(get_db)) -> RecordStore:
    """Aggregate query source for reports, bound to the request session."""
    return SqlRecordStore(db)
