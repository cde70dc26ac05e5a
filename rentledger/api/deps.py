from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from rentledger.core.auth import current_owner_id
from rentledger.core.database import SessionLocal
from rentledger.core.store import RecordStore


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_store(
    db: Session = Depends(get_db),
    owner_id: str = Depends(current_owner_id),
) -> RecordStore:
    """Record store scoped to the authenticated owner."""
    return RecordStore(db, owner_id)
