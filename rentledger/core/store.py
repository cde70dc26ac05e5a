"""
Owner-scoped record store over a SQLAlchemy session.

Routes never query another owner's rows: every read filters on owner_id and
every insert stamps it. Writes are flushed inside transaction(), which
commits once at the end so multi-row changes (a tenant plus its unit's
status) land together or not at all.
"""
import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from rentledger.models.bill import Bill
from rentledger.models.building import Building
from rentledger.models.tenant import Tenant
from rentledger.models.unit import Unit

logger = logging.getLogger(__name__)

MODELS = {
    "buildings": Building,
    "units": Unit,
    "tenants": Tenant,
    "bills": Bill,
}


class StoreError(Exception):
    """A read or write against the database failed."""


class RecordStore:
    def __init__(self, db: Session, owner_id: str):
        self.db = db
        self.owner_id = owner_id

    def _model(self, kind: str):
        try:
            return MODELS[kind]
        except KeyError:
            raise ValueError(f"Unknown entity kind: {kind}")

    def query(self, kind: str):
        """Base query for one entity kind, already scoped to the owner."""
        model = self._model(kind)
        return self.db.query(model).filter(model.owner_id == self.owner_id)

    def find(self, kind: str, *order_by, **filters) -> List[Any]:
        model = self._model(kind)
        q = self.query(kind)
        for field, value in filters.items():
            if value is not None:
                q = q.filter(getattr(model, field) == value)
        if order_by:
            q = q.order_by(*order_by)
        return self.all(q, kind)

    def get(self, kind: str, record_id: str) -> Optional[Any]:
        model = self._model(kind)
        return self.first(self.query(kind).filter(model.id == record_id), kind)

    # Route-built queries (joins, eager loads) run through these two so a
    # database failure always surfaces as StoreError
    def all(self, q, kind: str) -> List[Any]:
        try:
            return q.all()
        except SQLAlchemyError as exc:
            logger.exception("loading %s failed", kind)
            raise StoreError(f"Could not load {kind}") from exc

    def first(self, q, kind: str) -> Optional[Any]:
        try:
            return q.first()
        except SQLAlchemyError as exc:
            logger.exception("loading %s failed", kind)
            raise StoreError(f"Could not load {kind}") from exc

    def insert(self, kind: str, values: Dict[str, Any]) -> Any:
        record = self._model(kind)(**values, owner_id=self.owner_id)
        self.db.add(record)
        self.db.flush()
        return record

    def update(self, kind: str, record_id: str, values: Dict[str, Any]) -> Optional[Any]:
        record = self.get(kind, record_id)
        if record is None:
            return None
        for k, v in values.items():
            setattr(record, k, v)
        self.db.flush()
        return record

    def delete(self, kind: str, record_id: str) -> bool:
        record = self.get(kind, record_id)
        if record is None:
            return False
        self.db.delete(record)
        self.db.flush()
        return True

    @contextmanager
    def transaction(self) -> Iterator["RecordStore"]:
        try:
            yield self
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("transaction rolled back")
            raise StoreError("The record store rejected the change") from exc
        except Exception:
            self.db.rollback()
            raise
