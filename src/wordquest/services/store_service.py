"""Durable key-value store backed by a single SQLAlchemy table."""
import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from wordquest import monitoring
from wordquest.models.models import StoreEntry

logger = logging.getLogger(__name__)


class StoreService:
    """Whole-value reads and writes of string blobs by key.

    Storage errors are logged and reported as ``None``/``False``; they never
    propagate to the game state machines.
    """

    def __init__(self, db: Session):
        """Initialize the service with a database session."""
        self.db = db

    def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None when the key is absent or unreadable."""
        try:
            entry = self.db.query(StoreEntry).filter(StoreEntry.key == key).first()
        except SQLAlchemyError as e:
            logger.error(f"Error reading key {key}: {e}")
            monitoring.store_errors.labels(operation_type="get").inc()
            self.db.rollback()
            return None
        return entry.value if entry else None

    def set(self, key: str, value: str) -> bool:
        """Overwrite the value stored under key."""
        try:
            entry = self.db.query(StoreEntry).filter(StoreEntry.key == key).first()
            if entry:
                entry.value = value
            else:
                self.db.add(StoreEntry(key=key, value=value))
            self.db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Error writing key {key}: {e}")
            monitoring.store_errors.labels(operation_type="set").inc()
            self.db.rollback()
            return False
        logger.debug(f"Stored {len(value)} characters under {key}")
        return True

    def delete(self, key: str) -> bool:
        """Remove key; returns True when the store no longer holds it."""
        try:
            self.db.query(StoreEntry).filter(StoreEntry.key == key).delete()
            self.db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Error deleting key {key}: {e}")
            monitoring.store_errors.labels(operation_type="delete").inc()
            self.db.rollback()
            return False
        return True

    def has(self, key: str) -> bool:
        return self.get(key) is not None
