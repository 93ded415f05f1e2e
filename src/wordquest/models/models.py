"""Database models for the game."""
from sqlalchemy import Column, String, Text

from wordquest.models.base import Base, TimestampMixin


class StoreEntry(Base, TimestampMixin):
    """One key of the durable key-value store holding a JSON blob."""

    __tablename__ = "store_entries"

    key = Column(String, primary_key=True)
    value = Column(Text, nullable=False)
