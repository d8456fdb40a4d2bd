"""Completion model for venue check-ins."""

import time
import uuid

from sqlalchemy import BigInteger, Boolean, Column, String

from stamprally.database import Base


def _new_id() -> str:
    return str(uuid.uuid4())


def _now_ts() -> int:
    return int(time.time())


class Completion(Base):
    """One check-in of a user at a venue.

    Rows are append-only: repeat check-ins for the same user and venue are
    stored as separate records and collapsed on read.
    """

    __tablename__ = "completions"

    id = Column(String, primary_key=True)
    venues_id = Column("venuesId", String, nullable=False)
    user_id = Column("userId", String, nullable=False, index=True)
    complate = Column(Boolean, nullable=False)
    created_at = Column("createdAt", BigInteger, nullable=False)

    def __init__(self, **kwargs):
        # id and createdAt are echoed back, so they must exist before flush
        kwargs.setdefault("id", _new_id())
        kwargs.setdefault("created_at", _now_ts())
        kwargs.setdefault("complate", False)
        super().__init__(**kwargs)
