"""
Counter storage.

Every mutation is a single upsert statement so concurrent requests for the
same counter name never lose an update.
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.db_models import Counter

logger = logging.getLogger(__name__)


def _insert(db: Session):
    """Return the dialect-specific INSERT construct supporting ON CONFLICT."""
    if db.get_bind().dialect.name == "postgresql":
        return postgresql.insert(Counter)
    return sqlite.insert(Counter)


def increment(db: Session, name: str) -> int:
    """
    Atomically add one to counter ``name`` and return the new value.

    A missing counter is created with value 1. Errors from the write
    propagate; if the write succeeded but the returned value cannot be
    read, 0 is returned instead.
    """
    logger.debug(f"incrementing counter for {name}")

    stmt = _insert(db).values(name=name, num=1)
    stmt = stmt.on_conflict_do_update(
        index_elements=[Counter.name],
        set_={"num": Counter.num + 1},
    ).returning(Counter.num)

    result = db.execute(stmt)
    try:
        count = int(result.scalar_one())
    except SQLAlchemyError as e:
        logger.warning(f"failed to read counter {name} after increment: {e}")
        count = 0
    finally:
        # SQLite refuses to commit while the RETURNING cursor is open
        result.close()
    db.commit()

    logger.debug(f"counter {name} now at {count}")
    return count


def set_count(db: Session, name: str, value: int) -> None:
    """
    Create or overwrite counter ``name`` with ``value``.

    The caller must ensure ``value`` is non-negative.
    """
    stmt = _insert(db).values(name=name, num=value)
    stmt = stmt.on_conflict_do_update(
        index_elements=[Counter.name],
        set_={"num": stmt.excluded.num},
    )
    db.execute(stmt)
    db.commit()


def get_count(db: Session, name: str) -> Optional[int]:
    """Current value of counter ``name``, or None if it was never created."""
    return db.execute(select(Counter.num).where(Counter.name == name)).scalar_one_or_none()
