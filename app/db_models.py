"""
SQLAlchemy ORM models for the counter database.
"""

from sqlalchemy import Column, Integer, String

from app.database import Base


class Counter(Base):
    """
    Named visit counter.

    ``num`` is never negative: it only moves by +1 on increment or is
    overwritten through the authenticated set endpoint, which rejects
    negative values before reaching the store.
    """

    __tablename__ = "tb_count"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, unique=True, nullable=False, index=True)
    num = Column(Integer, nullable=False, default=0, server_default="0")
