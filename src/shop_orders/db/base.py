"""
shop_orders.db.base

SQLAlchemy declarative base with deterministic constraint names.

Responsibilities:
- Share one `MetaData` between the ORM models, `init_db` and Alembic.
- Name indexes and foreign keys predictably so migrations can refer to them.
"""

from __future__ import annotations

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

NAMING_CONVENTION = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    metadata = MetaData(naming_convention=NAMING_CONVENTION)


# --- Module Notes -----------------------------------------------------------
# Alembic's initial revision spells out the same constraint names by hand.
