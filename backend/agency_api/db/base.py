"""SQLAlchemy Declarative Base - shared base class for all ORM models.

Invariants:
    - All models inherit from Base
    - Base is the single source of truth for table metadata
    - to_record() keys are database column names, not Python attribute names
"""

from sqlalchemy import inspect
from sqlalchemy.orm import DeclarativeBase

from agency_api.core.domain_types import Record


class Base(DeclarativeBase):
    """Base class for all Agency ORM models."""

    def to_record(self) -> Record:
        """Flat column-name -> value mapping, in table column order."""
        mapper = inspect(type(self))
        return {
            column.name: getattr(self, mapper.get_property_by_column(column).key)
            for column in mapper.local_table.columns
        }
