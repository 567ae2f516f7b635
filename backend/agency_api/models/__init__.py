"""ORM Models - SQLAlchemy declarative models for the customer and agents tables.

Invariants:
    - All models inherit from Base (db/base.py)
    - All models imported here so metadata is complete before create_all or Alembic runs
"""

from agency_api.models.agent import Agent  # noqa: F401
from agency_api.models.customer import Customer  # noqa: F401
