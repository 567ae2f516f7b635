"""Agent ORM - maps the `agents` table.

Invariants:
    - AGENT_CODE is the primary key; duplicates surface as IntegrityError
"""

from sqlalchemy import Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from agency_api.db.base import Base


class Agent(Base):
    """One sales agent row."""
    __tablename__ = "agents"

    agent_code: Mapped[str] = mapped_column("AGENT_CODE", String(6), primary_key=True)
    agent_name: Mapped[str | None] = mapped_column("AGENT_NAME", String(40))
    working_area: Mapped[str | None] = mapped_column("WORKING_AREA", String(35))
    commission: Mapped[float | None] = mapped_column(
        "COMMISSION", Numeric(10, 2, asdecimal=False),
    )
    phone_no: Mapped[str | None] = mapped_column("PHONE_NO", String(15))
    country: Mapped[str | None] = mapped_column("COUNTRY", String(25))
