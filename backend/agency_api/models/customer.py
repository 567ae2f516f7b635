"""Customer ORM - maps the `customer` table.

Invariants:
    - CUST_CODE is the primary key; uniqueness is enforced by the database
    - Column names match the legacy schema (upper case); attributes are snake_case
    - AGENT_CODE references agents.AGENT_CODE but nothing in the service enforces it
    - GRADE is text here and in the migration; pre-existing databases may hold it as
      DECIMAL, which the read schema converts back to text
"""

from sqlalchemy import ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from agency_api.db.base import Base


class Customer(Base):
    """One customer row."""
    __tablename__ = "customer"

    cust_code: Mapped[str] = mapped_column("CUST_CODE", String(6), primary_key=True)
    cust_name: Mapped[str] = mapped_column("CUST_NAME", String(40), nullable=False)
    cust_city: Mapped[str | None] = mapped_column("CUST_CITY", String(35))
    working_area: Mapped[str] = mapped_column("WORKING_AREA", String(35), nullable=False)
    cust_country: Mapped[str] = mapped_column("CUST_COUNTRY", String(20), nullable=False)
    grade: Mapped[str | None] = mapped_column("GRADE", String(10))
    opening_amt: Mapped[float] = mapped_column(
        "OPENING_AMT", Numeric(12, 2, asdecimal=False), nullable=False,
    )
    receive_amt: Mapped[float] = mapped_column(
        "RECEIVE_AMT", Numeric(12, 2, asdecimal=False), nullable=False,
    )
    payment_amt: Mapped[float] = mapped_column(
        "PAYMENT_AMT", Numeric(12, 2, asdecimal=False), nullable=False,
    )
    outstanding_amt: Mapped[float] = mapped_column(
        "OUTSTANDING_AMT", Numeric(12, 2, asdecimal=False), nullable=False,
    )
    phone_no: Mapped[str] = mapped_column("PHONE_NO", String(17), nullable=False)
    agent_code: Mapped[str] = mapped_column(
        "AGENT_CODE", String(6), ForeignKey("agents.AGENT_CODE"), nullable=False,
    )
