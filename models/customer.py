# models/customer.py
from sqlalchemy import Column, BigInteger, Integer, String, Text, Numeric, DateTime, Index, func
from database.base import Base

# BIGINT identity on postgres; sqlite only autoincrements INTEGER primary keys
_Id = BigInteger().with_variant(Integer, "sqlite")


class Customer(Base):
    """Reported scam payment account (one row per report, duplicates allowed)."""
    __tablename__ = "customers"

    id = Column(_Id, primary_key=True, autoincrement=True)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    phone_number = Column(String, nullable=True)     # not filled by the form
    account_number = Column(String, nullable=False)  # bank / e-wallet / PromptPay
    created_by = Column(Text, nullable=True)         # free-text note, not a user
    amount = Column(Numeric(14, 2), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    __table_args__ = (
        Index("idx_customers_created", created_at.desc()),
    )


__all__ = ["Customer"]
