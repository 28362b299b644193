# app/models/transaction.py
import enum
from sqlalchemy import BigInteger, Column, DateTime, Enum, Numeric, String
from app.core.database import Base
from app.models.category import BigIntegerPK

class TransactionType(str, enum.Enum):
    deposit = "deposit"
    withdraw = "withdraw"

class Transaction(Base):
    __tablename__ = "transactions"

    id = Column(BigIntegerPK, primary_key=True, autoincrement=True)
    user_id = Column(String(length=160), nullable=False, index=True)
    # Not a foreign key: the category is never loaded from here
    category_id = Column(BigInteger, nullable=False)
    created_at = Column(DateTime, nullable=False)
    amount = Column(Numeric(18, 2), nullable=False)
    paid_or_received_at = Column(DateTime, nullable=False, index=True)
    title = Column(String(length=80), nullable=False)
    type = Column(Enum(TransactionType), default=TransactionType.withdraw, nullable=False)

    def __repr__(self):
        return f"<Transaction amount={self.amount} date={self.paid_or_received_at} user_id={self.user_id}>"
