# app/models/category.py
from sqlalchemy import BigInteger, Column, Integer, String, Text
from app.core.database import Base

# SQLite only autoincrements INTEGER primary keys
BigIntegerPK = BigInteger().with_variant(Integer, "sqlite")

class Category(Base):
    __tablename__ = "categories"

    id = Column(BigIntegerPK, primary_key=True, autoincrement=True)
    user_id = Column(String(length=160), nullable=False, index=True)
    title = Column(String(length=80), nullable=False)
    description = Column(Text, nullable=True)

    def __repr__(self):
        return f"<Category title={self.title} user_id={self.user_id}>"
