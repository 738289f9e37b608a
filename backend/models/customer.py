from sqlalchemy import Column, Integer, String, Float
from database import Base


# Represents a shop customer and the running amount they owe
class Customer(Base):
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    phone = Column(String, nullable=True)
    total_due = Column(Float, nullable=False, default=0, index=True)
