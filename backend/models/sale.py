from sqlalchemy import Column, Integer, String, Float, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from database import Base


class Sale(Base):
    __tablename__ = "sales"

    id = Column(Integer, primary_key=True, index=True)
    # Local wall-clock time, dashboards compare it against local midnight
    sale_time = Column(DateTime, nullable=False, index=True)
    total_amount = Column(Float, nullable=False, default=0)
    total_paid = Column(Float, nullable=False, default=0)
    # "Paid", "Half Paid" or "Unpaid"
    payment_status = Column(String, nullable=False, default="Paid")
    # Plain reference, not a foreign key: a sale may name a customer that does not exist
    customer_id = Column(Integer, nullable=True, index=True)

    items = relationship("SaleItem", back_populates="sale", cascade="all, delete-orphan", order_by="SaleItem.id")
    customer = relationship("Customer", primaryjoin="foreign(Sale.customer_id) == Customer.id")


class SaleItem(Base):
    __tablename__ = "sale_items"

    id = Column(Integer, primary_key=True, index=True)
    sale_id = Column(Integer, ForeignKey("sales.id"), nullable=False, index=True)
    # Plain reference: lines may point at unknown or deleted products
    product_id = Column(Integer, nullable=True, index=True)
    quantity_sold = Column(Float, nullable=False, default=0)
    unit = Column(String, nullable=True)
    # Price snapshot at the moment of sale
    unit_price_at_sale = Column(Float, nullable=False, default=0)
    final_line_price = Column(Float, nullable=False, default=0)

    sale = relationship("Sale", back_populates="items")
    product = relationship("Product", primaryjoin="foreign(SaleItem.product_id) == Product.id")
