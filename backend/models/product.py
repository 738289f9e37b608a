# backend/models/product.py
from sqlalchemy import Column, Integer, String, Float, Boolean
from database import Base

# Model Product
# A single catalogue entry offered at the till.
# Carries the bilingual display names, packaging/unit information,
# the base selling price and the current stock level.
class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name_en = Column(String, nullable=False, index=True)
    name_bn = Column(String, nullable=True)

    # Packed goods sell per pack, loose goods per weight unit.
    is_packed = Column(Boolean, nullable=False, default=False)
    unit_type = Column(String, nullable=False, default="KG")

    base_price = Column(Float, nullable=False, default=0)

    # Not constrained: a sale may push stock below zero.
    stock_quantity = Column(Float, nullable=False, default=0)

    # Products explicitly marked unsellable are hidden from checkout.
    sellable = Column(Boolean, nullable=False, default=True)

    image_url = Column(String, nullable=True)
