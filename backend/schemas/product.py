# backend/schemas/product.py
from pydantic import BaseModel, ConfigDict
from typing import Optional


# Base configuration for ORM compatibility
class ORMBase(BaseModel):
    model_config = ConfigDict(from_attributes=True)


# Shared base attributes for product entities
class ProductBase(ORMBase):
    name_en: str
    name_bn: Optional[str] = None
    is_packed: bool = False
    unit_type: str = "KG"
    base_price: float = 0
    stock_quantity: float = 0
    sellable: bool = True
    image_url: Optional[str] = None


# Schema for creating a new product
class ProductCreate(ProductBase):
    pass


# Schema for partial product updates
class ProductUpdate(ORMBase):
    """Schema for PUT requests - only the supplied fields are written."""
    name_en: Optional[str] = None
    name_bn: Optional[str] = None
    is_packed: Optional[bool] = None
    unit_type: Optional[str] = None
    base_price: Optional[float] = None
    stock_quantity: Optional[float] = None
    sellable: Optional[bool] = None
    image_url: Optional[str] = None


# Full product representation including ID
class ProductOut(ProductBase):
    id: int
