from pydantic import BaseModel, ConfigDict
from typing import Optional


# Schema for displaying customer details
class CustomerOut(BaseModel):
    id: int
    name: str
    phone: Optional[str] = None
    total_due: float = 0

    model_config = ConfigDict(from_attributes=True)


# Schema for registering a customer; a missing due is stored as 0
class CustomerCreate(BaseModel):
    name: str
    phone: Optional[str] = ""
    total_due: Optional[float] = 0


# Schema for updating customer information
class CustomerUpdate(BaseModel):
    name: Optional[str] = None
    phone: Optional[str] = None
    total_due: Optional[float] = None


# Schema for overwriting the amount a customer owes
class CustomerDueUpdate(BaseModel):
    new_due: Optional[float] = None
