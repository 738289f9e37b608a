# backend/schemas/sale.py
from datetime import datetime, date
from typing import List, Optional, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from schemas.product import ProductOut
from schemas.customer import CustomerOut

# Identifiers arrive from the till as numbers or strings; malformed ones are
# treated as "no reference" rather than rejected.
RecordRef = Optional[Union[int, str]]

# How the customer settled the bill at the till
PaymentType = Literal["paid", "half", "due"]


# ---- Checkout (POST /sell) ----

# A single cart line as sent by the checkout screen
class CartLine(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: RecordRef = Field(None, alias="_id")
    quantity: Optional[float] = None
    unit: Optional[str] = None
    unit_type: Optional[str] = None
    # Price typed in by the cashier, overrides the catalogue price
    employee_price: Optional[float] = Field(None, alias="employeePrice")
    base_price: Optional[float] = None
    total: Optional[float] = None


# Customer block of a checkout; either an existing id or new contact details
class SellCustomer(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: RecordRef = Field(None, alias="_id")
    name: Optional[str] = None
    number: Optional[str] = None
    half_amount: Optional[float] = Field(None, alias="halfAmount")


class SellRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    cart: List[CartLine] = []
    customer: Optional[SellCustomer] = None
    payment_type: PaymentType = Field("paid", alias="paymentType")
    total: Optional[float] = 0


class SellResponse(BaseModel):
    message: str
    sale_id: int
    customer_id: Optional[int] = None


# ---- Direct sale entry (POST /sales) ----

class SaleItemCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: RecordRef = Field(None, alias="productId")
    quantity_sold: float = 0
    unit_price_at_sale: float = 0
    final_line_price: float = 0


class SaleCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    items: List[SaleItemCreate] = []
    total_amount: Optional[float] = 0
    total_paid: Optional[float] = 0
    payment_status: Optional[str] = "Paid"
    customer_id: RecordRef = Field(None, alias="customerId")


class SaleRecordedResponse(BaseModel):
    message: str
    sale_id: int


# ---- Read models ----

class SaleItemOut(BaseModel):
    id: int
    sale_id: int
    product_id: Optional[int] = None
    quantity_sold: float
    unit: Optional[str] = None
    unit_price_at_sale: float
    final_line_price: float

    model_config = ConfigDict(from_attributes=True)


class SaleOut(BaseModel):
    id: int
    sale_time: datetime
    total_amount: float
    total_paid: float
    payment_status: str
    customer_id: Optional[int] = None

    model_config = ConfigDict(from_attributes=True)


# Sale together with its line items
class SaleDetail(SaleOut):
    items: List[SaleItemOut] = []


# Sale joined with the customer that owns it
class SaleWithCustomer(SaleOut):
    customer: Optional[CustomerOut] = None


class SaleItemWithProduct(SaleItemOut):
    product: ProductOut


# Everything known about one sale: header, lines with products, customer
class SaleFullDetails(BaseModel):
    sale: SaleOut
    items: List[SaleItemWithProduct]
    customer: Optional[CustomerOut] = None


# One row of the per-day sales summary
class DailySalesSummary(BaseModel):
    date: date
    total_amount: float
    total_paid: float
    order_count: int
