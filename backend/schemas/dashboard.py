from typing import List
from pydantic import BaseModel

from schemas.sale import SaleOut
from schemas.customer import CustomerOut


# Owner view: today's takings and what is still outstanding from them
class OwnerDashboard(BaseModel):
    today_sales: List[SaleOut]
    total_cash_in: float
    total_due: float


# Employee view: today's sales and every customer with an open balance
class EmployeeDashboard(BaseModel):
    today_sales: List[SaleOut]
    unpaid_customers: List[CustomerOut]


# Colour palette consumed by the frontend
class ThemeOut(BaseModel):
    text: str
    background: str
    primary: str
    secondary: str
    accent: str
