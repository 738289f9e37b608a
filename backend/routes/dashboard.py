# backend/routes/dashboard.py
from datetime import datetime, date, time

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database import get_db
from models.sale import Sale
from models.customer import Customer
from schemas.dashboard import OwnerDashboard, EmployeeDashboard, ThemeOut

router = APIRouter(tags=["Dashboard"])

# Palette served to the frontend, it maps these onto CSS variables
THEME = {
    "text": "#0e1a05",
    "background": "#e8f0e0",
    "primary": "#8bd832",
    "secondary": "#99b2d0",
    "accent": "#67c2e2",
}


def _today_start() -> datetime:
    return datetime.combine(date.today(), time.min)


@router.get("/dashboard/owner", response_model=OwnerDashboard)
def owner_dashboard(db: Session = Depends(get_db)):
    today_sales = (
        db.query(Sale)
        .filter(Sale.sale_time >= _today_start())
        .order_by(Sale.sale_time.asc(), Sale.id.asc())
        .all()
    )

    total_cash_in = sum(s.total_paid or 0 for s in today_sales)
    total_due = sum((s.total_amount or 0) - (s.total_paid or 0) for s in today_sales)

    return {
        "today_sales": today_sales,
        "total_cash_in": total_cash_in,
        "total_due": total_due,
    }


@router.get("/dashboard/employee", response_model=EmployeeDashboard)
def employee_dashboard(db: Session = Depends(get_db)):
    today_sales = (
        db.query(Sale)
        .filter(Sale.sale_time >= _today_start())
        .order_by(Sale.sale_time.desc(), Sale.id.desc())
        .all()
    )
    unpaid_customers = db.query(Customer).filter(Customer.total_due > 0).order_by(Customer.id.asc()).all()
    return {"today_sales": today_sales, "unpaid_customers": unpaid_customers}


@router.get("/theme", response_model=ThemeOut)
def get_theme():
    return THEME
