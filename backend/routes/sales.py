# backend/routes/sales.py
import logging
from datetime import datetime, date, time, timedelta
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload, contains_eager

from database import get_db
from utils.audit import write_log, client_ip
from utils.ids import to_id, parse_id
from models.product import Product
from models.customer import Customer
from models.sale import Sale, SaleItem
from schemas.sale import (
    SellRequest, SellResponse, SellCustomer,
    SaleCreate, SaleRecordedResponse,
    SaleOut, SaleDetail, SaleWithCustomer, SaleFullDetails, DailySalesSummary,
)

router = APIRouter(tags=["Sales"])
logger = logging.getLogger(__name__)

# Stored status for each way of settling the bill
PAYMENT_STATUS = {
    "paid": "Paid",
    "half": "Half Paid",
    "due": "Unpaid",
}


def _insert_line(
    db: Session,
    sale_id: int,
    product_id: Optional[int],
    quantity: float,
    unit: Optional[str],
    unit_price: float,
    line_total: float,
):
    """Write one SaleItem and take the sold quantity off the product's stock."""
    db.add(SaleItem(
        sale_id=sale_id, product_id=product_id, quantity_sold=quantity, unit=unit,
        unit_price_at_sale=unit_price, final_line_price=line_total,
    ))
    if product_id:
        # Increment in SQL, the current stock is never read here
        db.query(Product).filter(Product.id == product_id).update(
            {Product.stock_quantity: Product.stock_quantity - quantity},
            synchronize_session=False,
        )
    db.commit()


def _add_due(db: Session, customer_id: int, amount: float):
    db.query(Customer).filter(Customer.id == customer_id).update(
        {Customer.total_due: Customer.total_due + amount},
        synchronize_session=False,
    )
    db.commit()


def _insert_sale(db: Session, total_amount: float, total_paid: float, status: str, customer_id: Optional[int]) -> int:
    sale = Sale(
        sale_time=datetime.now(),
        total_amount=total_amount,
        total_paid=total_paid,
        payment_status=status,
        customer_id=customer_id,
    )
    db.add(sale)
    db.commit()
    return sale.id


# Every step below is committed on its own; a failure half-way through keeps
# the sale and the lines written so far.

# =========================
# CHECKOUT
# =========================
@router.post("/sell", response_model=SellResponse)
def sell(payload: SellRequest, request: Request, db: Session = Depends(get_db)):
    """
    Record a checkout from the till: the sale, one line per cart entry, the
    stock decrements and - unless paid in full - the customer's new due.
    A customer is created on the fly for half/due payments without one.
    """
    customer = payload.customer or SellCustomer()
    payment_type = payload.payment_type
    total = float(payload.total or 0)

    try:
        customer_id = None
        if customer.id:
            customer_id = to_id(customer.id)
        elif payment_type in ("half", "due"):
            new_customer = Customer(name=customer.name or "Unknown", phone=customer.number or "", total_due=0)
            db.add(new_customer)
            db.commit()
            customer_id = new_customer.id
            logger.info("Created customer %s during checkout", customer_id)

        if payment_type == "paid":
            total_paid = total
        elif payment_type == "half":
            total_paid = float(customer.half_amount or 0)
        else:
            total_paid = 0.0

        sale_id = _insert_sale(db, total, total_paid, PAYMENT_STATUS[payment_type], customer_id)

        for line in payload.cart:
            quantity = line.quantity or 0
            unit_price = line.employee_price or line.base_price or 0
            _insert_line(
                db, sale_id,
                product_id=to_id(line.product_id),
                quantity=quantity,
                unit=line.unit or line.unit_type or "KG",
                unit_price=unit_price,
                line_total=line.total or quantity * unit_price,
            )

        if payment_type != "paid" and customer_id:
            _add_due(db, customer_id, total - total_paid)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Failed to record checkout: %s", e)
        raise HTTPException(status_code=500, detail=str(e))

    write_log(
        db, action="SALE_SELL", resource="sales", status="SUCCESS", ip=client_ip(request),
        meta={"sale_id": sale_id, "customer_id": customer_id, "payment_type": payment_type, "total": total},
    )
    logger.info("Sell recorded: sale %s, %d lines, %s", sale_id, len(payload.cart), PAYMENT_STATUS[payment_type])
    return SellResponse(message="Sell recorded", sale_id=sale_id, customer_id=customer_id)


# =========================
# DIRECT SALE ENTRY
# =========================
@router.post("/sales", response_model=SaleRecordedResponse)
def create_sale(payload: SaleCreate, request: Request, db: Session = Depends(get_db)):
    total_amount = float(payload.total_amount or 0)
    total_paid = float(payload.total_paid or 0)
    status = payload.payment_status or "Paid"
    customer_id = to_id(payload.customer_id) if payload.customer_id else None

    try:
        sale_id = _insert_sale(db, total_amount, total_paid, status, customer_id)

        for it in payload.items:
            _insert_line(
                db, sale_id,
                product_id=to_id(it.product_id),
                quantity=it.quantity_sold,
                unit=None,
                unit_price=it.unit_price_at_sale,
                line_total=it.final_line_price,
            )

        if status != "Paid" and customer_id:
            _add_due(db, customer_id, total_amount - total_paid)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Failed to record sale: %s", e)
        raise HTTPException(status_code=500, detail=str(e))

    write_log(
        db, action="SALE_CREATE", resource="sales", status="SUCCESS", ip=client_ip(request),
        meta={"sale_id": sale_id, "customer_id": customer_id, "payment_status": status},
    )
    return SaleRecordedResponse(message="Sale recorded", sale_id=sale_id)


# =========================
# HISTORY
# =========================
@router.get("/sales", response_model=List[SaleOut])
def list_sales(db: Session = Depends(get_db)):
    return db.query(Sale).order_by(Sale.sale_time.desc(), Sale.id.desc()).all()


@router.get("/sales/summary", response_model=List[DailySalesSummary])
def sales_summary(db: Session = Depends(get_db)):
    """Totals per calendar day, newest day first."""
    day = func.date(Sale.sale_time)
    rows = (
        db.query(
            day.label("date"),
            func.coalesce(func.sum(Sale.total_amount), 0.0).label("total_amount"),
            func.coalesce(func.sum(Sale.total_paid), 0.0).label("total_paid"),
            func.count(Sale.id).label("order_count"),
        )
        .group_by(day)
        .order_by(day.desc())
        .all()
    )
    return [
        DailySalesSummary(
            date=r.date, total_amount=float(r.total_amount),
            total_paid=float(r.total_paid), order_count=r.order_count,
        )
        for r in rows
    ]


@router.get("/sales/by-date/{day}", response_model=List[SaleWithCustomer])
def sales_by_date(day: str, db: Session = Depends(get_db)):
    try:
        start = datetime.combine(date.fromisoformat(day), time.min)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Bad date format: {day}")
    end = start + timedelta(days=1)

    return (
        db.query(Sale)
        .options(joinedload(Sale.customer))
        .filter(Sale.sale_time >= start, Sale.sale_time < end)
        .order_by(Sale.sale_time.desc(), Sale.id.desc())
        .all()
    )


@router.get("/sales/details/{sale_id}", response_model=SaleFullDetails)
def sale_full_details(sale_id: str, db: Session = Depends(get_db)):
    pk = parse_id(sale_id, "sale")
    sale = db.query(Sale).filter(Sale.id == pk).first()
    if not sale:
        raise HTTPException(status_code=404, detail="Sale not found")

    # Inner join: lines whose product has since been deleted are left out
    items = (
        db.query(SaleItem)
        .join(Product, SaleItem.product_id == Product.id)
        .options(contains_eager(SaleItem.product))
        .filter(SaleItem.sale_id == pk)
        .order_by(SaleItem.id.asc())
        .all()
    )
    customer = db.query(Customer).filter(Customer.id == sale.customer_id).first() if sale.customer_id else None

    return {"sale": sale, "items": items, "customer": customer}


@router.get("/sales/{sale_id}", response_model=SaleDetail)
def get_sale(sale_id: str, db: Session = Depends(get_db)):
    pk = parse_id(sale_id, "sale")
    sale = db.query(Sale).options(joinedload(Sale.items)).filter(Sale.id == pk).first()
    if not sale:
        raise HTTPException(status_code=404, detail="Sale not found")
    return sale
