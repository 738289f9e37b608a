# backend/routes/customers.py
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from database import get_db
from utils.audit import write_log, client_ip
from utils.ids import parse_id
from models.customer import Customer
from schemas.customer import CustomerOut, CustomerCreate, CustomerUpdate, CustomerDueUpdate
from schemas.common import MessageResponse, CreatedResponse

router = APIRouter(prefix="/customers", tags=["Customers"])


def _get_customer_or_404(db: Session, customer_id: str) -> Customer:
    pk = parse_id(customer_id, "customer")
    customer = db.query(Customer).filter(Customer.id == pk).first()
    if not customer:
        raise HTTPException(status_code=404, detail="Customer not found")
    return customer


@router.get("", response_model=List[CustomerOut])
def list_customers(db: Session = Depends(get_db)):
    return db.query(Customer).order_by(Customer.id.asc()).all()


# Declared before /{customer_id} so "unpaid" is not read as an identifier
@router.get("/unpaid", response_model=List[CustomerOut])
def list_unpaid_customers(db: Session = Depends(get_db)):
    return db.query(Customer).filter(Customer.total_due > 0).order_by(Customer.id.asc()).all()


@router.get("/{customer_id}", response_model=CustomerOut)
def get_customer(customer_id: str, db: Session = Depends(get_db)):
    return _get_customer_or_404(db, customer_id)


@router.post("", response_model=CreatedResponse)
def create_customer(payload: CustomerCreate, request: Request, db: Session = Depends(get_db)):
    c = Customer(name=payload.name, phone=payload.phone, total_due=float(payload.total_due or 0))
    db.add(c)
    db.commit()
    db.refresh(c)

    write_log(
        db, action="CUSTOMER_CREATE", resource="customers", status="SUCCESS",
        ip=client_ip(request), meta={"id": c.id},
    )
    return {"message": "Customer created", "id": c.id}


@router.put("/{customer_id}", response_model=CustomerOut)
def update_customer(customer_id: str, payload: CustomerUpdate, request: Request, db: Session = Depends(get_db)):
    c = _get_customer_or_404(db, customer_id)

    # Update fields if provided in the payload
    if payload.name is not None:
        c.name = payload.name
    if payload.phone is not None:
        c.phone = payload.phone
    if payload.total_due is not None:
        c.total_due = payload.total_due

    db.commit()
    db.refresh(c)

    write_log(
        db, action="CUSTOMER_UPDATE", resource="customers", status="SUCCESS",
        ip=client_ip(request), meta={"id": c.id},
    )
    db.refresh(c)
    return c


# Overwrite only the outstanding balance
@router.put("/{customer_id}/update-due", response_model=CustomerOut)
def update_customer_due(customer_id: str, payload: CustomerDueUpdate, request: Request, db: Session = Depends(get_db)):
    c = _get_customer_or_404(db, customer_id)
    old_due = c.total_due
    c.total_due = float(payload.new_due or 0)
    db.commit()
    db.refresh(c)

    write_log(
        db, action="CUSTOMER_DUE_UPDATE", resource="customers", status="SUCCESS",
        ip=client_ip(request), meta={"id": c.id, "old": old_due, "new": c.total_due},
    )
    db.refresh(c)
    return c


@router.delete("/{customer_id}", response_model=MessageResponse)
def delete_customer(customer_id: str, request: Request, db: Session = Depends(get_db)):
    c = _get_customer_or_404(db, customer_id)
    cid = c.id
    db.delete(c)
    db.commit()
    write_log(db, action="CUSTOMER_DELETE", resource="customers", status="SUCCESS", ip=client_ip(request), meta={"id": cid})
    return {"message": "Customer deleted"}
