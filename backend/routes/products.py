# backend/routes/products.py
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from database import get_db
from utils.audit import write_log, client_ip
from utils.ids import parse_id
from models.product import Product
import schemas.product as product_schemas
from schemas.common import MessageResponse, CreatedResponse

router = APIRouter(prefix="/products", tags=["Products"])


def _get_product_or_404(db: Session, product_id: str) -> Product:
    pk = parse_id(product_id, "product")
    product = db.query(Product).filter(Product.id == pk).first()
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


# =========================
# PRODUCT LIST
# =========================
@router.get("", response_model=List[product_schemas.ProductOut])
def list_products(db: Session = Depends(get_db)):
    return db.query(Product).order_by(Product.id.asc()).all()


@router.get("/sellable", response_model=List[product_schemas.ProductOut])
def list_sellable_products(db: Session = Depends(get_db)):
    """Products that can be put in a checkout cart: in stock and not hidden."""
    return (
        db.query(Product)
        .filter(Product.stock_quantity > 0, Product.sellable != False)
        .order_by(Product.name_en.asc())
        .all()
    )


# =========================
# SINGLE PRODUCT
# =========================
@router.get("/{product_id}", response_model=product_schemas.ProductOut)
def get_product(product_id: str, db: Session = Depends(get_db)):
    return _get_product_or_404(db, product_id)


# =========================
# ADD PRODUCT
# =========================
@router.post("", response_model=CreatedResponse)
def add_product(
    payload: product_schemas.ProductCreate,
    request: Request,
    db: Session = Depends(get_db),
):
    new_product = Product(**payload.model_dump())
    db.add(new_product)
    db.commit()
    db.refresh(new_product)

    write_log(
        db, action="PRODUCT_CREATE", resource="products", status="SUCCESS",
        ip=client_ip(request), meta={"id": new_product.id, "name_en": new_product.name_en},
    )
    return {"message": "Product created", "id": new_product.id}


# =========================
# UPDATE PRODUCT (only supplied fields)
# =========================
@router.put("/{product_id}", response_model=product_schemas.ProductOut)
def update_product(
    product_id: str,
    payload: product_schemas.ProductUpdate,
    request: Request,
    db: Session = Depends(get_db),
):
    product = _get_product_or_404(db, product_id)

    changes = payload.model_dump(exclude_unset=True)
    for key, value in changes.items():
        setattr(product, key, value)

    db.commit()
    db.refresh(product)

    write_log(
        db, action="PRODUCT_UPDATE", resource="products", status="SUCCESS",
        ip=client_ip(request), meta={"id": product.id, "fields": sorted(changes)},
    )
    db.refresh(product)
    return product


# =========================
# DELETE
# =========================
@router.delete("/{product_id}", response_model=MessageResponse)
def delete_product(product_id: str, request: Request, db: Session = Depends(get_db)):
    product = _get_product_or_404(db, product_id)
    pid = product.id
    db.delete(product)
    db.commit()
    write_log(db, action="PRODUCT_DELETE", resource="products", status="SUCCESS", ip=client_ip(request), meta={"id": pid})
    return {"message": "Product deleted"}
