# backend/utils/seed.py
import logging

from sqlalchemy.orm import Session

from models.product import Product
from models.customer import Customer

logger = logging.getLogger(__name__)

SAMPLE_PRODUCTS = [
    {
        "name_en": "Potato",
        "name_bn": "আলু",
        "is_packed": False,
        "unit_type": "KG",
        "base_price": 35,
        "stock_quantity": 100,
        "image_url": "https://via.placeholder.com/300?text=Potato",
    },
    {
        "name_en": "Rice 5kg Pack",
        "name_bn": "চাল ৫ কেজি প্যাক",
        "is_packed": True,
        "unit_type": "Pack",
        "base_price": 480,
        "stock_quantity": 50,
        "image_url": "https://via.placeholder.com/300?text=Rice+5kg",
    },
    {
        "name_en": "Onion",
        "name_bn": "পেঁয়াজ",
        "is_packed": False,
        "unit_type": "KG",
        "base_price": 70,
        "stock_quantity": 80,
        "image_url": "https://via.placeholder.com/300?text=Onion",
    },
    {
        "name_en": "Sugar 1kg Pack",
        "name_bn": "চিনি ১ কেজি প্যাক",
        "is_packed": True,
        "unit_type": "Pack",
        "base_price": 120,
        "stock_quantity": 60,
        "image_url": "https://via.placeholder.com/300?text=Sugar+1kg",
    },
]

SAMPLE_CUSTOMERS = [
    {"name": "Mr. Rahim", "phone": "01700000001", "total_due": 0},
    {"name": "Mrs. Akter", "phone": "01700000002", "total_due": 150.5},
]


def seed_sample_data(db: Session) -> None:
    """Fill empty products/customers tables with a small demo data set."""
    if db.query(Product).count() == 0:
        db.add_all([Product(**data) for data in SAMPLE_PRODUCTS])
        db.commit()
        logger.info("Seeded products table with %d products", len(SAMPLE_PRODUCTS))

    if db.query(Customer).count() == 0:
        db.add_all([Customer(**data) for data in SAMPLE_CUSTOMERS])
        db.commit()
        logger.info("Seeded customers table with %d customers", len(SAMPLE_CUSTOMERS))
