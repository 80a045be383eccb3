import logging
from decimal import Decimal
from sqlmodel import Session, func, select
from app.core.config import settings
from app.core.logging import configure_logging
from app.db.session import engine, create_db_and_tables
from app.models.product import Product

logger = logging.getLogger("app.seed")

# (name, category, price, stock, image, description)
SAMPLE_CATALOG = [
    ("Wireless Headphones", "Electronics", "129.99", 25, "/images/headphones.webp",
     "Over-ear headphones with active noise cancelling and 30 hour battery life."),
    ("Smart Watch", "Electronics", "199.00", 15, "/images/smart-watch.webp",
     "Fitness tracking, heart rate monitor and notifications on your wrist."),
    ("Leather Backpack", "Accessories", "89.50", 40, "/images/backpack.webp",
     "Handmade full-grain leather backpack with a padded laptop sleeve."),
    ("Ceramic Coffee Mug", "Home", "14.99", 120, "/images/mug.webp",
     "Stoneware mug, 350ml, dishwasher safe."),
    ("Desk Lamp", "Home", "39.95", 60, "/images/desk-lamp.webp",
     "Dimmable LED desk lamp with adjustable colour temperature."),
]

def build_catalog():
    return [
        Product(name=name, category=category, price=Decimal(price), stock=stock,
                image_url=image, description=description)
        for name, category, price, stock, image, description in SAMPLE_CATALOG
    ]

def seed_catalog() -> int:
    """Fill an empty catalog with the sample products. Returns how many were added."""
    create_db_and_tables()

    with Session(engine) as session:
        count = session.exec(select(func.count()).select_from(Product)).one()
        if count:
            logger.info("Catalog already has %d products, leaving it alone", count)
            return 0

        catalog = build_catalog()
        session.add_all(catalog)
        session.commit()
        logger.info("Seeded %d sample products into %s", len(catalog), settings.DATABASE_URL)
        return len(catalog)

if __name__ == "__main__":
    configure_logging(settings.LOG_LEVEL)
    seed_catalog()
