# app/data/seed.py
from app.data.database import SessionLocal, init_db
from app.data.models.product import ProductModel
from app.utils.logging import get_logger

logger = get_logger(__name__)

DEMO_PRODUCTS = [
    {
        "name": "Naruto: Hidden Leaf Oversized T-Shirt",
        "description": "Heavyweight cotton tee with a back print.",
        "price": 899,
        "original_price": 1199,
        "category": "clothing",
        "rating": 4.6,
        "featured": True,
        "colors": ["black", "white"],
        "sizes": ["S", "M", "L", "XL"],
    },
    {
        "name": "Marvel: Avengers Logo Hoodie",
        "description": "Fleece hoodie with an embroidered chest logo.",
        "price": 1799,
        "original_price": 2299,
        "category": "clothing",
        "rating": 4.4,
        "featured": True,
        "colors": ["navy"],
        "sizes": ["M", "L", "XL"],
    },
    {
        "name": "Batman: Gotham Sneakers",
        "description": "Low-top canvas sneakers.",
        "price": 2499,
        "original_price": 2999,
        "category": "footwear",
        "rating": 4.2,
        "featured": False,
        "colors": ["black"],
        "sizes": ["7", "8", "9", "10"],
    },
    {
        "name": "Classic Slides",
        "description": "Everyday cushioned slides.",
        "price": 599,
        "original_price": None,
        "category": "footwear",
        "rating": 4.0,
        "featured": False,
        "colors": ["black", "grey"],
        "sizes": ["7", "8", "9", "10"],
    },
    {
        "name": "Harry Potter: Hogwarts Tote Bag",
        "description": "Canvas tote with a crest print.",
        "price": 499,
        "original_price": 699,
        "category": "accessories",
        "rating": 4.7,
        "featured": True,
        "colors": ["beige"],
        "sizes": [],
    },
]


def seed(session_factory=SessionLocal):
    db = session_factory()
    try:
        # not forcing: only seed if empty
        if db.query(ProductModel).first():
            logger.info("Products table not empty, skipping seed")
            return
        db.add_all(ProductModel(in_stock=True, **p) for p in DEMO_PRODUCTS)
        db.commit()
        logger.info(f"Seeded {len(DEMO_PRODUCTS)} products")
    finally:
        db.close()


if __name__ == "__main__":
    init_db()
    seed()
