from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, Float, JSON, CheckConstraint

from app.data.database import Base


class ProductModel(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)

    # pelne rupie, bez groszy
    price = Column(Integer, nullable=False)
    original_price = Column(Integer, nullable=True)

    category = Column(String(50), nullable=True, index=True)
    image_url = Column(String(500), nullable=True)
    rating = Column(Float, nullable=True)
    in_stock = Column(Boolean, nullable=False, default=True)
    featured = Column(Boolean, nullable=False, default=False)
    colors = Column(JSON, nullable=False, default=list)
    sizes = Column(JSON, nullable=False, default=list)

    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    __table_args__ = (CheckConstraint("price >= 0", name="ck_products_price_non_negative"),)
