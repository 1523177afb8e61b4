from datetime import datetime, timezone

from sqlalchemy import Column, Integer, ForeignKey, DateTime, UniqueConstraint, CheckConstraint
from sqlalchemy.orm import relationship

from app.data.database import Base


def _now():
    return datetime.now(timezone.utc)


class CartItemModel(Base):
    __tablename__ = "cart_items"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)

    # 0 nigdy nie jest zapisywane, wiersz jest wtedy usuwany
    quantity = Column(Integer, nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False, default=_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_now)

    product = relationship("ProductModel")

    __table_args__ = (
        UniqueConstraint("user_id", "product_id", name="u_user_product"),
        CheckConstraint("quantity > 0", name="ck_cart_items_quantity_positive"),
    )
