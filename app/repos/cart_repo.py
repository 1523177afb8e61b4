# app/repos/cart_repo.py
from datetime import datetime, timezone
from typing import List, Tuple

from sqlalchemy import select, update, delete
from sqlalchemy.orm import Session

from app.data.dialect import upsert_insert
from app.data.models.cart_item import CartItemModel
from app.data.models.product import ProductModel


class CartRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_lines(self, user_id: int, for_update: bool = False) -> List[Tuple[CartItemModel, ProductModel]]:
        """Pozycje koszyka razem z aktualnym wierszem produktu, w kolejnosci dodania."""
        stmt = (
            select(CartItemModel, ProductModel)
            .join(ProductModel, ProductModel.id == CartItemModel.product_id)
            .where(CartItemModel.user_id == user_id)
            .order_by(CartItemModel.id.asc())
        )
        if for_update:
            # na postgresie blokuje wiersze koszyka do konca transakcji
            stmt = stmt.with_for_update(of=CartItemModel)
        return [tuple(row) for row in self.db.execute(stmt).all()]

    def get_cart_item(self, user_id: int, product_id: int) -> CartItemModel | None:
        stmt = (
            select(CartItemModel)
            .where(CartItemModel.user_id == user_id, CartItemModel.product_id == product_id)
            .execution_options(populate_existing=True)
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def add_quantity(self, user_id: int, product_id: int, quantity: int) -> CartItemModel:
        """
        Atomowy upsert: nowy wiersz albo quantity = quantity + excluded.quantity.
        Bez read-modify-write, wiec rownolegle dodania sie nie gubia.
        """
        now = datetime.now(timezone.utc)
        stmt = upsert_insert(self.db, CartItemModel).values(
            user_id=user_id,
            product_id=product_id,
            quantity=quantity,
            created_at=now,
            updated_at=now,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[CartItemModel.user_id, CartItemModel.product_id],
            set_={
                "quantity": CartItemModel.quantity + stmt.excluded.quantity,
                "updated_at": stmt.excluded.updated_at,
            },
        )
        self.db.execute(stmt)
        return self.get_cart_item(user_id, product_id)

    def set_quantity(self, user_id: int, product_id: int, quantity: int) -> CartItemModel | None:
        """Zwraca None, jesli takiej pozycji nie ma (nic nie tworzy)."""
        result = self.db.execute(
            update(CartItemModel)
            .where(CartItemModel.user_id == user_id, CartItemModel.product_id == product_id)
            .values(quantity=quantity, updated_at=datetime.now(timezone.utc))
        )
        if result.rowcount == 0:
            return None
        return self.get_cart_item(user_id, product_id)

    def delete_cart_item(self, user_id: int, product_id: int) -> int:
        result = self.db.execute(
            delete(CartItemModel).where(
                CartItemModel.user_id == user_id,
                CartItemModel.product_id == product_id,
            )
        )
        return result.rowcount

    def clear(self, user_id: int) -> int:
        result = self.db.execute(delete(CartItemModel).where(CartItemModel.user_id == user_id))
        return result.rowcount

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
