# app/repos/order_repo.py
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.data.models.order import OrderModel, OrderItemModel


class OrderRepo:
    def __init__(self, db: Session):
        self.db = db

    def add_order(self, order: OrderModel) -> OrderModel:
        # flush zamiast commit, checkout zatwierdza calosc na koncu
        self.db.add(order)
        self.db.flush()
        return order

    def add_items(self, items: List[OrderItemModel]):
        self.db.add_all(items)
        self.db.flush()

    def get_order(self, order_id: int, user_id: int) -> OrderModel | None:
        return self.db.execute(
            select(OrderModel).where(OrderModel.id == order_id, OrderModel.user_id == user_id)
        ).scalar_one_or_none()

    def list_orders(self, user_id: int) -> List[OrderModel]:
        stmt = (
            select(OrderModel)
            .where(OrderModel.user_id == user_id)
            .order_by(OrderModel.created_at.desc(), OrderModel.id.desc())
        )
        return list(self.db.execute(stmt).scalars().all())

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
