# app/services/order_service.py
from decimal import Decimal
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.data.models.order import OrderModel, OrderItemModel
from app.domain.errors import EmptyCartError, NotFoundError, StockConflictError, UnexpectedError
from app.domain.pricing import summarize, format_order_number
from app.domain.schemas import OrderOut, OrderItemOut, OrderData, OrdersData
from app.repos.cart_repo import CartRepo
from app.repos.order_repo import OrderRepo
from app.utils.settings import TAX_RATE
from app.utils.logging import get_logger

logger = get_logger(__name__)

ORDER_STATUS_COMPLETED = "completed"


def _order_out(order: OrderModel, items: List[OrderItemModel]) -> OrderOut:
    return OrderOut(
        id=order.id,
        order_number=format_order_number(order.id),
        subtotal=order.subtotal,
        tax_amount=order.tax_amount,
        total=order.total_amount,
        status=order.status,
        created_at=order.created_at,
        items=[
            OrderItemOut(
                name=i.product_name,
                price=i.product_price,
                quantity=i.quantity,
                total=i.product_price * i.quantity,
            )
            for i in items
        ],
        item_count=sum(i.quantity for i in items),
    )


class OrderService:
    """
    Checkout i historia zamowien.
    Separacja od CartService, ale checkout czysci koszyk w tej samej transakcji.
    """

    def __init__(self, db: Session, tax_rate: Decimal = TAX_RATE):
        self.repo = OrderRepo(db)
        self.cart_repo = CartRepo(db)
        self.tax_rate = tax_rate

    def checkout(self, user_id: int, session_id: str) -> OrderData:
        """
        Use Case: zamowienie z koszyka.

        1. Wczytuje koszyk z aktualnymi produktami (FOR UPDATE)
        2. Sprawdza dostepnosc, bez zadnego zapisu przy konflikcie
        3. Liczy sumy na cenach z kroku 1
        4. Zapisuje naglowek zamowienia (completed)
        5. Zapisuje pozycje jako snapshot nazwy i ceny
        6. Czysci koszyk

        Kroki 3-6 to jedna transakcja, przy bledzie bazy rollback calosci.
        """
        lines = self.cart_repo.get_lines(user_id, for_update=True)

        if not lines:
            self.cart_repo.rollback()
            raise EmptyCartError()

        out_of_stock = [
            {"id": product.id, "name": product.name}
            for _, product in lines
            if not product.in_stock
        ]
        if out_of_stock:
            self.cart_repo.rollback()
            logger.warning(f"Checkout of user {user_id} rejected, out of stock: {[i['id'] for i in out_of_stock]}")
            raise StockConflictError(out_of_stock)

        totals = summarize(((product.price, item.quantity) for item, product in lines), self.tax_rate)

        try:
            order = self.repo.add_order(
                OrderModel(
                    user_id=user_id,
                    session_id=session_id,
                    subtotal=totals.subtotal,
                    tax_amount=totals.tax_amount,
                    total_amount=totals.total,
                    status=ORDER_STATUS_COMPLETED,
                )
            )

            order_items = [
                OrderItemModel(
                    order_id=order.id,
                    product_id=product.id,
                    product_name=product.name,
                    product_price=product.price,
                    quantity=item.quantity,
                )
                for item, product in lines
            ]
            self.repo.add_items(order_items)

            self.cart_repo.clear(user_id)

            result = OrderData(order=_order_out(order, order_items))
            self.repo.commit()

        except SQLAlchemyError as e:
            self.repo.rollback()
            logger.error(f"Checkout of user {user_id} failed, rolled back: {e}")
            raise UnexpectedError("Failed to process checkout") from e

        logger.info(
            f"Order {result.order.order_number} created for user {user_id}: "
            f"subtotal={totals.subtotal} tax={totals.tax_amount} total={totals.total}"
        )

        return result

    def list_orders(self, user_id: int) -> OrdersData:
        orders = self.repo.list_orders(user_id)
        return OrdersData(orders=[_order_out(o, o.items) for o in orders])

    def get_order(self, user_id: int, order_id: int) -> OrderData:
        # cudze zamowienie wyglada tak samo jak nieistniejace
        order = self.repo.get_order(order_id, user_id)

        if not order:
            raise NotFoundError("Order not found")

        return OrderData(order=_order_out(order, order.items))
