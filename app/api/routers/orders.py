# app/api/routers/orders.py
from fastapi import APIRouter

from app.api.deps import CurrentSession, DbSession
from app.domain.schemas import ApiResponse, OrderData, OrdersData
from app.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("/checkout", response_model=ApiResponse[OrderData], status_code=201)
def checkout(session: CurrentSession, db: DbSession):
    """
    Tworzy zamowienie z koszyka sesji i czysci koszyk.
    """
    data = OrderService(db).checkout(session.user_id, session.token)
    return ApiResponse(message="Order placed successfully!", data=data)


@router.get("", response_model=ApiResponse[OrdersData])
def list_orders(session: CurrentSession, db: DbSession):
    return ApiResponse(data=OrderService(db).list_orders(session.user_id))


@router.get("/{order_id}", response_model=ApiResponse[OrderData])
def get_order(order_id: int, session: CurrentSession, db: DbSession):
    return ApiResponse(data=OrderService(db).get_order(session.user_id, order_id))
