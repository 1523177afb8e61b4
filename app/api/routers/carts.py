# app/api/routers/carts.py
from fastapi import APIRouter

from app.api.deps import CurrentSession, DbSession
from app.domain.schemas import ApiResponse, CartItemIn, CartItemUpdate, CartData, CartItemData
from app.services.cart_service import CartService

router = APIRouter(prefix="/cart", tags=["cart"])


@router.get("", response_model=ApiResponse[CartData])
def get_cart(session: CurrentSession, db: DbSession):
    return ApiResponse(data=CartService(db).get_cart(session.user_id))


@router.post("", response_model=ApiResponse[CartItemData], status_code=201)
def add_item(payload: CartItemIn, session: CurrentSession, db: DbSession):
    data = CartService(db).add_product(
        user_id=session.user_id,
        product_id=payload.product_id,
        quantity=payload.quantity,
    )
    return ApiResponse(message="Item added to cart successfully", data=data)


@router.put("/{product_id}", response_model=ApiResponse[CartItemData])
def update_item(product_id: int, payload: CartItemUpdate, session: CurrentSession, db: DbSession):
    data = CartService(db).set_quantity(session.user_id, product_id, payload.quantity)
    if data is None:
        return ApiResponse(message="Item removed from cart")
    return ApiResponse(message="Cart item updated successfully", data=data)


@router.delete("/{product_id}", response_model=ApiResponse[None])
def remove_item(product_id: int, session: CurrentSession, db: DbSession):
    CartService(db).remove_product(session.user_id, product_id)
    return ApiResponse(message="Item removed from cart successfully")


@router.delete("", response_model=ApiResponse[None])
def clear_cart(session: CurrentSession, db: DbSession):
    CartService(db).clear(session.user_id)
    return ApiResponse(message="Cart cleared successfully")
