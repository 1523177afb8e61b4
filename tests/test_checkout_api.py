from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from app.data.models.cart_item import CartItemModel
from app.data.models.order import OrderModel, OrderItemModel
from app.repos.cart_repo import CartRepo


def _add(client, headers, product_id, quantity):
    resp = client.post("/api/cart", json={"productId": product_id, "quantity": quantity}, headers=headers)
    assert resp.status_code == 201


def _count(session_factory, column):
    with session_factory() as s:
        return s.execute(select(func.count(column))).scalar_one()


def test_checkout_creates_order_and_clears_cart(client, session_headers, make_product, session_factory):
    a = make_product(name="A", price=500)
    b = make_product(name="B", price=300)
    _add(client, session_headers, a.id, 2)
    _add(client, session_headers, b.id, 1)

    resp = client.post("/api/orders/checkout", headers=session_headers)

    assert resp.status_code == 201
    body = resp.json()
    assert body["message"] == "Order placed successfully!"
    order = body["data"]["order"]
    assert order["subtotal"] == 1300
    assert order["taxAmount"] == 234
    assert order["total"] == 1534
    assert order["status"] == "completed"
    assert order["orderNumber"] == f"TSS-{order['id']:06d}"
    assert order["itemCount"] == 3
    assert order["items"] == [
        {"name": "A", "price": 500, "quantity": 2, "total": 1000},
        {"name": "B", "price": 300, "quantity": 1, "total": 300},
    ]

    cart = client.get("/api/cart", headers=session_headers).json()["data"]
    assert cart["items"] == []
    assert _count(session_factory, OrderModel.id) == 1
    assert _count(session_factory, OrderItemModel.id) == 2


def test_order_total_matches_items(client, session_headers, make_product):
    for price, qty in ((999, 3), (149, 7), (1, 1)):
        _add(client, session_headers, make_product(price=price).id, qty)

    order = client.post("/api/orders/checkout", headers=session_headers).json()["data"]["order"]

    items_sum = sum(i["price"] * i["quantity"] for i in order["items"])
    assert order["subtotal"] == items_sum
    assert order["total"] == items_sum + order["taxAmount"]


def test_checkout_empty_cart(client, session_headers, session_factory):
    resp = client.post("/api/orders/checkout", headers=session_headers)

    assert resp.status_code == 400
    assert resp.json()["status"] == "error"
    assert resp.json()["message"] == "Cart is empty"
    assert _count(session_factory, OrderModel.id) == 0


def test_checkout_stock_conflict(client, session_headers, make_product, session_factory, db):
    a = make_product(name="A")
    b = make_product(name="B")
    c = make_product(name="C")
    for p in (a, b, c):
        _add(client, session_headers, p.id, 1)

    b.in_stock = False
    c.in_stock = False
    db.commit()

    resp = client.post("/api/orders/checkout", headers=session_headers)

    assert resp.status_code == 400
    body = resp.json()
    assert body["message"] == "Some items in your cart are out of stock"
    assert body["data"]["outOfStockItems"] == [{"id": b.id, "name": "B"}, {"id": c.id, "name": "C"}]
    assert _count(session_factory, OrderModel.id) == 0
    assert _count(session_factory, OrderItemModel.id) == 0
    assert _count(session_factory, CartItemModel.id) == 3


def test_checkout_rolls_back_when_cart_clear_fails(client, session_headers, make_product, session_factory, monkeypatch):
    _add(client, session_headers, make_product().id, 2)

    def broken_clear(self, user_id):
        raise OperationalError("DELETE FROM cart_items", {}, Exception("connection lost"))

    monkeypatch.setattr(CartRepo, "clear", broken_clear)

    resp = client.post("/api/orders/checkout", headers=session_headers)

    assert resp.status_code == 500
    assert resp.json()["message"] == "Failed to process checkout"
    assert _count(session_factory, OrderModel.id) == 0
    assert _count(session_factory, OrderItemModel.id) == 0
    assert _count(session_factory, CartItemModel.id) == 1


def test_order_items_are_price_snapshots(client, session_headers, make_product, db):
    product = make_product(name="Tee", price=500)
    _add(client, session_headers, product.id, 1)
    order_id = client.post("/api/orders/checkout", headers=session_headers).json()["data"]["order"]["id"]

    product.price = 900
    product.name = "Renamed Tee"
    db.commit()

    order = client.get(f"/api/orders/{order_id}", headers=session_headers).json()["data"]["order"]
    assert order["items"] == [{"name": "Tee", "price": 500, "quantity": 1, "total": 500}]
    assert order["subtotal"] == 500


def test_list_orders_newest_first(client, session_headers, make_product):
    product = make_product(price=100)
    ids = []
    for qty in (1, 2):
        _add(client, session_headers, product.id, qty)
        ids.append(client.post("/api/orders/checkout", headers=session_headers).json()["data"]["order"]["id"])

    orders = client.get("/api/orders", headers=session_headers).json()["data"]["orders"]

    assert [o["id"] for o in orders] == list(reversed(ids))
    assert orders[0]["itemCount"] == 2
    assert orders[0]["orderNumber"] == f"TSS-{ids[1]:06d}"


def test_get_order_of_other_session_is_not_found(client, session_headers, other_session_headers, make_product):
    _add(client, session_headers, make_product().id, 1)
    order_id = client.post("/api/orders/checkout", headers=session_headers).json()["data"]["order"]["id"]

    resp = client.get(f"/api/orders/{order_id}", headers=other_session_headers)

    assert resp.status_code == 404
    assert resp.json()["message"] == "Order not found"
    assert client.get("/api/orders", headers=other_session_headers).json()["data"]["orders"] == []


def test_get_unknown_order(client, session_headers):
    resp = client.get("/api/orders/424242", headers=session_headers)

    assert resp.status_code == 404
