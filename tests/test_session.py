import uuid
import pytest

from sqlalchemy import func, select

from app.api.deps import SESSION_HEADER
from app.data.models.user import UserModel
from app.domain.errors import ValidationError
from app.services.session_service import SessionService


def test_resolve_without_token_issues_new_one(db):
    ctx = SessionService(db).resolve(None)

    assert ctx.issued is True
    assert str(uuid.UUID(ctx.token)) == ctx.token
    assert db.get(UserModel, ctx.user_id).session_id == ctx.token


def test_blank_token_is_treated_as_absent(db):
    ctx = SessionService(db).resolve("   ")

    assert ctx.issued is True
    assert ctx.token.strip()


def test_resolve_unseen_token_creates_single_user(db):
    first = SessionService(db).resolve("client-token")
    second = SessionService(db).resolve("client-token")

    assert first.issued is False
    assert first.user_id == second.user_id
    count = db.execute(select(func.count(UserModel.id)).where(UserModel.session_id == "client-token")).scalar_one()
    assert count == 1


def test_distinct_tokens_get_distinct_users(db):
    a = SessionService(db).resolve("token-a")
    b = SessionService(db).resolve("token-b")

    assert a.user_id != b.user_id


def test_first_contact_echoes_session_header(client):
    resp = client.get("/api/cart")

    assert resp.status_code == 200
    assert resp.headers.get(SESSION_HEADER)


def test_known_session_is_not_reissued(client, session_headers):
    resp = client.get("/api/cart", headers=session_headers)

    assert resp.status_code == 200
    assert SESSION_HEADER not in resp.headers


def test_client_supplied_token_is_trusted(client, make_product):
    product = make_product()
    headers = {SESSION_HEADER: "my-own-token"}

    client.post("/api/cart", json={"productId": product.id, "quantity": 1}, headers=headers)
    resp = client.get("/api/cart", headers=headers)

    assert SESSION_HEADER not in resp.headers
    assert resp.json()["data"]["summary"]["itemCount"] == 1


def _user_tokens(session_factory):
    with session_factory() as s:
        return s.execute(select(UserModel.session_id)).scalars().all()


def test_failed_first_request_still_echoes_session(client, session_factory):
    resp = client.post("/api/orders/checkout")

    assert resp.status_code == 400
    assert resp.json()["message"] == "Cart is empty"
    token = resp.headers[SESSION_HEADER]
    assert _user_tokens(session_factory) == [token]

    again = client.get("/api/cart", headers={SESSION_HEADER: token})

    assert again.status_code == 200
    assert SESSION_HEADER not in again.headers
    assert _user_tokens(session_factory) == [token]


def test_not_found_first_request_echoes_session(client):
    resp = client.post("/api/cart", json={"productId": 999, "quantity": 1})

    assert resp.status_code == 404
    assert resp.headers.get(SESSION_HEADER)


def test_validation_error_first_request_echoes_session(client):
    resp = client.post("/api/cart", json={"productId": 1, "quantity": 0})

    assert resp.status_code == 400
    assert resp.headers.get(SESSION_HEADER)


def test_catalog_and_health_hand_out_session(client, session_factory):
    for path in ("/api/products", "/api/products/categories", "/api/health"):
        resp = client.get(path)
        assert resp.status_code == 200
        assert resp.headers.get(SESSION_HEADER)

    # token bez operacji na koszyku nie tworzy uzytkownika
    assert _user_tokens(session_factory) == []


def test_overlong_session_id_is_rejected(client, session_factory):
    resp = client.get("/api/cart", headers={SESSION_HEADER: "x" * 256})

    assert resp.status_code == 400
    assert resp.json()["data"]["details"][0]["field"] == SESSION_HEADER
    assert _user_tokens(session_factory) == []


def test_session_id_at_column_limit_is_accepted(client):
    resp = client.get("/api/cart", headers={SESSION_HEADER: "x" * 255})

    assert resp.status_code == 200


def test_resolve_rejects_token_longer_than_column(db):
    with pytest.raises(ValidationError):
        SessionService(db).resolve("x" * 256)

    assert db.scalar(select(func.count()).select_from(UserModel)) == 0
