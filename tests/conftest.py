"""Shared fixtures: in-memory SQLite database, TestClient and catalog helpers."""

import os

# musi byc przed importem app.*, engine jest tworzony przy imporcie
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ["TAX_RATE"] = "0.18"
os.environ["APP_ENV"] = "development"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.api import create_app
from app.api.deps import SESSION_HEADER
from app.data import models  # noqa: F401
from app.data.database import Base, get_db
from app.data.models.product import ProductModel


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    application = create_app(init_database=False)

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    application.dependency_overrides[get_db] = override_get_db
    return TestClient(application)


@pytest.fixture
def make_product(db):
    """Factory dodajaca produkt do katalogu."""

    def _make(**overrides) -> ProductModel:
        fields = {
            "name": "Plain Tee",
            "description": "Cotton tee",
            "price": 500,
            "original_price": 700,
            "category": "clothing",
            "rating": 4.0,
            "in_stock": True,
            "featured": False,
            "colors": ["black"],
            "sizes": ["M"],
        }
        fields.update(overrides)
        product = ProductModel(**fields)
        db.add(product)
        db.commit()
        db.refresh(product)
        return product

    return _make


@pytest.fixture
def session_headers(client):
    """Naglowki z tokenem sesji wydanym przez serwer przy pierwszym kontakcie."""
    resp = client.get("/api/cart")
    return {SESSION_HEADER: resp.headers[SESSION_HEADER]}


@pytest.fixture
def other_session_headers(client):
    resp = client.get("/api/cart")
    return {SESSION_HEADER: resp.headers[SESSION_HEADER]}
