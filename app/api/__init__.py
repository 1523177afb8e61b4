# app/api/__init__.py
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.deps import SESSION_HEADER, session_middleware
from app.api.errors import register_error_handlers
from app.api.routers import carts, health, orders, products
from app.data.database import init_db
from app.utils.settings import FRONTEND_URL

API_PREFIX = "/api"


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


def create_app(init_database: bool = True) -> FastAPI:
    app = FastAPI(
        title="Storefront API",
        version="1.0.0",
        lifespan=lifespan if init_database else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[FRONTEND_URL],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH"],
        allow_headers=["Content-Type", "Authorization", SESSION_HEADER],
        expose_headers=[SESSION_HEADER],
    )

    app.middleware("http")(session_middleware)
    register_error_handlers(app)

    # Include routers
    app.include_router(health.router, prefix=API_PREFIX)
    app.include_router(products.router, prefix=API_PREFIX)
    app.include_router(carts.router, prefix=API_PREFIX)
    app.include_router(orders.router, prefix=API_PREFIX)

    @app.get("/", include_in_schema=False)
    def root():
        return {
            "message": "Welcome to The Souled Store API",
            "version": app.version,
            "endpoints": {
                "products": f"{API_PREFIX}/products",
                "cart": f"{API_PREFIX}/cart",
                "orders": f"{API_PREFIX}/orders",
                "health": f"{API_PREFIX}/health",
            },
        }

    return app
