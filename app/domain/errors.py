# app/domain/errors.py
"""
Bledy domenowe. Serwisy je rzucaja, handlery w app.api.errors
zamieniaja je na koperte {status: "error", message, data, error}.
"""
from typing import Any, Dict, List


class StoreError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message: str | None = None, data: Dict[str, Any] | None = None):
        super().__init__(message or self.message)
        self.message = message or self.message
        self.data = data


class ValidationError(StoreError):
    status_code = 400
    message = "Validation failed"

    def __init__(self, details: List[Dict[str, str]], message: str | None = None):
        super().__init__(message, data={"details": details})
        self.details = details


class NotFoundError(StoreError):
    status_code = 404
    message = "Not found"


class OutOfStockError(StoreError):
    status_code = 400
    message = "Product is out of stock"


class StockConflictError(StoreError):
    status_code = 400
    message = "Some items in your cart are out of stock"

    def __init__(self, items: List[Dict[str, Any]]):
        super().__init__(data={"outOfStockItems": items})
        self.items = items


class EmptyCartError(StoreError):
    status_code = 400
    message = "Cart is empty"


class ConflictError(StoreError):
    # zarezerwowane, upserty sa atomowe wiec nic tego teraz nie rzuca
    status_code = 409
    message = "Conflicting concurrent update"


class UnexpectedError(StoreError):
    status_code = 500
    message = "Something went wrong"
