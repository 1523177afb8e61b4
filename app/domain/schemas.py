# app/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Generic, List, Literal, Optional, TypeVar
from datetime import datetime

T = TypeVar("T")

SortBy = Literal["featured", "price-low", "price-high", "rating"]


class CamelModel(BaseModel):
    """Pola snake_case w Pythonie, camelCase na drucie (tak jak oczekuje frontend)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ApiResponse(BaseModel, Generic[T]):
    """Wspolna koperta dla wszystkich odpowiedzi."""

    status: Literal["success", "error"] = "success"
    message: Optional[str] = None
    data: Optional[T] = None
    error: Optional[str] = None


# =====================================================
# REQUESTS
# =====================================================
class CartItemIn(CamelModel):
    """Schema dla dodawania produktu do koszyka."""

    product_id: int = Field(..., gt=0, description="ID produktu")
    quantity: int = Field(..., ge=1, le=99, description="Ilosc produktu (1-99)")


class CartItemUpdate(CamelModel):
    """Schema dla zmiany ilosci; 0 usuwa pozycje."""

    quantity: int = Field(..., ge=0, le=99, description="Nowa ilosc (0-99)")


class ProductQuery(CamelModel):
    category: str = Field("all", max_length=50)
    sort_by: SortBy = "featured"
    search: str = Field("", max_length=100)
    page: int = Field(1, ge=1)
    limit: int = Field(20, ge=1, le=50)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


# =====================================================
# PRODUCTS
# =====================================================
class ProductOut(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    price: int
    original_price: Optional[int] = None
    category: Optional[str] = None
    image_url: Optional[str] = None
    rating: Optional[float] = None
    in_stock: bool
    featured: bool
    colors: List[str] = []
    sizes: List[str] = []
    created_at: datetime


class Pagination(CamelModel):
    page: int
    limit: int
    total: int
    total_pages: int


class ProductListData(CamelModel):
    products: List[ProductOut]
    pagination: Pagination


class ProductsData(CamelModel):
    products: List[ProductOut]


class ProductData(CamelModel):
    product: ProductOut


class CategoryOut(CamelModel):
    name: str
    value: str


class CategoriesData(CamelModel):
    categories: List[CategoryOut]


class SearchData(CamelModel):
    products: List[ProductOut]
    search_query: str
    total_results: int


# =====================================================
# CART
# =====================================================
class CartLineOut(CamelModel):
    """Pozycja koszyka z aktualnymi (live) danymi produktu."""

    id: int
    name: str
    price: int
    original_price: Optional[int] = None
    image: Optional[str] = None
    in_stock: bool
    colors: List[str] = []
    sizes: List[str] = []
    quantity: int
    cart_item_id: int


class CartSummaryOut(CamelModel):
    subtotal: int
    tax_amount: int
    total: int
    item_count: int


class CartData(CamelModel):
    items: List[CartLineOut]
    summary: CartSummaryOut


class CartItemRef(CamelModel):
    id: int
    product_id: int
    quantity: int


class CartItemData(CamelModel):
    cart_item: CartItemRef


# =====================================================
# ORDERS
# =====================================================
class OrderItemOut(CamelModel):
    name: str
    price: int
    quantity: int
    total: int


class OrderOut(CamelModel):
    id: int
    order_number: str
    subtotal: int
    tax_amount: int
    total: int
    status: str
    created_at: datetime
    items: List[OrderItemOut]
    item_count: int


class OrderData(CamelModel):
    order: OrderOut


class OrdersData(CamelModel):
    orders: List[OrderOut]
