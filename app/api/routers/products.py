# app/api/routers/products.py
from typing import Annotated

from fastapi import APIRouter, Query

from app.api.deps import DbSession
from app.domain.schemas import (
    ApiResponse,
    SortBy,
    ProductQuery,
    ProductListData,
    ProductsData,
    ProductData,
    CategoriesData,
    SearchData,
)
from app.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=ApiResponse[ProductListData])
def list_products(
    db: DbSession,
    category: Annotated[str, Query(max_length=50)] = "all",
    sort_by: Annotated[SortBy, Query(alias="sortBy")] = "featured",
    search: Annotated[str, Query(max_length=100)] = "",
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=50)] = 20,
):
    query = ProductQuery(category=category, sort_by=sort_by, search=search, page=page, limit=limit)
    return ApiResponse(data=ProductService(db).list_products(query))


@router.get("/featured", response_model=ApiResponse[ProductsData])
def featured_products(db: DbSession):
    return ApiResponse(data=ProductService(db).featured())


@router.get("/categories", response_model=ApiResponse[CategoriesData])
def categories(db: DbSession):
    return ApiResponse(data=ProductService(db).categories())


@router.get("/search/{query}", response_model=ApiResponse[SearchData])
def search_products(
    query: str,
    db: DbSession,
    category: Annotated[str, Query(max_length=50)] = "all",
    sort_by: Annotated[SortBy, Query(alias="sortBy")] = "featured",
):
    return ApiResponse(data=ProductService(db).search(query, category=category, sort_by=sort_by))


@router.get("/{product_id}", response_model=ApiResponse[ProductData])
def get_product(product_id: int, db: DbSession):
    return ApiResponse(data=ProductService(db).get_product(product_id))
