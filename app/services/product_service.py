# app/services/product_service.py
import math

from sqlalchemy.orm import Session

from app.domain.errors import NotFoundError, ValidationError
from app.domain.schemas import (
    ProductQuery,
    ProductOut,
    Pagination,
    ProductListData,
    ProductsData,
    ProductData,
    CategoryOut,
    CategoriesData,
    SearchData,
)
from app.repos.product_repo import ProductRepo

FEATURED_LIMIT = 6
MIN_SEARCH_LENGTH = 2


class ProductService:
    """Katalog tylko do odczytu: filtrowanie, sortowanie, paginacja."""

    def __init__(self, db: Session):
        self.repo = ProductRepo(db)

    def list_products(self, query: ProductQuery) -> ProductListData:
        products, total = self.repo.list_products(query)
        return ProductListData(
            products=[ProductOut.model_validate(p) for p in products],
            pagination=Pagination(
                page=query.page,
                limit=query.limit,
                total=total,
                total_pages=math.ceil(total / query.limit),
            ),
        )

    def featured(self) -> ProductsData:
        products = self.repo.featured(limit=FEATURED_LIMIT)
        return ProductsData(products=[ProductOut.model_validate(p) for p in products])

    def categories(self) -> CategoriesData:
        categories = [CategoryOut(name="All", value="all")]
        categories += [
            CategoryOut(name=c[:1].upper() + c[1:], value=c)
            for c in self.repo.categories()
            if c
        ]
        return CategoriesData(categories=categories)

    def get_product(self, product_id: int) -> ProductData:
        product = self.repo.get_product(product_id)
        if not product:
            raise NotFoundError("Product not found")
        return ProductData(product=ProductOut.model_validate(product))

    def search(self, term: str, category: str = "all", sort_by: str = "featured") -> SearchData:
        if len(term.strip()) < MIN_SEARCH_LENGTH:
            raise ValidationError(
                [{"field": "query", "message": "Search query must be at least 2 characters long"}],
                message="Search query must be at least 2 characters long",
            )

        products = self.repo.search(term, category, sort_by)
        return SearchData(
            products=[ProductOut.model_validate(p) for p in products],
            search_query=term,
            total_results=len(products),
        )
