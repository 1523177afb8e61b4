# app/repos/product_repo.py
from typing import List, Tuple

from sqlalchemy import select, func, or_
from sqlalchemy.orm import Session

from app.data.models.product import ProductModel
from app.domain.schemas import ProductQuery

_SORTS = {
    "price-low": (ProductModel.price.asc(),),
    "price-high": (ProductModel.price.desc(),),
    "rating": (ProductModel.rating.desc().nulls_last(),),
    "featured": (ProductModel.featured.desc(), ProductModel.created_at.desc()),
}


def _filtered(stmt, category: str, search: str, with_description: bool = False):
    if category != "all":
        stmt = stmt.where(ProductModel.category == category)

    term = search.strip()
    if term:
        pattern = f"%{term}%"
        if with_description:
            stmt = stmt.where(or_(ProductModel.name.ilike(pattern), ProductModel.description.ilike(pattern)))
        else:
            stmt = stmt.where(ProductModel.name.ilike(pattern))
    return stmt


class ProductRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_product(self, product_id: int) -> ProductModel | None:
        return self.db.get(ProductModel, product_id)

    def list_products(self, query: ProductQuery) -> Tuple[List[ProductModel], int]:
        stmt = _filtered(select(ProductModel), query.category, query.search)
        stmt = stmt.order_by(*_SORTS[query.sort_by], ProductModel.id.asc())
        stmt = stmt.offset(query.offset).limit(query.limit)
        products = list(self.db.execute(stmt).scalars().all())

        #total liczony z tymi samymi filtrami co strona
        count_stmt = _filtered(select(func.count(ProductModel.id)), query.category, query.search)
        total = self.db.execute(count_stmt).scalar_one()

        return products, total

    def search(self, term: str, category: str, sort_by: str) -> List[ProductModel]:
        stmt = _filtered(select(ProductModel), category, term, with_description=True)
        order = _SORTS[sort_by] if sort_by != "featured" else (ProductModel.featured.desc(),)
        stmt = stmt.order_by(*order, ProductModel.id.asc())
        return list(self.db.execute(stmt).scalars().all())

    def featured(self, limit: int = 6) -> List[ProductModel]:
        stmt = (
            select(ProductModel)
            .where(ProductModel.featured.is_(True), ProductModel.in_stock.is_(True))
            .order_by(ProductModel.created_at.desc(), ProductModel.id.desc())
            .limit(limit)
        )
        return list(self.db.execute(stmt).scalars().all())

    def categories(self) -> List[str]:
        stmt = (
            select(ProductModel.category)
            .where(ProductModel.category.is_not(None))
            .distinct()
            .order_by(ProductModel.category)
        )
        return list(self.db.execute(stmt).scalars().all())
