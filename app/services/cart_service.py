from decimal import Decimal
from sqlalchemy.orm import Session
from app.domain.errors import NotFoundError, OutOfStockError
from app.domain.pricing import summarize
from app.domain.schemas import (
    CartData,
    CartLineOut,
    CartSummaryOut,
    CartItemRef,
    CartItemData,
)
from app.repos.cart_repo import CartRepo
from app.repos.product_repo import ProductRepo
from app.utils.settings import TAX_RATE
from app.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Koszyk per uzytkownik (user_id z rozwiazanej sesji).
    commands (add, set_quantity, remove, clear) modyfikuja stan
    query (get_cart) tylko odczyt, zawsze z bazy, ceny live
    """

    def __init__(self, db: Session, tax_rate: Decimal = TAX_RATE):
        self.repo = CartRepo(db)
        self.products = ProductRepo(db)
        self.tax_rate = tax_rate

    #query - odczyt
    def get_cart(self, user_id: int) -> CartData:
        lines = self.repo.get_lines(user_id)

        items = [
            CartLineOut(
                id=product.id,
                name=product.name,
                price=product.price,
                original_price=product.original_price,
                image=product.image_url,
                in_stock=product.in_stock,
                colors=product.colors or [],
                sizes=product.sizes or [],
                quantity=item.quantity,
                cart_item_id=item.id,
            )
            for item, product in lines
        ]

        totals = summarize(((i.price, i.quantity) for i in items), self.tax_rate)

        return CartData(
            items=items,
            summary=CartSummaryOut(
                subtotal=totals.subtotal,
                tax_amount=totals.tax_amount,
                total=totals.total,
                item_count=totals.item_count,
            ),
        )

    #commands
    def add_product(self, user_id: int, product_id: int, quantity: int) -> CartItemData:
        product = self.products.get_product(product_id)

        if not product:
            raise NotFoundError("Product not found")

        if not product.in_stock:
            logger.warning(f"User {user_id} tried to add out-of-stock product {product_id}")
            raise OutOfStockError()

        # suma moze przekroczyc 99, walidowany jest tylko pojedynczy request
        item = self.repo.add_quantity(user_id, product_id, quantity)
        self.repo.commit()

        logger.info(f"Product {product_id} x{quantity} added to cart of user {user_id}, now {item.quantity}")

        return CartItemData(cart_item=self._ref(item))

    def set_quantity(self, user_id: int, product_id: int, quantity: int) -> CartItemData | None:
        """
        quantity 0 usuwa pozycje (brak pozycji to nie blad) i zwraca None.
        quantity > 0 tylko dla istniejacej pozycji, tworzy wylacznie add_product.
        """
        if quantity == 0:
            self.remove_product(user_id, product_id)
            return None

        item = self.repo.set_quantity(user_id, product_id, quantity)
        if not item:
            self.repo.rollback()
            raise NotFoundError("Cart item not found")

        self.repo.commit()

        logger.info(f"Cart item {item.id} of user {user_id} set to {quantity}")

        return CartItemData(cart_item=self._ref(item))

    def remove_product(self, user_id: int, product_id: int):
        deleted = self.repo.delete_cart_item(user_id, product_id)
        self.repo.commit()

        logger.info(f"Removed product {product_id} from cart of user {user_id} ({deleted} rows)")

    def clear(self, user_id: int):
        deleted = self.repo.clear(user_id)
        self.repo.commit()

        logger.info(f"Cleared cart of user {user_id} ({deleted} rows)")

    @staticmethod
    def _ref(item) -> CartItemRef:
        return CartItemRef(id=item.id, product_id=item.product_id, quantity=item.quantity)
