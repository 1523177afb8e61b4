# app/domain/pricing.py
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Tuple

from app.utils.settings import TAX_RATE, ORDER_NUMBER_PREFIX


@dataclass(frozen=True)
class Totals:
    subtotal: int
    tax_amount: int
    total: int
    item_count: int


def compute_tax(subtotal: int, tax_rate: Decimal = TAX_RATE) -> int:
    """Podatek od calej sumy, zaokraglony do pelnych rupii (half up)."""
    amount = Decimal(subtotal) * Decimal(str(tax_rate))
    return int(amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def summarize(lines: Iterable[Tuple[int, int]], tax_rate: Decimal = TAX_RATE) -> Totals:
    """
    lines: pary (cena, ilosc).

    Podatek liczony raz od subtotal, nie per pozycja,
    inaczej zaokraglenia sie sumuja.
    """
    subtotal = 0
    item_count = 0
    for price, quantity in lines:
        subtotal += price * quantity
        item_count += quantity

    tax_amount = compute_tax(subtotal, tax_rate)
    return Totals(
        subtotal=subtotal,
        tax_amount=tax_amount,
        total=subtotal + tax_amount,
        item_count=item_count,
    )


def format_order_number(order_id: int, prefix: str = ORDER_NUMBER_PREFIX) -> str:
    return f"{prefix}-{order_id:06d}"
