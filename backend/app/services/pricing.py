"""Quotation pricing: line subtotals, line VAT amounts and document totals.

All arithmetic is Decimal and carries full precision. Nothing here rounds for
storage; ``round_for_display`` exists for presentation only.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Iterable, List, Optional

ZERO = Decimal("0")
HUNDRED = Decimal("100")
CENT = Decimal("0.01")


class InvalidInput(ValueError):
    """A negative amount or an out-of-range VAT percentage."""


@dataclass(frozen=True)
class DocumentTotals:
    subtotal: Decimal
    vat_amount: Decimal
    total: Decimal


@dataclass(frozen=True)
class PricedLine:
    scope_of_work: str
    description: Optional[str]
    quantity: Decimal
    rate: Decimal
    vat_rate: Decimal
    sub_total: Decimal
    sort_order: int


def _to_decimal(value: Any, field: str) -> Decimal:
    if value is None or isinstance(value, bool):
        raise InvalidInput(f"{field} must be a number")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except InvalidOperation as exc:
            raise InvalidInput(f"{field} must be a number") from exc
    if not result.is_finite():
        raise InvalidInput(f"{field} must be a finite number")
    return result


def _non_negative(value: Any, field: str) -> Decimal:
    amount = _to_decimal(value, field)
    if amount < ZERO:
        raise InvalidInput(f"{field} must not be negative")
    return amount


def _percentage(value: Any) -> Decimal:
    pct = _to_decimal(value, "vat_percentage")
    if pct < ZERO or pct > HUNDRED:
        raise InvalidInput("vat_percentage must be between 0 and 100")
    return pct


def compute_line_subtotal(quantity: Any, rate: Any) -> Decimal:
    """Return ``quantity * rate`` exactly; negative inputs raise InvalidInput."""
    return _non_negative(quantity, "quantity") * _non_negative(rate, "rate")


def compute_line_vat_amount(subtotal: Any, vat_percentage: Any) -> Decimal:
    """VAT amount for a line subtotal at the given percentage.

    The result is stored on the line as-is and is not revisited when the
    document percentage changes later.
    """
    return _non_negative(subtotal, "subtotal") * _percentage(vat_percentage) / HUNDRED


def _line_sub_total(item: Any) -> Any:
    if isinstance(item, (Decimal, int, float, str)) and not isinstance(item, bool):
        return item
    return getattr(item, "sub_total")


def compute_document_totals(items: Iterable[Any], vat_percentage: Any) -> DocumentTotals:
    """Sum line subtotals and apply the document VAT percentage.

    ``items`` may hold ORM rows, ``PricedLine`` objects or bare amounts.
    An empty list yields zero for every total.
    """
    pct = _percentage(vat_percentage)
    subtotal = sum((_non_negative(_line_sub_total(item), "sub_total") for item in items), ZERO)
    vat_amount = subtotal * pct / HUNDRED
    return DocumentTotals(subtotal=subtotal, vat_amount=vat_amount, total=subtotal + vat_amount)


def price_line_items(items: Iterable[Any], vat_percentage: Any) -> List[PricedLine]:
    """Compute subtotal and VAT amount for each submitted line.

    A line keeps its own ``vat_rate`` when one is given; otherwise the amount
    is derived from ``vat_percentage``. ``sort_order`` defaults to the index.
    """
    priced = []
    for index, item in enumerate(items):
        sub_total = compute_line_subtotal(item.quantity, item.rate)
        vat_rate = getattr(item, "vat_rate", None)
        if vat_rate is None:
            vat_rate = compute_line_vat_amount(sub_total, vat_percentage)
        else:
            vat_rate = _non_negative(vat_rate, "vat_rate")
        sort_order = getattr(item, "sort_order", None)
        priced.append(
            PricedLine(
                scope_of_work=item.scope_of_work,
                description=getattr(item, "description", None) or None,
                quantity=_to_decimal(item.quantity, "quantity"),
                rate=_to_decimal(item.rate, "rate"),
                vat_rate=vat_rate,
                sub_total=sub_total,
                sort_order=index if sort_order is None else sort_order,
            )
        )
    return priced


def round_for_display(value: Any) -> Decimal:
    return _to_decimal(value, "value").quantize(CENT, rounding=ROUND_HALF_UP)
